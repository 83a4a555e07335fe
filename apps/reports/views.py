from django.http import HttpResponse
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from drf_spectacular.types import OpenApiTypes
from .serializers import (
    MonthlyReportQuerySerializer,
    MonthlyReportSerializer,
    ErrorSerializer,
)
from .services import (
    XLSX_CONTENT_TYPE,
    export_filename,
    get_monthly_report,
    render_xlsx,
)

REPORT_PARAMETERS = [
    OpenApiParameter('month', OpenApiTypes.STR, description='Month (YYYY-MM), defaults to the current month'),
    OpenApiParameter('sort_by', OpenApiTypes.STR, description="Sort field: 'date' or 'quantity'", default='quantity'),
    OpenApiParameter('order', OpenApiTypes.STR, description="Sort direction: 'asc' or 'desc'", default='desc'),
]


def report_from_query(query_params) -> dict:
    """Validate report query parameters and build the report."""
    query_serializer = MonthlyReportQuerySerializer(data=query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    return get_monthly_report(
        month=params['month'],
        sort_field=params['sort_by'],
        sort_order=params['order'],
    )


@extend_schema(
    parameters=REPORT_PARAMETERS,
    responses={
        200: MonthlyReportSerializer,
        400: ErrorSerializer,
    },
    description="Get a month's records joined with the current price, with totals.",
    tags=['reports'],
)
@api_view(['GET'])
def monthly_report(request):
    """Monthly report - thin HTTP handler."""
    report = report_from_query(request.query_params)
    return Response(MonthlyReportSerializer(report).data)


@extend_schema(
    parameters=REPORT_PARAMETERS,
    responses={
        (200, XLSX_CONTENT_TYPE): OpenApiResponse(OpenApiTypes.BINARY, description='milk_report_<month>.xlsx'),
        400: ErrorSerializer,
    },
    description="Download the monthly report as an xlsx workbook.",
    tags=['reports'],
)
@api_view(['GET'])
def monthly_report_export(request):
    """Monthly report spreadsheet download - thin HTTP handler."""
    report = report_from_query(request.query_params)
    return xlsx_response(report)


def xlsx_response(report: dict) -> HttpResponse:
    response = HttpResponse(render_xlsx(report), content_type=XLSX_CONTENT_TYPE)
    response['Content-Disposition'] = f'attachment; filename="{export_filename(report["month"])}"'
    return response
