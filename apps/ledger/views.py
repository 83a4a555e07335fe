from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .exceptions import (
    InvalidPriceError,
    InvalidQuantityError,
    PriceNotSetError,
    RecordLockedError,
)
from .serializers import (
    # Input serializers
    PriceInputSerializer,
    EntryQuerySerializer,
    QuantityInputSerializer,
    RecordLookupSerializer,
    # Response serializers
    PriceSerializer,
    ConsumptionRecordSerializer,
    EntryStateSerializer,
    EntrySubmitResponseSerializer,
    PriceUpdateResponseSerializer,
    ErrorSerializer,
)
from .services import EntryWorkflowService, get_current_price
from .models import ConsumptionRecord

PRICE_UPDATED_MESSAGE = 'Price updated successfully.'


@extend_schema(
    methods=['GET'],
    responses={200: PriceSerializer},
    description="Get the active per-liter price (null when no price is set).",
    tags=['ledger'],
)
@extend_schema(
    methods=['PUT'],
    request=PriceInputSerializer,
    responses={
        200: PriceUpdateResponseSerializer,
        400: ErrorSerializer,
    },
    description="Replace the per-liter price.",
    tags=['ledger'],
)
@api_view(['GET', 'PUT'])
def price(request):
    """Read or replace the active price - thin HTTP handler."""
    if request.method == 'GET':
        return Response(PriceSerializer({'price': get_current_price()}).data)

    input_serializer = PriceInputSerializer(data=request.data)
    input_serializer.is_valid(raise_exception=True)

    try:
        record, state = EntryWorkflowService.change_price(
            price=input_serializer.validated_data['price']
        )
    except InvalidPriceError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    return Response({
        'message': PRICE_UPDATED_MESSAGE,
        'price': PriceSerializer(record).data['price'],
        'state': EntryStateSerializer(state).data,
    })


@extend_schema(
    methods=['GET'],
    parameters=[
        OpenApiParameter('date', OpenApiTypes.DATE, description='Selected date (YYYY-MM-DD), defaults to today'),
    ],
    responses={200: EntryStateSerializer},
    description="Get the entry workflow state for a date.",
    tags=['ledger'],
)
@extend_schema(
    methods=['POST'],
    request=QuantityInputSerializer,
    responses={
        201: EntrySubmitResponseSerializer,
        400: ErrorSerializer,
        409: ErrorSerializer,
    },
    description="Log the quantity for a date; the date is then locked and the form advances a day.",
    tags=['ledger'],
)
@api_view(['GET', 'POST'])
def entry(request):
    """Entry workflow state and quantity submission - thin HTTP handler."""
    if request.method == 'GET':
        query_serializer = EntryQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)
        state = EntryWorkflowService.load(query_serializer.validated_data.get('date'))
        return Response(EntryStateSerializer(state).data)

    input_serializer = QuantityInputSerializer(data=request.data)
    input_serializer.is_valid(raise_exception=True)
    params = input_serializer.validated_data

    try:
        record, next_state = EntryWorkflowService.submit_quantity(
            selected_date=params['date'],
            quantity=params['quantity'],
        )
    except InvalidQuantityError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except (PriceNotSetError, RecordLockedError) as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

    return Response({
        'record': ConsumptionRecordSerializer(record).data,
        'next': EntryStateSerializer(next_state).data,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    parameters=[
        OpenApiParameter('date', OpenApiTypes.DATE, description='Exact date (YYYY-MM-DD)', required=True),
    ],
    responses={200: ConsumptionRecordSerializer(many=True)},
    description="Exact-date lookup in the ledger.",
    tags=['ledger'],
)
@api_view(['GET'])
def records(request):
    """Records stored for exactly one date - thin HTTP handler."""
    query_serializer = RecordLookupSerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    queryset = ConsumptionRecord.objects.filter(
        date=query_serializer.validated_data['date']
    ).order_by('created_at')

    return Response(ConsumptionRecordSerializer(queryset, many=True).data)
