"""
Project-wide DRF exception handler.

Store failures (``DatabaseError``) never reach the client as a 500 page:
they are logged and answered with a neutral 503 payload. The user retries
by resubmitting; nothing is retried automatically.
"""
import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """Delegate to DRF, then map unhandled store failures to 503."""
    response = exception_handler(exc, context)
    if response is not None:
        return response

    if isinstance(exc, DatabaseError):
        view = context.get('view')
        logger.exception(
            "Store failure in %s", view.__class__.__name__ if view else 'unknown view'
        )
        return Response(
            {'error': 'Service unavailable', 'status': 503},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    return None
