"""
Project-wide API error handling.

DRF exceptions are rendered as ``{"message": ..., "errors": ...}`` so every
endpoint fails with the same body shape the dashboard reads. Exceptions DRF
does not recognise (database or filesystem failures that escaped a service)
are logged with their traceback and reported as a generic 500.

Usage:
    REST_FRAMEWORK = {
        'EXCEPTION_HANDLER': 'config.exceptions.api_exception_handler',
    }
"""
import logging

from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ServerError(APIException):
    """Storage or unexpected failure. Details stay in the server log."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Server error'
    default_code = 'server_error'


def _summarize(detail):
    """Build a one-line message naming the fields that failed validation."""
    if isinstance(detail, dict):
        fields = [name for name in detail if name != 'non_field_errors']
        if fields:
            return f"Invalid or missing field(s): {', '.join(fields)}"
        return _summarize(detail.get('non_field_errors', []))
    if isinstance(detail, list) and detail:
        return str(detail[0])
    return str(detail) or 'Invalid input'


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.error(
            "Unhandled error in %s",
            view.__class__.__name__ if view is not None else 'unknown view',
            exc_info=exc,
        )
        return Response(
            {'message': ServerError.default_detail},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, ValidationError):
        response.data = {
            'message': _summarize(exc.detail),
            'errors': response.data,
        }
    elif isinstance(response.data, dict) and 'detail' in response.data:
        response.data = {'message': str(response.data['detail'])}

    return response
