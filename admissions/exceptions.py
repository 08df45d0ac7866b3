"""
Error types and the DRF exception handler.

Every failed API call answers with the same envelope::

    {"ok": false, "error": {"code": "...", "message": ...}}

``message`` is a string for request-level errors and the field error
mapping for validation errors (the admission form highlights fields
from it).
"""
import logging

from django.http import Http404
from rest_framework import exceptions
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class TransliterationServiceError(RuntimeError):
    """A remote transliteration provider could not produce a result."""


class InvalidRequest(exceptions.APIException):
    """400 with a single message, for errors not tied to one input field."""
    status_code = 400
    default_detail = 'Invalid request.'
    default_code = 'invalid_request'


class InvalidCredentials(InvalidRequest):
    default_detail = 'Invalid credentials'
    default_code = 'invalid_credentials'


def _error_code(exc) -> str:
    if isinstance(exc, Http404):
        return exceptions.NotFound.default_code
    if isinstance(exc, exceptions.ValidationError):
        return 'validation_error'
    return getattr(exc, 'default_code', None) or 'api_error'


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        view = context.get('view')
        logger.exception('unhandled error in %s', type(view).__name__ if view else 'api view')
        return Response({'ok': False, 'error': {'code': 'server_error', 'message': 'Internal server error'}},
                        status=500)
    if isinstance(resp.data, dict):
        message = resp.data.get('detail') or resp.data
    else:
        message = resp.data
    out = Response({'ok': False, 'error': {'code': _error_code(exc), 'message': message}}, status=resp.status_code)
    for header in ('WWW-Authenticate', 'Retry-After'):
        if header in resp:
            out[header] = resp[header]
    return out
