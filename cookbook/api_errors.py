"""Map domain exceptions onto REST framework responses."""

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from cookbook.firebase_auth_services import AuthProviderError

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """Extend DRF's handler with Django ValidationError (400) and provider errors.

    Http404 and PermissionDenied are already mapped to 404/403 by DRF.
    """
    if isinstance(exc, DjangoValidationError):
        detail = exc.message_dict if hasattr(exc, "error_dict") else exc.messages
        exc = ValidationError(detail=detail)
    elif isinstance(exc, AuthProviderError):
        code = exc.status_code
        http_status = status.HTTP_400_BAD_REQUEST if code and 400 <= code < 500 else status.HTTP_502_BAD_GATEWAY
        return Response({"detail": exc.message}, status=http_status)
    return exception_handler(exc, context)
