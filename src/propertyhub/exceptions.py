# propertyhub/exceptions.py
"""
Domain errors raised by the service layer and their HTTP rendering.

Services raise these; views let them propagate and the DRF exception
handler configured in REST_FRAMEWORK["EXCEPTION_HANDLER"] turns them into
``{"error": "<message>"}`` responses.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)


class PropertyHubError(Exception):
    """Base class for domain errors."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Request could not be processed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(PropertyHubError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InvalidRequestError(PropertyHubError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class ConflictError(PropertyHubError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict with the current state of the resource"


class ForbiddenError(PropertyHubError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "You do not have permission to perform this action"


def custom_exception_handler(exc, context):
    """Render domain errors; defer everything else to DRF."""
    if isinstance(exc, PropertyHubError):
        view = context.get("view")
        logger.info(
            "Domain error in %s: %s (%s)",
            view.__class__.__name__ if view else "unknown view",
            exc.message,
            exc.status_code,
        )
        set_rollback()
        return Response({"error": exc.message}, status=exc.status_code)

    return exception_handler(exc, context)
