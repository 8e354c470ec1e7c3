# middleware.py
"""
Request logging middleware.

Logs every HTTP request with its status code, duration, client IP and the
authenticated user (when DRF authenticated one during the request).
"""

import time
from typing import Any

from django.http import HttpRequest

from propertyhubutils.log_helpers import get_client_ip
from propertyhubutils.logging import get_logger

logger = get_logger(__name__)


class RequestLoggingMiddleware:
    """
    Middleware that logs all HTTP requests and responses with timing.

    Logs are structured JSON in production, formatted text in development.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> Any:
        start_time = time.monotonic()

        response = self.get_response(request)

        duration = time.monotonic() - start_time

        # DRF copies the authenticated user onto the underlying HttpRequest
        user = getattr(request, "user", None)
        user_id = getattr(user, "user_id", None)

        logger.info(
            "http_request",
            request_id=getattr(request, "request_id", None),
            method=request.method,
            path=request.path,
            status_code=response.status_code,
            duration_seconds=round(duration, 4),
            user_id=user_id,
            client_ip=get_client_ip(request),
            user_agent=request.META.get("HTTP_USER_AGENT", "")[:200],
        )

        return response
