"""
Tests for the structured logging helpers.
"""

import logging

import pytest
import structlog
from django.http import HttpResponse
from django.test import RequestFactory

from propertyhubutils.log_helpers import get_client_ip
from propertyhubutils.logging import (
    CeleryLogger,
    StructlogMiddleware,
    build_dict_config,
    build_processors,
    resolve_level,
)


@pytest.mark.unit
class TestLoggingConfig:
    def test_unknown_level_falls_back_to_info(self, settings):
        settings.LOG_LEVEL = "chatty"

        assert resolve_level() == logging.INFO

    def test_level_is_read_from_settings(self, settings):
        settings.LOG_LEVEL = "warning"

        assert resolve_level() == logging.WARNING

    def test_json_formatter_outside_debug(self, settings):
        settings.DEBUG = False
        settings.LOG_TO_FILE = False

        config = build_dict_config()

        assert config["handlers"]["stdout"]["formatter"] == "json"
        assert set(config["handlers"]) == {"stdout"}
        assert config["loggers"]["propertyhub"]["level"] == "INFO"

    def test_file_handlers_when_enabled(self, settings, tmp_path):
        settings.LOG_TO_FILE = True
        settings.LOGS_DIR = tmp_path / "logs"

        config = build_dict_config()

        assert {"file", "error_file"} <= set(config["handlers"])
        assert config["handlers"]["error_file"]["level"] == "ERROR"
        assert "file" in config["loggers"]["propertyhubutils"]["handlers"]
        assert (tmp_path / "logs").is_dir()

    def test_processor_chain_ends_in_renderer(self):
        assert isinstance(build_processors(json_output=True)[-1], structlog.processors.JSONRenderer)
        assert isinstance(build_processors(json_output=False)[-1], structlog.dev.ConsoleRenderer)


@pytest.mark.unit
class TestStructlogMiddleware:
    def test_generates_request_id(self):
        seen = {}

        def view(request):
            seen.update(structlog.contextvars.get_contextvars())
            return HttpResponse("ok")

        request = RequestFactory().get("/api/core/listings/")
        response = StructlogMiddleware(view)(request)

        assert response["X-Request-ID"] == request.request_id
        assert seen["request_id"] == request.request_id
        assert seen["request_path"] == "/api/core/listings/"
        assert structlog.contextvars.get_contextvars() == {}

    def test_reuses_incoming_request_id(self):
        request = RequestFactory().get("/", HTTP_X_REQUEST_ID="trace-42")

        response = StructlogMiddleware(lambda r: HttpResponse())(request)

        assert response["X-Request-ID"] == "trace-42"


@pytest.mark.unit
def test_celery_logger_outside_task():
    assert CeleryLogger.get_logger(__name__) is not None


@pytest.mark.unit
@pytest.mark.parametrize(
    "meta,expected",
    [
        ({"HTTP_X_FORWARDED_FOR": "203.0.113.9, 10.0.0.1"}, "203.0.113.9"),
        ({"REMOTE_ADDR": "198.51.100.4"}, "198.51.100.4"),
    ],
)
def test_get_client_ip(meta, expected):
    request = RequestFactory().get("/", **meta)
    if "REMOTE_ADDR" not in meta:
        request.META.pop("REMOTE_ADDR", None)

    assert get_client_ip(request) == expected
