# propertyhubutils/logging.py
"""
Structured logging for PropertyHub.

structlog renders every event: coloured key/value lines while DEBUG is on,
one JSON object per line otherwise. Records emitted through plain
``logging.getLogger`` (Django, Celery, third-party code) share the same
handlers and are formatted by python-json-logger outside development.

Moderation code logs events, not sentences::

    logger = get_logger(__name__)
    logger.info("listing_flagged", listing_id=12, report_count=3)
"""

import logging
import logging.config
import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path

import structlog
from django.conf import settings
from structlog.types import EventDict, Processor, WrappedLogger

APP_NAME = "propertyhub"
REQUEST_ID_HEADER = "X-Request-ID"

_LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
_APP_LOGGERS = ("propertyhub", "propertyhubutils")


def _debug_enabled() -> bool:
    return bool(getattr(settings, "DEBUG", False))


def resolve_level() -> int:
    """Numeric level for ``settings.LOG_LEVEL``; unknown names fall back to INFO."""
    level = logging.getLevelName(str(getattr(settings, "LOG_LEVEL", "INFO")).upper())
    return level if isinstance(level, int) else logging.INFO


def _stamp(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    event_dict["app"] = APP_NAME
    event_dict["environment"] = getattr(settings, "ENVIRONMENT", "unknown")
    event_dict["timestamp"] = (
        datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    )
    return event_dict


def _drop_traceback_below_error(
    _: WrappedLogger, __: str, event_dict: EventDict
) -> EventDict:
    # Tracebacks on warnings (e.g. a failed best-effort notification) stay out of JSON
    if event_dict.get("level") not in ("error", "critical"):
        event_dict.pop("exc_info", None)
        event_dict.pop("exception", None)
    return event_dict


def build_processors(json_output: bool) -> list[Processor]:
    """Processor chain ending in the JSON or the console renderer."""
    chain: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _stamp,
        structlog.processors.StackInfoRenderer(),
    ]
    if json_output:
        chain += [
            _drop_traceback_below_error,
            structlog.processors.format_exc_info,
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(),
        ]
    else:
        chain.append(
            structlog.dev.ConsoleRenderer(
                colors=True, exception_formatter=structlog.dev.plain_traceback
            )
        )
    return chain


def _log_file_handlers(directory: Path) -> dict:
    directory.mkdir(parents=True, exist_ok=True)
    rotating = "logging.handlers.RotatingFileHandler"
    return {
        "file": {
            "class": rotating,
            "level": "DEBUG",
            "filename": str(directory / "propertyhub.log"),
            "maxBytes": _LOG_FILE_MAX_BYTES,
            "backupCount": 5,
            "formatter": "json",
        },
        "error_file": {
            "class": rotating,
            "level": "ERROR",
            "filename": str(directory / "propertyhub_error.log"),
            "maxBytes": _LOG_FILE_MAX_BYTES,
            "backupCount": 10,
            "formatter": "json",
        },
    }


def build_dict_config() -> dict:
    """
    ``logging.config.dictConfig`` payload for the stdlib side.

    With ``LOG_TO_FILE`` enabled, everything is also written to rotating JSON
    files under ``LOGS_DIR`` and errors get a file of their own.
    """
    level = resolve_level()
    debug = _debug_enabled()
    handlers = {
        "stdout": {
            "class": "logging.StreamHandler",
            "stream": sys.stdout,
            "level": level,
            "formatter": "plain" if debug else "json",
        }
    }
    if getattr(settings, "LOG_TO_FILE", False):
        logs_dir = Path(getattr(settings, "LOGS_DIR", Path(settings.BASE_DIR) / "logs"))
        handlers.update(_log_file_handlers(logs_dir))

    names = list(handlers)
    app_level = "DEBUG" if debug else "INFO"
    loggers = {
        "django": {"handlers": names, "level": level, "propagate": False},
        "celery": {"handlers": names, "level": "INFO", "propagate": False},
    }
    for name in _APP_LOGGERS:
        loggers[name] = {"handlers": names, "level": app_level, "propagate": False}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            },
            "plain": {"format": "{asctime} {levelname:<8} {name}: {message}", "style": "{"},
        },
        "handlers": handlers,
        "loggers": loggers,
        "root": {"handlers": names, "level": level},
    }


def configure_logging() -> None:
    """Apply the stdlib configuration, then point structlog at it. Called from ``PropertyHubConfig.ready``."""
    logging.config.dictConfig(build_dict_config())
    structlog.configure(
        processors=build_processors(json_output=not _debug_enabled()),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


class StructlogMiddleware:
    """
    Binds request_id, method and path into structlog's context for the
    duration of a request.

    An incoming X-Request-ID header is reused so a trace spans proxies; the
    id is echoed on the response either way.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.request_id = request_id
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            request_method=request.method,
            request_path=request.path,
        )
        try:
            response = self.get_response(request)
        finally:
            structlog.contextvars.clear_contextvars()
        response[REQUEST_ID_HEADER] = request_id
        return response


class CeleryLogger:
    """Loggers for Celery tasks, bound to the running task's id and retry count."""

    @staticmethod
    def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
        from celery import current_task

        logger = get_logger(name)
        request = getattr(current_task, "request", None)
        if request is not None and request.id:
            logger = logger.bind(
                task_name=current_task.name,
                task_id=request.id,
                task_retries=request.retries,
            )
        return logger


__all__ = [
    "CeleryLogger",
    "StructlogMiddleware",
    "build_dict_config",
    "build_processors",
    "configure_logging",
    "get_logger",
    "resolve_level",
]
