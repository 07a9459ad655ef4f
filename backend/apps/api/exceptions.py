from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from django.http import Http404
from django.utils.translation import gettext as _, gettext_noop
from rest_framework import status
from rest_framework.exceptions import (
    MethodNotAllowed,
    NotFound,
    ParseError,
    UnsupportedMediaType,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.utils import error_response
from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="exception")

SERVER_ERROR_MESSAGE = gettext_noop("Something went wrong")


class ApplicationError(Exception):
    """
    Error raised from services or views that maps directly onto the error envelope.

    Args:
        code: Machine readable error code, e.g. ``NOT_FOUND``.
        message: Human readable explanation of the error.
        status_code: Optional explicit HTTP status. If omitted, code mapping is used.
        details: Optional structured details for clients.
        hint: Optional hint for remediation.
    """

    def __init__(
        self,
        code: str,
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
        hint: Optional[str] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        self.hint = hint

    def to_response(self) -> Response:
        return error_response(
            self.code,
            self.message,
            self.details,
            http_status=self.status_code,
            hint=self.hint,
        )


def global_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Central DRF exception handler returning the structured error envelope."""

    bound_logger = _bind_logger(context)

    if isinstance(exc, ApplicationError):
        bound_logger.info("Handled application error", code=exc.code, status=exc.status_code)
        return exc.to_response()

    response = drf_exception_handler(exc, context)
    if response is not None:
        code, message, details = _normalize_payload(exc, response.data)
        bound_logger.info("Converted API exception", code=code, status=response.status_code)
        return error_response(code, message, details, http_status=response.status_code)

    bound_logger.exception(
        "Unhandled exception bubbled to global handler",
        exception=exc.__class__.__name__,
    )
    return error_response(
        "SERVER_ERROR",
        _(SERVER_ERROR_MESSAGE),
        http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _bind_logger(context: Dict[str, Any]):
    log = logger
    view = context.get("view")
    request = context.get("request")
    if view:
        log = log.bind(view=type(view).__name__)
    if request is not None:
        log = log.bind(
            method=getattr(request, "method", None),
            path=getattr(request, "path", None),
        )
    return log


def _normalize_payload(exc: Exception, payload: Any) -> Tuple[str, str, Optional[Any]]:
    if isinstance(exc, ValidationError):
        return "VALIDATION_ERROR", _extract_message(payload, _("Validation failed")), payload
    if isinstance(exc, ParseError):
        return "VALIDATION_ERROR", _extract_message(payload, _("Malformed request")), None
    if isinstance(exc, (NotFound, Http404)):
        return "NOT_FOUND", _extract_message(payload, _("Resource not found")), None
    if isinstance(exc, MethodNotAllowed):
        return (
            "METHOD_NOT_ALLOWED",
            _extract_message(payload, _("Method not allowed")),
            None,
        )
    if isinstance(exc, UnsupportedMediaType):
        return (
            "UNSUPPORTED_MEDIA_TYPE",
            _extract_message(payload, _("Unsupported media type")),
            None,
        )
    return "UNKNOWN_ERROR", _extract_message(payload, _("Request failed")), None


def _extract_message(payload: Any, fallback: str) -> str:
    if isinstance(payload, str):
        return payload
    if isinstance(payload, dict):
        detail = payload.get("detail")
        if isinstance(detail, str):
            return detail
    if isinstance(payload, list) and payload and isinstance(payload[0], str):
        return payload[0]
    return fallback


__all__ = ["ApplicationError", "global_exception_handler"]
