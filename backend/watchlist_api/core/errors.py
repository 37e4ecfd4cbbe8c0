"""Centralized JSON error handling for the API.

Every failure leaving the application is rendered as::

    {"error": true, "code": "...", "message": "...", "status": 404,
     "request_id": "..."}

so clients can always rely on ``message`` (human readable) and ``code``
(machine readable).
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, jsonify, request
from marshmallow import ValidationError as MarshmallowValidationError
from mongoengine.errors import NotUniqueError
from mongoengine.errors import ValidationError as DocumentValidationError
from werkzeug.exceptions import HTTPException

from watchlist_api.core.logger import ensure_request_id

log = logging.getLogger(__name__)


def _http_status_to_code(status_code: int) -> str:
    """Map common HTTP status codes to canonical, stable error codes."""
    mapping = {
        400: "bad_request",
        401: "unauthorized",
        403: "forbidden",
        404: "not_found",
        405: "method_not_allowed",
        409: "conflict",
        413: "payload_too_large",
        415: "unsupported_media_type",
        422: "unprocessable_entity",
        429: "too_many_requests",
        500: "internal_server_error",
        503: "service_unavailable",
    }
    return mapping.get(status_code, "error")


def _as_error_body(
    *,
    status: int,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Build the JSON error envelope.

    :param status: HTTP status code.
    :param code: Stable machine-consumable error code.
    :param message: Human-readable error summary (safe for clients).
    :param details: Optional safe, structured details.
    :returns: Error dictionary.
    :rtype: dict
    """
    body: dict[str, Any] = {
        "error": True,
        "code": code,
        "message": message,
        "status": int(status),
    }
    if details:
        body["details"] = details
    body["request_id"] = ensure_request_id()
    return body


def _error_response(body: dict[str, Any], status: int) -> tuple[Response, int]:
    return jsonify(body), int(status)


class APIError(Exception):
    """
    Represent a JSON-serializable API error.

    Parameters
    ----------
    message : str
        Human-readable description presented to clients.
    status_code : int, optional
        HTTP status code to return. Defaults to ``400``.
    code : str, optional
        Machine-readable identifier. Defaults to ``"bad_request"``.
    details : dict[str, Any] | None, optional
        Optional structured payload included in the response body.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        code: str = "bad_request",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code)
        self.code = code
        self.details = details or {}

    def to_body(self) -> dict[str, Any]:
        """Serialize error metadata into the JSON error envelope."""
        return _as_error_body(
            status=self.status_code,
            code=self.code,
            message=self.message,
            details=self.details or None,
        )


# Domain conveniences
class NotFound(APIError):
    """404 when resources are missing."""

    def __init__(self, message: str = "Resource not found", code: str = "not_found") -> None:
        super().__init__(message, status_code=HTTPStatus.NOT_FOUND, code=code)


class Invalid(APIError):
    """400 when input or a persistence write is rejected."""

    def __init__(self, message: str = "Invalid request", code: str = "invalid") -> None:
        super().__init__(message, status_code=HTTPStatus.BAD_REQUEST, code=code)


class Unauthorized(APIError):
    """401 when authentication fails."""

    def __init__(self, message: str = "Unauthorized", code: str = "unauthorized") -> None:
        super().__init__(message, status_code=HTTPStatus.UNAUTHORIZED, code=code)


def init_app(app: Flask) -> None:
    """
    Attach JSON error handlers to the Flask app.

    Notes
    -----
    - Service-layer errors are translated by
      :meth:`~watchlist_api.services._shared.base.BaseService.translate_exceptions`.
    - 5xx are logged with ``exc_info``; 4xx as warnings.
    """
    from watchlist_api.services._shared.base import BaseService
    from watchlist_api.services._shared.errors import ServiceError

    @app.errorhandler(APIError)
    def handle_api_error(err: APIError):
        body = err.to_body()
        level = log.error if err.status_code >= 500 else log.warning
        level(
            "APIError: code=%s status=%s msg=%s request_id=%s",
            err.code,
            err.status_code,
            err.message,
            body.get("request_id"),
        )
        return _error_response(body, err.status_code)

    @app.errorhandler(ServiceError)
    def handle_service_error(err: ServiceError):
        translated = BaseService.translate_exceptions(err)
        if isinstance(translated, APIError):
            return handle_api_error(translated)
        return handle_unexpected_error(err)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = int(err.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        error_code = _http_status_to_code(status)
        message = (err.description or error_code.replace("_", " ").capitalize()).strip()
        if status == HTTPStatus.NOT_FOUND and request:
            message = f"Route '{request.path}' not found"
        body = _as_error_body(status=status, code=error_code, message=message)
        level = log.error if status >= 500 else log.warning
        level(
            "HTTPException: code=%s status=%s detail=%s request_id=%s",
            error_code,
            status,
            message,
            body.get("request_id"),
        )
        return _error_response(body, status)

    @app.errorhandler(MarshmallowValidationError)
    def handle_validation_error(err: MarshmallowValidationError):
        body = _as_error_body(
            status=HTTPStatus.BAD_REQUEST,
            code="validation_error",
            message="Validation failed",
            details={"errors": err.messages},
        )
        log.warning("ValidationError: request_id=%s", body.get("request_id"))
        return _error_response(body, HTTPStatus.BAD_REQUEST)

    @app.errorhandler(DocumentValidationError)
    def handle_document_validation_error(err: DocumentValidationError):
        body = _as_error_body(
            status=HTTPStatus.BAD_REQUEST,
            code="invalid",
            message=str(err.message or "Document validation failed"),
        )
        log.warning("DocumentValidationError: request_id=%s", body.get("request_id"))
        return _error_response(body, HTTPStatus.BAD_REQUEST)

    @app.errorhandler(NotUniqueError)
    def handle_not_unique_error(err: NotUniqueError):
        # Do not leak the raw driver message to clients
        body = _as_error_body(
            status=HTTPStatus.BAD_REQUEST,
            code="invalid",
            message="Duplicate value for a unique field",
        )
        log.warning("NotUniqueError: request_id=%s", body.get("request_id"), exc_info=True)
        return _error_response(body, HTTPStatus.BAD_REQUEST)

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        # Unexpected server-side error; never leak internal details
        body = _as_error_body(
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            code="internal_server_error",
            message="Unexpected error",
        )
        log.error(
            "Unhandled exception: request_id=%s",
            body.get("request_id"),
            exc_info=err,
        )
        return _error_response(body, HTTPStatus.INTERNAL_SERVER_ERROR)
