from __future__ import annotations

import logging

from flask import jsonify, request

from ..core.exceptions import CapacityExceeded, DomainError, NotFoundError, ScanIgnored, StoreError, ValidationError

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (NotFoundError, 404),
    (CapacityExceeded, 409),
    (ScanIgnored, 429),
    (ValidationError, 400),
    (DomainError, 400),
)


def error_response(exc: Exception):
    """JSON error body shared by the controllers: ``{"success": False, "message": ...}``."""

    if isinstance(exc, StoreError):
        return jsonify({"success": False, "error": "StoreError", "message": "Database error, please try again"}), 500

    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return jsonify({"success": False, "error": type(exc).__name__, "message": str(exc)}), status

    logger.exception("Unhandled error", exc_info=exc)
    return jsonify({"success": False, "message": "Internal error"}), 500


def json_body() -> dict:
    return request.get_json(silent=True) or {}
