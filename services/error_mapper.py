# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from typing import Any, Optional

from services.translation_manager import tr
from services.exceptions import ApiException, GatewayError, ValidationException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)

# Response body fields that may carry a human-readable message, in lookup order
MESSAGE_FIELDS = ("message", "error", "title", "detail")


def extract_response_message(response_data: Any) -> Optional[str]:
    """Return the server's error message from a response body, if it sent one."""
    if not isinstance(response_data, dict):
        return None
    for key in MESSAGE_FIELDS:
        value = response_data.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def map_api_error(error: ApiException) -> str:
    """Map API exception to a user-facing message.

    The server's own message is shown when the body has one; otherwise a
    generic translated message. Validation details are logged only.
    """
    status = error.status_code

    if status == 400:
        details = _extract_validation_details(error.response_data)
        if details:
            logger.warning(f"API validation error (400): {details}")
    elif status:
        logger.warning(f"API error ({status}): {error}")

    message = extract_response_message(error.response_data)
    if message:
        return message
    if status == 401 or status == 403:
        return tr("error.api.unauthorized")
    return tr("error.submission.generic")


def map_network_error(error: NetworkException) -> str:
    """Map network exception to user-friendly translated message."""
    msg = str(error.original_error) if error.original_error else ""
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return tr("error.api.timeout")
    return tr("error.api.connection")


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to a user-friendly message."""
    if isinstance(error, GatewayError):
        return error.message

    if isinstance(error, ApiException):
        if not error.context and context:
            error.context = context
        return map_api_error(error)

    if isinstance(error, NetworkException):
        return map_network_error(error)

    if isinstance(error, ValidationException):
        if error.errors:
            logger.warning(f"Validation error: {error.errors}")
        return error.message or tr("validation.check_data")

    logger.warning(f"Unexpected error: {error}")
    return tr("error.unexpected")


def _extract_validation_details(response_data: dict) -> str:
    """Extract validation error details from API response."""
    if not response_data:
        return ""

    errors = response_data.get("errors", {})
    if isinstance(errors, dict):
        lines = []
        for field, messages in errors.items():
            if isinstance(messages, list):
                for msg in messages:
                    lines.append(f"• {field}: {msg}")
            else:
                lines.append(f"• {field}: {messages}")
        return "\n".join(lines)

    if isinstance(errors, list):
        return "\n".join(f"• {e}" for e in errors)

    return ""
