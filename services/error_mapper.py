# -*- coding: utf-8 -*-
"""
Centralized error message mapper.

Server error bodies come in several shapes. They are decoded once, at the
API boundary, into a ServerError whose items are ErrorItem values; UI code
only ever formats the decoded result.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from services.translation_manager import tr
from services.exceptions import ApiException, ValidationException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)

DUPLICATE_MARKER = "already exists"
DATABASE_VALIDATION_MARKER = "Database validation errors"


class ServerErrorKind(Enum):
    VALIDATION = "validation"
    DUPLICATE_ACCOUNT = "duplicate_account"
    DATABASE_VALIDATION = "database_validation"
    MESSAGE = "message"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ErrorItem:
    """One entry of a server ``errors`` array.

    kind is one of: text, msg, message, field, param, unknown.
    """
    kind: str
    value: str = ""

    @classmethod
    def decode(cls, raw: Any) -> 'ErrorItem':
        if isinstance(raw, str):
            return cls("text", raw)
        if isinstance(raw, dict):
            for key in ("msg", "message", "field"):
                if raw.get(key):
                    return cls(key, str(raw[key]))
            if raw.get("param"):
                return cls("param", str(raw["param"]))
        return cls("unknown")


@dataclass(frozen=True)
class ServerError:
    """Decoded non-OK response body."""
    kind: ServerErrorKind
    message: str = ""
    items: List[ErrorItem] = field(default_factory=list)
    status_code: Optional[int] = None


def decode_error_body(body: Any, status_code: int = None) -> ServerError:
    """Decode a non-OK response body into a ServerError.

    Precedence: an ``errors`` array wins, then the duplicate-account message,
    then the database-validation message, then any other message.
    """
    if not isinstance(body, dict):
        return ServerError(ServerErrorKind.UNKNOWN, status_code=status_code)

    message = body.get("message") or ""
    if not isinstance(message, str):
        message = str(message)
    raw_errors = body.get("errors")

    if isinstance(raw_errors, list):
        items = [ErrorItem.decode(e) for e in raw_errors]
        return ServerError(ServerErrorKind.VALIDATION, message, items, status_code)

    if DUPLICATE_MARKER in message:
        return ServerError(ServerErrorKind.DUPLICATE_ACCOUNT, message, status_code=status_code)

    if DATABASE_VALIDATION_MARKER in message:
        # errors keyed by field name rather than listed
        items = []
        if isinstance(raw_errors, dict):
            items = [ErrorItem.decode(e) for e in raw_errors.values()]
        return ServerError(ServerErrorKind.DATABASE_VALIDATION, message, items, status_code)

    if message:
        return ServerError(ServerErrorKind.MESSAGE, message, status_code=status_code)

    return ServerError(ServerErrorKind.UNKNOWN, status_code=status_code)


def _validation_line(item: ErrorItem) -> str:
    if item.kind == "param":
        return f"• {tr('error.registration.invalid_param', param=item.value)}"
    if item.kind == "unknown":
        return f"• {tr('error.registration.validation_item')}"
    return f"• {item.value}"


def _database_line(item: ErrorItem) -> str:
    if item.kind in ("text", "message", "field"):
        return f"• {item.value}"
    return f"• {tr('error.registration.database_item')}"


def format_registration_error(error: ServerError) -> str:
    """Render a decoded registration failure as the consolidated message."""
    if error.kind == ServerErrorKind.VALIDATION:
        lines = "\n".join(_validation_line(item) for item in error.items)
        return f"{tr('error.registration.validation_header')}\n{lines}"

    if error.kind == ServerErrorKind.DUPLICATE_ACCOUNT:
        return tr("error.registration.duplicate")

    if error.kind == ServerErrorKind.DATABASE_VALIDATION:
        lines = "\n".join(_database_line(item) for item in error.items)
        return (
            f"{tr('error.registration.database_header')}\n"
            f"{lines or tr('error.registration.database_fallback')}"
        )

    return error.message or tr("error.registration.failed")


def server_message(error: ApiException, fallback: str) -> str:
    """Return the server's ``message`` field, or fallback."""
    message = error.response_data.get("message") if error.response_data else None
    if isinstance(message, str) and message:
        return message
    return fallback


def map_network_error(error: NetworkException) -> str:
    """Map network exception to user-friendly translated message."""
    if error.is_timeout:
        return tr("error.api.timeout")
    return tr("error.api.connection")


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to a user-friendly message.

    Technical details are logged only.
    """
    if isinstance(error, ApiException):
        if not error.context and context:
            error.context = context
        if error.status_code and error.status_code >= 500:
            logger.warning(f"API error ({error.status_code}): {error}")
            return tr("toast.server_error")
        return server_message(error, tr("error.unexpected"))

    if isinstance(error, NetworkException):
        return map_network_error(error)

    if isinstance(error, ValidationException):
        if error.errors:
            logger.warning(f"Validation error: {error.errors}")
        return error.message

    logger.warning(f"Unexpected error: {error}")
    return tr("error.unexpected")

