"""RPC error values and localized error messages."""

from .catalog import (
    NOT_EXISTED,
    NOT_SUPPORT,
    CatalogDecodeError,
    ErrorCatalog,
    ErrorMessageEntry,
    LookupOutcome,
    LookupResult,
    TranslatedMessage,
    load_catalog,
)
from .error import (
    REDIS_EMPTY,
    ErrorPayload,
    RPCError,
    bad_request,
    conflict,
    error_for_code,
    forbidden,
    internal_server_error,
    method_not_allowed,
    new,
    not_found,
    parse,
    timeout,
    unauthorized,
)
from .status import status_text
from .translator import ErrorTranslator, resolve_message

__all__ = [
    # Error values
    "RPCError",
    "ErrorPayload",
    "REDIS_EMPTY",
    "new",
    "error_for_code",
    "bad_request",
    "unauthorized",
    "forbidden",
    "not_found",
    "method_not_allowed",
    "timeout",
    "conflict",
    "internal_server_error",
    "parse",
    "status_text",
    # Catalog
    "NOT_SUPPORT",
    "NOT_EXISTED",
    "CatalogDecodeError",
    "ErrorCatalog",
    "ErrorMessageEntry",
    "TranslatedMessage",
    "LookupOutcome",
    "LookupResult",
    "load_catalog",
    # Translation
    "ErrorTranslator",
    "resolve_message",
]
