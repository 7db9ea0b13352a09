"""Structured RPC error value and its JSON wire format."""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from ..utils.formatting import sprintf
from .status import StatusResolver, status_text as default_status_text

logger = logging.getLogger(__name__)

# Detail reported by cache clients when a key has no value
REDIS_EMPTY = "redis: nil"

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


class ErrorPayload(BaseModel):
    """Wire representation of an RPC error.

    Every key is always serialized, including empty strings and a zero code.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    id: str = ""
    code: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)
    detail: str = ""
    status: str = ""


# JSON `null` decodes to an all-zero error rather than failing
_PAYLOAD_ADAPTER = TypeAdapter(Optional[ErrorPayload])


class RPCError(Exception):
    """Error returned by an RPC handler.

    The fields are read-only once constructed; ``status`` keeps whatever text
    was resolved for ``code`` at construction time. ``str(error)`` is the JSON
    wire encoding, so an ``RPCError`` can be raised, logged or sent as-is.
    """

    def __init__(self, id: str = "", code: int = 0, detail: str = "", status: str = ""):
        self._payload = ErrorPayload(id=id, code=code, detail=detail, status=status)
        super().__init__(detail)

    @classmethod
    def from_payload(cls, payload: ErrorPayload) -> "RPCError":
        return cls(
            id=payload.id,
            code=payload.code,
            detail=payload.detail,
            status=payload.status,
        )

    @property
    def id(self) -> str:
        return self._payload.id

    @property
    def code(self) -> int:
        return self._payload.code

    @property
    def detail(self) -> str:
        return self._payload.detail

    @property
    def status(self) -> str:
        return self._payload.status

    @property
    def payload(self) -> ErrorPayload:
        return self._payload

    def to_dict(self) -> Dict[str, Any]:
        return self._payload.model_dump()

    def to_json(self) -> str:
        """Encode as ``{"id": ..., "code": ..., "detail": ..., "status": ...}``."""
        return self._payload.model_dump_json()

    def __str__(self) -> str:
        try:
            return self.to_json()
        except (PydanticSerializationError, TypeError, ValueError) as e:
            logger.debug(f"Could not encode {type(self).__name__}: {e}")
            return ""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id!r}, code={self.code!r}, "
            f"detail={self.detail!r}, status={self.status!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RPCError):
            return NotImplemented
        return type(self) is type(other) and self._payload == other._payload

    def __hash__(self) -> int:
        return hash((type(self), self._payload))

    def __reduce__(self):
        return type(self), (self.id, self.code, self.detail, self.status)


def new(
    error_id: str,
    detail: str,
    code: int,
    *,
    status_text: StatusResolver = default_status_text,
) -> RPCError:
    """Generate a custom error. ``detail`` is used verbatim."""
    return RPCError(id=error_id, code=code, detail=detail, status=status_text(code))


def error_for_code(
    code: int,
    error_id: str,
    fmt: str,
    *args: Any,
    status_text: StatusResolver = default_status_text,
) -> RPCError:
    """Generate an error with an arbitrary code and a printf-style detail."""
    return new(error_id, sprintf(fmt, *args), code, status_text=status_text)


def bad_request(
    error_id: str, fmt: str, *args: Any, status_text: StatusResolver = default_status_text
) -> RPCError:
    """Generate a 400 error."""
    return error_for_code(400, error_id, fmt, *args, status_text=status_text)


def unauthorized(
    error_id: str, fmt: str, *args: Any, status_text: StatusResolver = default_status_text
) -> RPCError:
    """Generate a 401 error."""
    return error_for_code(401, error_id, fmt, *args, status_text=status_text)


def forbidden(
    error_id: str, fmt: str, *args: Any, status_text: StatusResolver = default_status_text
) -> RPCError:
    """Generate a 403 error."""
    return error_for_code(403, error_id, fmt, *args, status_text=status_text)


def not_found(
    error_id: str, fmt: str, *args: Any, status_text: StatusResolver = default_status_text
) -> RPCError:
    """Generate a 404 error."""
    return error_for_code(404, error_id, fmt, *args, status_text=status_text)


def method_not_allowed(
    error_id: str, fmt: str, *args: Any, status_text: StatusResolver = default_status_text
) -> RPCError:
    """Generate a 405 error."""
    return error_for_code(405, error_id, fmt, *args, status_text=status_text)


def timeout(
    error_id: str, fmt: str, *args: Any, status_text: StatusResolver = default_status_text
) -> RPCError:
    """Generate a 408 error."""
    return error_for_code(408, error_id, fmt, *args, status_text=status_text)


def conflict(
    error_id: str, fmt: str, *args: Any, status_text: StatusResolver = default_status_text
) -> RPCError:
    """Generate a 409 error."""
    return error_for_code(409, error_id, fmt, *args, status_text=status_text)


def internal_server_error(
    error_id: str, fmt: str, *args: Any, status_text: StatusResolver = default_status_text
) -> RPCError:
    """Generate a 500 error."""
    return error_for_code(500, error_id, fmt, *args, status_text=status_text)


def parse(raw: str) -> RPCError:
    """Parse a JSON-encoded error.

    If ``raw`` is not a valid encoding, the returned error carries ``raw`` as
    its detail and zero values everywhere else. Never raises.
    """
    try:
        payload = _PAYLOAD_ADAPTER.validate_json(raw)
    except ValidationError as e:
        logger.debug(f"Not an encoded RPC error ({e.error_count()} problem(s)), using raw text as detail")
        return RPCError(detail=raw)

    if payload is None:
        return RPCError()
    return RPCError.from_payload(payload)
