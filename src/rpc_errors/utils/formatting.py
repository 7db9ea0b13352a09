"""Error-tolerant printf-style formatting for error details."""

import re
from typing import Any, Sequence

# %[flags][width][.precision]<conversion>; an empty conversion means a trailing '%'
_CONVERSION_RE = re.compile(r"%([#0\- +]*\d*(?:\.\d*)?)(.?)", re.DOTALL)
_CONVERSION_TYPES = frozenset("diouxXeEfFgGcrsa")


def _describe(value: Any) -> str:
    return f"{type(value).__name__}={value}"


def _render_tolerant(fmt: str, args: Sequence[Any]) -> str:
    """Substitute conversions one at a time, marking every mismatch inline.

    Markers:
        %!d(MISSING)          no argument left for the conversion
        %!d(str=abc)          argument rejected by the conversion, or unknown conversion
        %!(NOVERB)            lone '%' at the end of the format
        %!(EXTRA int=1, ...)  arguments left over after the last conversion
    """
    consumed = 0

    def substitute(match: "re.Match[str]") -> str:
        nonlocal consumed
        spec, conversion = match.group(1), match.group(2)
        if conversion == "%":
            return "%"
        if not conversion:
            return "%!(NOVERB)"
        if consumed >= len(args):
            return f"%!{conversion}(MISSING)"

        value = args[consumed]
        consumed += 1
        if conversion in _CONVERSION_TYPES:
            try:
                return f"%{spec}{conversion}" % (value,)
            except (TypeError, ValueError, OverflowError):
                pass
        return f"%!{conversion}({_describe(value)})"

    rendered = _CONVERSION_RE.sub(substitute, fmt)
    if consumed < len(args):
        extra = ", ".join(_describe(value) for value in args[consumed:])
        rendered += f"%!(EXTRA {extra})"
    return rendered


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``fmt % args`` without ever raising on a bad format.

    Well-formed input goes through the ``%`` operator unchanged. When the
    operator rejects the combination (argument count or type mismatch, unknown
    conversion), the format is rendered conversion by conversion and the
    problems show up in the returned text instead.
    """
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError, OverflowError):
        return _render_tolerant(fmt, args)
