"""HTTP status text resolution for error payloads."""

from http import HTTPStatus
from typing import Callable

StatusResolver = Callable[[int], str]


def status_text(code: int) -> str:
    """Return the canonical reason phrase for an HTTP status code.

    Unknown codes resolve to an empty string.
    """
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return ""
