"""Translate message types into localized error details."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Optional, Union

from .catalog import load_catalog
from .error import RPCError

if TYPE_CHECKING:
    from ..core.config import TranslatorConfig

logger = logging.getLogger(__name__)

# Any of the category factories in .error, e.g. error.not_found
ErrorFactory = Callable[..., RPCError]


def resolve_message(path: Union[str, Path], message_type: str, language: str) -> str:
    """Convert ``message_type`` to its message in ``language``.

    The catalog is read from ``path`` on every call. Misses are not errors:
    an unknown type yields ``NOT_EXISTED``, a type without the language yields
    ``NOT_SUPPORT``, and an empty catalog yields ``""``.

    Raises:
        OSError: If the catalog file cannot be read
        CatalogDecodeError: If the catalog file is malformed
    """
    result = load_catalog(path).lookup(message_type, language)
    if not result.found:
        logger.debug(f"No '{language}' text for message type '{message_type}': {result.outcome.value}")
    return result.as_detail()


class ErrorTranslator:
    """Resolve localized details from one catalog file with a default language."""

    def __init__(self, catalog_path: Union[str, Path], default_language: str = "en"):
        self.catalog_path = Path(catalog_path)
        self.default_language = default_language

    @classmethod
    def from_config(cls, config: "TranslatorConfig") -> "ErrorTranslator":
        """Build a translator from a ``TranslatorConfig``."""
        return cls(config.catalog_path, default_language=config.default_language)

    def translate(self, message_type: str, language: Optional[str] = None) -> str:
        return resolve_message(self.catalog_path, message_type, language or self.default_language)

    def localize(
        self,
        factory: ErrorFactory,
        error_id: str,
        message_type: str,
        language: Optional[str] = None,
    ) -> RPCError:
        """Build an error whose detail is the translated message.

        The translated text is used literally, so a ``%`` inside it is never
        treated as a placeholder.
        """
        detail = self.translate(message_type, language)
        return factory(error_id, "%s", detail)
