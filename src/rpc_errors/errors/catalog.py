"""Translation catalog: message types mapped to per-language texts.

Catalog files look like::

    error_list:
      - type: user_not_found
        translated_message:
          - text: User not found
            language: en
          - text: Utilisateur introuvable
            language: fr

JSON documents with the same keys are accepted too.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..utils.error_handling import handle_filesystem_errors

logger = logging.getLogger(__name__)

# Returned as message text when a type exists but has no text for the language
NOT_SUPPORT = "language:notSupport"
# Returned as message text when no entry has the requested type
NOT_EXISTED = "messageType:notExisted"


class CatalogLoader(yaml.SafeLoader):
    """Safe loader that keeps every scalar except null as its source text.

    Values such as `no`, `on`, `1.50` or `2020-01-01` load as the strings
    written in the file, not as bools, floats or dates.
    """


_KEPT_IMPLICIT_TAGS = ("tag:yaml.org,2002:null", "tag:yaml.org,2002:merge")

CatalogLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag in _KEPT_IMPLICIT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class CatalogDecodeError(ValueError):
    """Catalog file was read but its contents are not a valid catalog."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to decode error catalog {path}: {reason}")


class TranslatedMessage(BaseModel):
    """Message text for a single language."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    language: str = ""

    @field_validator("text", "language", mode="before")
    @classmethod
    def null_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class ErrorMessageEntry(BaseModel):
    """A message type and its translations, in file order."""

    model_config = ConfigDict(frozen=True)

    type: str = ""
    translated_message: Tuple[TranslatedMessage, ...] = Field(default_factory=tuple)

    @field_validator("type", mode="before")
    @classmethod
    def null_type_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("translated_message", mode="before")
    @classmethod
    def null_messages_to_empty(cls, v: Any) -> Any:
        return () if v is None else v

    def find_text(self, language: str) -> Optional[str]:
        """Return the first text written for ``language``, if any."""
        for message in self.translated_message:
            if message.language == language:
                return message.text
        return None


class LookupOutcome(str, Enum):
    FOUND = "found"
    TYPE_NOT_FOUND = "type_not_found"
    LANGUAGE_NOT_SUPPORTED = "language_not_supported"
    EMPTY_CATALOG = "empty_catalog"


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a catalog lookup; ``text`` is only set when found."""

    outcome: LookupOutcome
    text: str = ""

    @property
    def found(self) -> bool:
        return self.outcome is LookupOutcome.FOUND

    def as_detail(self) -> str:
        """Collapse the outcome into the plain string callers embed in errors.

        Misses become the ``NOT_SUPPORT`` / ``NOT_EXISTED`` sentinels and an
        empty catalog becomes an empty string.
        """
        if self.outcome is LookupOutcome.LANGUAGE_NOT_SUPPORTED:
            return NOT_SUPPORT
        if self.outcome is LookupOutcome.TYPE_NOT_FOUND:
            return NOT_EXISTED
        return self.text


class ErrorCatalog(BaseModel):
    """Decoded catalog file. Read-only; every load returns a new instance."""

    model_config = ConfigDict(frozen=True)

    error_list: Tuple[ErrorMessageEntry, ...] = Field(default_factory=tuple)

    @field_validator("error_list", mode="before")
    @classmethod
    def null_list_to_empty(cls, v: Any) -> Any:
        return () if v is None else v

    def find_entry(self, message_type: str) -> Optional[ErrorMessageEntry]:
        """Return the first entry with ``message_type``; later duplicates are ignored."""
        for entry in self.error_list:
            if entry.type == message_type:
                return entry
        return None

    def lookup(self, message_type: str, language: str) -> LookupResult:
        if not self.error_list:
            return LookupResult(LookupOutcome.EMPTY_CATALOG)

        entry = self.find_entry(message_type)
        if entry is None:
            return LookupResult(LookupOutcome.TYPE_NOT_FOUND)

        text = entry.find_text(language)
        if text is None:
            return LookupResult(LookupOutcome.LANGUAGE_NOT_SUPPORTED)
        return LookupResult(LookupOutcome.FOUND, text)

    def message_types(self) -> List[str]:
        return [entry.type for entry in self.error_list]

    def languages(self) -> List[str]:
        """Distinct languages across all entries, in order of first appearance."""
        seen: List[str] = []
        for entry in self.error_list:
            for message in entry.translated_message:
                if message.language not in seen:
                    seen.append(message.language)
        return seen


def _format_validation_error(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "root"
        problems.append(f"{location}: {item['msg']}")
    return "; ".join(problems)


def decode_catalog(raw: Union[str, bytes], path: Path) -> ErrorCatalog:
    """Decode catalog file contents. ``path`` is only used in error messages."""
    try:
        data = yaml.load(raw, Loader=CatalogLoader)
    except yaml.YAMLError as e:
        raise CatalogDecodeError(path, str(e)) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise CatalogDecodeError(
            path, f"expected a mapping at the top level, got {type(data).__name__}"
        )

    try:
        return ErrorCatalog.model_validate(data)
    except ValidationError as e:
        raise CatalogDecodeError(path, _format_validation_error(e)) from e


@handle_filesystem_errors("load error catalog", logger_instance=logger)
def load_catalog(path: Union[str, Path]) -> ErrorCatalog:
    """Load an error catalog from a YAML or JSON file.

    Raises:
        OSError: If the file cannot be opened or read (propagated unchanged)
        CatalogDecodeError: If the contents are not a valid catalog
    """
    path = Path(path)
    with open(path, "rb") as f:
        raw = f.read()

    catalog = decode_catalog(raw, path)
    logger.debug(f"Loaded {len(catalog.error_list)} message type(s) from {path}")
    return catalog
