"""Tests for resolving localized messages and building localized errors."""

import pytest

from rpc_errors.core.config import TranslatorConfig
from rpc_errors.errors import error as errors
from rpc_errors.errors.catalog import NOT_EXISTED, NOT_SUPPORT, CatalogDecodeError
from rpc_errors.errors.translator import ErrorTranslator, resolve_message


SINGLE_ENTRY = """\
error_list:
  - type: X
    translated_message:
      - language: en
        text: hi
"""


class TestResolveMessage:
    def test_found(self, write_catalog):
        assert resolve_message(write_catalog(SINGLE_ENTRY), "X", "en") == "hi"

    def test_language_not_supported(self, write_catalog):
        assert resolve_message(write_catalog(SINGLE_ENTRY), "X", "fr") == "language:notSupport"

    def test_message_type_not_existed(self, write_catalog):
        assert resolve_message(write_catalog(SINGLE_ENTRY), "Y", "en") == "messageType:notExisted"

    def test_plain_scalars_resolve_as_written(self, write_catalog):
        path = write_catalog(
            SINGLE_ENTRY
            + "      - language: no\n        text: hei\n"
            + "  - type: price\n    translated_message:\n      - language: en\n        text: 1.50\n"
        )

        assert resolve_message(path, "X", "no") == "hei"
        assert resolve_message(path, "price", "en") == "1.50"

    @pytest.mark.parametrize("content", ["", "error_list:\n", "error_list: []\n"])
    def test_empty_catalog_yields_empty_string(self, write_catalog, content):
        assert resolve_message(write_catalog(content), "anything", "en") == ""

    def test_duplicate_type_second_entry_unreachable(self, write_catalog):
        path = write_catalog(
            SINGLE_ENTRY
            + "  - type: X\n    translated_message:\n      - language: fr\n        text: salut\n"
        )

        assert resolve_message(path, "X", "fr") == NOT_SUPPORT

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            resolve_message(tmp_path / "nope.yaml", "X", "en")

    def test_invalid_file_raises_decode_error(self, write_catalog):
        with pytest.raises(CatalogDecodeError):
            resolve_message(write_catalog("error_list: [\n"), "X", "en")

    def test_rereads_file_on_every_call(self, write_catalog):
        path = write_catalog(SINGLE_ENTRY)
        assert resolve_message(path, "X", "en") == "hi"

        path.write_text(SINGLE_ENTRY.replace("hi", "hello"), encoding="utf-8")

        assert resolve_message(path, "X", "en") == "hello"


class TestErrorTranslator:
    def test_translate_uses_default_language(self, sample_catalog):
        translator = ErrorTranslator(sample_catalog, default_language="fr")

        assert translator.translate("user_not_found") == "Utilisateur introuvable"
        assert translator.translate("user_not_found", "en") == "User not found"

    def test_translate_passes_sentinels_through(self, sample_catalog):
        translator = ErrorTranslator(sample_catalog)

        assert translator.translate("rate_limited", "fr") == NOT_SUPPORT
        assert translator.translate("unknown") == NOT_EXISTED

    def test_localize_builds_error(self, sample_catalog):
        translator = ErrorTranslator(sample_catalog)

        err = translator.localize(errors.not_found, "go.micro.srv.user", "user_not_found", "fr")

        assert err.id == "go.micro.srv.user"
        assert err.code == 404
        assert err.status == "Not Found"
        assert err.detail == "Utilisateur introuvable"

    def test_localize_keeps_percent_literal(self, write_catalog):
        path = write_catalog(
            "error_list:\n  - type: quota\n    translated_message:\n"
            "      - language: en\n        text: 100% of quota used\n"
        )

        err = ErrorTranslator(path).localize(errors.forbidden, "svc", "quota")

        assert err.detail == "100% of quota used"

    def test_from_config(self, sample_catalog):
        config = TranslatorConfig(catalog_path=sample_catalog, default_language="fr")

        translator = ErrorTranslator.from_config(config)

        assert translator.catalog_path == sample_catalog
        assert translator.translate("user_not_found") == "Utilisateur introuvable"

    def test_missing_catalog_raises(self, tmp_path):
        translator = ErrorTranslator(tmp_path / "missing.yaml")

        with pytest.raises(OSError):
            translator.translate("user_not_found")
