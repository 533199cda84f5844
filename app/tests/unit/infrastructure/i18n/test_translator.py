"""Tests for infrastructure.i18n.translator module."""

import threading

import pytest

from infrastructure.i18n import Catalog, Translator
from tests.factories.i18n import make_resolver_config, make_translator


@pytest.mark.unit
class TestTranslate:
    """Tests for Translator.translate."""

    def test_translate_with_params(self, translator):
        """Parameters are substituted positionally."""
        message = translator.translate("en-US", "1000", "Seakee", "18888888888")
        assert message == "Hello,Seakee! Your id is:18888888888"

    def test_translate_requested_language(self, translator):
        message = translator.translate("zh-CN", 1000, "Seakee", "18888888888")
        assert message == "你好,Seakee!你的账号是:18888888888"

    def test_translate_accepts_integer_codes(self, translator):
        assert translator.translate("en-US", 0) == "ok"
        assert translator.translate("zh-CN", -1) == "系统繁忙"

    def test_unknown_language_falls_back_to_default(self, translator):
        """An unloaded language resolves against the default language."""
        assert translator.translate("fr-FR", "0") == "ok"
        assert translator.translate("", "-1") == "System busy"

    @pytest.mark.parametrize("language", ["fr-FR", "", "EN-us"])
    def test_unknown_language_with_params_matches_default(self, translator, language):
        expected = translator.translate("en-US", "1000", "A", "B")
        assert translator.translate(language, "1000", "A", "B") == expected
        assert expected == "Hello,A! Your id is:B"

    def test_unknown_code_returns_code(self, translator):
        assert translator.translate("en-US", "404") == "404"
        assert translator.translate("fr-FR", 9999) == "9999"

    def test_code_missing_in_requested_language_is_not_looked_up_in_default(self):
        """Fallback happens per language, not per code."""
        translator = make_translator(
            messages={"en-US": {"0": "ok", "7": "seven"}, "zh-CN": {"0": "好"}}
        )
        assert translator.translate("zh-CN", "7") == "7"

    def test_language_without_messages_returns_code(self):
        translator = make_translator(messages={"en-US": {}})
        assert translator.translate("en-US", 404) == "404"

    def test_default_language_missing_from_catalog_returns_code(self):
        translator = make_translator(
            messages={"zh-CN": {"0": "好"}},
            config=make_resolver_config(default_language="en-US"),
        )
        assert translator.translate("fr-FR", "0") == "0"

    def test_template_without_params_is_returned_verbatim(self):
        """Templates are only formatted when parameters are given."""
        translator = make_translator(messages={"en-US": {"1": "100% done"}})
        assert translator.translate("en-US", "1") == "100% done"

    def test_translate_is_deterministic(self, translator):
        first = translator.translate("zh-CN", "1000", "a", "b")
        second = translator.translate("zh-CN", "1000", "a", "b")
        assert first == second

    def test_translate_coerces_params_to_str(self, translator):
        message = translator.translate("en-US", "1000", "Seakee", 18888888888)
        assert message == "Hello,Seakee! Your id is:18888888888"


@pytest.mark.unit
class TestInterpolation:
    """Tests for printf-style substitution edge cases."""

    @pytest.fixture
    def translator(self):
        return make_translator(
            messages={
                "en-US": {
                    "1": "Hello,%s! Your id is:%s",
                    "2": "%d items",
                    "3": "%s is 100%% sure",
                    "4": "plain",
                }
            }
        )

    def test_missing_param_is_marked(self, translator):
        message = translator.translate("en-US", "1", "Seakee")
        assert message == "Hello,Seakee! Your id is:%!s(MISSING)"

    def test_extra_params_are_dropped(self, translator):
        message = translator.translate("en-US", "1", "a", "b", "c")
        assert message == "Hello,a! Your id is:b"

    def test_non_numeric_param_for_numeric_verb_is_substituted_as_text(self, translator):
        assert translator.translate("en-US", "2", "many") == "many items"

    def test_numeric_verb_with_numeric_string(self, translator):
        assert translator.translate("en-US", "2", "3") == "3 items"

    def test_escaped_percent(self, translator):
        assert translator.translate("en-US", "3", "Bob") == "Bob is 100% sure"

    def test_params_for_template_without_placeholders(self, translator):
        assert translator.translate("en-US", "4", "unused") == "plain"


@pytest.mark.unit
class TestSetLanguage:
    """Tests for Translator.set_language."""

    def test_set_language_changes_fallback(self, translator):
        translator.set_language("zh-CN")
        assert translator.default_language == "zh-CN"
        assert translator.translate("fr-FR", "-1") == "系统繁忙"

    def test_set_language_empty_is_noop(self, translator):
        translator.set_language("")
        assert translator.default_language == "en-US"
        assert translator.translate("fr-FR", "-1") == "System busy"

    def test_set_language_to_unloaded_language(self, translator):
        """The default may name a language that is not in the catalog."""
        translator.set_language("fr-FR")
        assert translator.default_language == "fr-FR"
        assert translator.translate("de-DE", "0") == "0"

    def test_set_language_shared_through_config(self, resolver_config, translator):
        translator.set_language("zh-CN")
        assert resolver_config.default_language == "zh-CN"

    def test_concurrent_set_language_and_translate(self, translator):
        errors = []

        def read():
            for _ in range(200):
                message = translator.translate("fr-FR", "-1")
                if message not in ("System busy", "系统繁忙"):
                    errors.append(message)

        def write():
            for i in range(200):
                translator.set_language("zh-CN" if i % 2 else "en-US")

        threads = [threading.Thread(target=read) for _ in range(4)]
        threads.append(threading.Thread(target=write))
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []


@pytest.mark.unit
class TestIntrospection:
    def test_count(self, translator):
        assert translator.count() == 2

    def test_languages(self, translator):
        assert sorted(translator.languages()) == ["en-US", "zh-CN"]

    def test_has_language(self, translator):
        assert translator.has_language("zh-CN") is True
        assert translator.has_language("fr-FR") is False

    def test_default_config(self):
        translator = Translator(Catalog({"en-US": {"0": "ok"}}))
        assert translator.default_language == "en-US"
        assert translator.config.debug_mode is False
