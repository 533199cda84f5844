"""Feature-level fixtures for i18n system tests."""

import pytest

from tests.factories.i18n import (
    make_resolver_config,
    make_responder,
    make_translator,
)


@pytest.fixture
def resolver_config():
    return make_resolver_config()


@pytest.fixture
def translator(resolver_config):
    """Translator over the default en-US/zh-CN test catalog."""
    return make_translator(config=resolver_config)


@pytest.fixture
def responder(resolver_config):
    return make_responder(config=resolver_config)


@pytest.fixture
def user_agents():
    """Collection of User-Agent strings for testing."""
    return {
        "plain": "Mozilla/5.0 (X11; Linux x86_64)",
        "with_lang": "MyApp/2.1;lang=zh-CN",
        "with_spaced_lang": "MyApp/2.1; lang = zh-CN ;build=42",
        "capitalized_key": "MyApp/2.1;Lang=fr-FR",
        "empty_lang": "MyApp/2.1;lang=",
        "first_equals_only": "MyApp/2.1;lang=x=y",
    }
