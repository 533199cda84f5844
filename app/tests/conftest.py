import json

import pytest

from api.dependencies.rate_limits import get_limiter
from infrastructure.services import providers
from tests.factories.i18n import DEFAULT_MESSAGES


@pytest.fixture(autouse=True)
def reset_providers():
    """Drop cached settings/responder singletons between tests."""
    providers.get_settings.cache_clear()
    providers.get_responder.cache_clear()
    yield
    providers.get_settings.cache_clear()
    providers.get_responder.cache_clear()


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Rate limit counters are process-wide; start every test from zero."""
    get_limiter().reset()
    yield


@pytest.fixture
def lang_dir(tmp_path):
    """Directory with one JSON catalog file per language.

    Returns a directory structure like:
    - en-US.json
    - zh-CN.json
    """
    directory = tmp_path / "lang"
    directory.mkdir()
    for language, messages in DEFAULT_MESSAGES.items():
        with open(directory / f"{language}.json", "w", encoding="utf-8") as f:
            json.dump(messages, f, ensure_ascii=False)
    return directory


@pytest.fixture
def app_env(monkeypatch, lang_dir):
    """Point application settings at the temporary catalog directory."""
    monkeypatch.setenv("I18N_LANG_DIR", str(lang_dir))
    monkeypatch.delenv("RUN_MODE", raising=False)
    monkeypatch.delenv("I18N_DEBUG_MODE", raising=False)
    monkeypatch.delenv("I18N_DEFAULT_LANG", raising=False)
    monkeypatch.delenv("I18N_DETECTION_ORDER", raising=False)
    return lang_dir
