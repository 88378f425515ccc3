import asyncio
import pytest
from fastapi.testclient import TestClient

from app.config.settings import (
    Settings,
    SpeechSettings,
    StorageSettings,
    TranslatorSettings,
    LexiconSettings,
)
from app.main import create_app
from app.services.banjara_lexicon import builtin_lexicon
from app.services.lexical_matcher import LexicalMatcher


class FakeTranslator:
    """Deterministic stand-in for the Google Translate client."""

    def __init__(self, reply="అనువాదం", error=None, delay=0.0):
        self.reply = reply
        self.error = error
        self.delay = delay
        self.calls = []

    async def translate(self, text, source_language, target_language):
        self.calls.append((text, source_language, target_language))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def translator_factory():
    return FakeTranslator


@pytest.fixture
def lexicon():
    return builtin_lexicon()


@pytest.fixture
def fake_translator():
    return FakeTranslator()


@pytest.fixture
def matcher(lexicon, fake_translator):
    return LexicalMatcher(lexicon, translator=fake_translator, fallback_timeout=1.0)


def make_settings(**overrides) -> Settings:
    values = dict(
        environment="testing",
        log_format="text",
        translator=TranslatorSettings(enabled=False),
        speech=SpeechSettings(enabled=False),
        storage=StorageSettings(backend="memory"),
        lexicon=LexiconSettings(path=None),
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings_factory():
    return make_settings


@pytest.fixture
def test_settings():
    return make_settings()


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
