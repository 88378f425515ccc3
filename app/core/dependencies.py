"""
Dependency injection setup for FastAPI.
Builds the lexicon, matcher, history store and external clients once at
startup and hands them to route handlers.
"""

from fastapi import Request
from typing import Optional
import logging
import asyncio

from app.config.settings import Settings, StorageBackend
from app.core.db import create_db_engine, create_session_factory, init_db
from app.services.banjara_lexicon import Lexicon, load_lexicon
from app.services.external_translator import GoogleTranslateClient
from app.services.lexical_matcher import LexicalMatcher
from app.services.speech_proxy import SpeechProxy
from app.services.translation_store import (
    InMemoryTranslationStore,
    SqlTranslationStore,
    TranslationStore,
)

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for the application's long-lived services.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._lexicon: Optional[Lexicon] = None
        self._matcher: Optional[LexicalMatcher] = None
        self._store: Optional[TranslationStore] = None
        self._speech_proxy: Optional[SpeechProxy] = None
        self._engine = None
        self._initialized = False
        self._initialization_lock = asyncio.Lock()

    async def initialize_services(self) -> None:
        """
        Initialize services in dependency order.

        Raises:
            DictionaryConfigurationError: If the dictionary is empty or malformed
        """
        async with self._initialization_lock:
            if self._initialized:
                return

            logger.info("Initializing service container")

            self._lexicon = load_lexicon(self.settings.lexicon.path)

            translator = None
            if self.settings.translator.enabled:
                translator = GoogleTranslateClient(self.settings.translator)
            else:
                logger.info("External translation disabled; unmatched input gets placeholders")

            self._matcher = LexicalMatcher(
                self._lexicon,
                translator=translator,
                source_hint=self.settings.translator.source_hint,
                fallback_timeout=self.settings.translator.timeout_seconds,
            )
            self._store = self._create_store()

            if self.settings.speech.enabled:
                self._speech_proxy = SpeechProxy(self.settings.speech)

            self._initialized = True
            logger.info("Service container initialized")

    def _create_store(self) -> TranslationStore:
        storage = self.settings.storage
        if storage.backend == StorageBackend.DATABASE:
            self._engine = create_db_engine(storage.database_url)
            init_db(self._engine)
            logger.info(f"Using database translation store ({self._engine.url.render_as_string(hide_password=True)})")
            return SqlTranslationStore(create_session_factory(self._engine))
        logger.info("Using in-memory translation store")
        return InMemoryTranslationStore()

    async def cleanup_services(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
        self._initialized = False
        logger.info("Service container cleaned up")

    def get_matcher(self) -> LexicalMatcher:
        if self._matcher is None:
            raise RuntimeError("Service container not initialized")
        return self._matcher

    def get_store(self) -> TranslationStore:
        if self._store is None:
            raise RuntimeError("Service container not initialized")
        return self._store

    def get_speech_proxy(self) -> Optional[SpeechProxy]:
        return self._speech_proxy

    def get_lexicon(self) -> Lexicon:
        if self._lexicon is None:
            raise RuntimeError("Service container not initialized")
        return self._lexicon

    @property
    def is_initialized(self) -> bool:
        return self._initialized


def get_service_container(request: Request) -> ServiceContainer:
    return request.app.state.service_container


def get_matcher(request: Request) -> LexicalMatcher:
    return get_service_container(request).get_matcher()


def get_store(request: Request) -> TranslationStore:
    return get_service_container(request).get_store()


def get_speech_proxy(request: Request) -> Optional[SpeechProxy]:
    return get_service_container(request).get_speech_proxy()
