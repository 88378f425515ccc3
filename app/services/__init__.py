# Business logic services

from .banjara_lexicon import Lexicon, builtin_lexicon, load_lexicon
from .lexical_matcher import LexicalMatcher, phonetic_similarity
from .external_translator import GoogleTranslateClient
from .speech_proxy import SpeechProxy
from .translation_store import (
    TranslationStore,
    InMemoryTranslationStore,
    SqlTranslationStore,
)

__all__ = [
    "Lexicon",
    "builtin_lexicon",
    "load_lexicon",
    "LexicalMatcher",
    "phonetic_similarity",
    "GoogleTranslateClient",
    "SpeechProxy",
    "TranslationStore",
    "InMemoryTranslationStore",
    "SqlTranslationStore",
]
