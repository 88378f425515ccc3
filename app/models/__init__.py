"""
Models package for the Banjara translator backend.

Internal dataclasses used by the matcher and the history store, and the
SQLAlchemy table for persisted translations.
"""

from .internal_models import (
    MatchTier,
    DictionaryEntry,
    TokenMatch,
    TranslationResult,
    TranslationRecord,
)

__all__ = [
    "MatchTier",
    "DictionaryEntry",
    "TokenMatch",
    "TranslationResult",
    "TranslationRecord",
]
