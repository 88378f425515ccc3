"""
Internal data models for the Banjara translator.

These records flow between the lexicon, the matcher and the translation
history store; none of them are exposed on the wire directly.
"""

from dataclasses import dataclass
from typing import Optional, Tuple
from enum import Enum
from datetime import datetime


class MatchTier(Enum):
    """Lexicon match heuristics, declared in priority order."""
    EXACT = "exact"
    ALIAS = "alias"
    PHONETIC = "phonetic"
    WORD_BOUNDARY = "word_boundary"
    PREFIX = "prefix"
    SUBSTRING = "substring"


@dataclass(frozen=True)
class DictionaryEntry:
    """A curated Banjara phrase with its Telugu (A) and English (B) renderings."""
    source_phrase: str
    target_a: str
    target_b: str


@dataclass(frozen=True)
class TokenMatch:
    """Outcome of matching a single input token against the lexicon."""
    original_token: str
    matched_entry: Optional[DictionaryEntry] = None
    tier: Optional[MatchTier] = None
    score: float = 0.0

    @property
    def is_match(self) -> bool:
        return self.matched_entry is not None


@dataclass(frozen=True)
class TranslationResult:
    """Composite translation of one request."""
    target_text_a: str
    target_text_b: str
    matches: Tuple[TokenMatch, ...] = ()
    used_fallback: bool = False


@dataclass(frozen=True)
class TranslationRecord:
    """A persisted translation. ``id`` and ``created_at`` are set by the store."""
    source_text: str
    target_text_a: str
    target_text_b: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None
