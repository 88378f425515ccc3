"""
Fuzzy phrase matcher translating Banjara speech into Telugu and English.

Recognised speech is split on whitespace and every token is matched against
the curated lexicon with a fixed ladder of heuristics. Tokens that match are
replaced by the entry's translations; tokens that do not are passed through.
When nothing in the input matches, the whole text goes to the external
translator for Telugu only. English has no usable API route from Banjara, so
it always gets a marked placeholder in that case.
"""

import asyncio
import logging
import string
from typing import Callable, List, NamedTuple, Optional, Protocol, Sequence

from app.core.exceptions import DictionaryConfigurationError, ExternalServiceError
from app.models.internal_models import (
    DictionaryEntry,
    MatchTier,
    TokenMatch,
    TranslationResult,
)
from app.services.banjara_lexicon import Lexicon

logger = logging.getLogger(__name__)

TARGET_A_LANGUAGE = "te"
TARGET_B_LANGUAGE = "en"

TELUGU_UNAVAILABLE = "[Telugu translation unavailable]"
ENGLISH_UNAVAILABLE = "[English translation unavailable]"

PUNCTUATION = string.punctuation + "।॥“”‘’«»…"
CONSONANTS = frozenset("bcdfghjklmnpqrstvwxyz")

PHONETIC_THRESHOLD = 0.7
DISSIMILAR_LENGTH_SCORE = 0.2
MIN_SUBSTRING_LENGTH = 4


class ExternalTranslator(Protocol):
    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        ...


class _Strategy(NamedTuple):
    tier: MatchTier
    score: Callable[[str, DictionaryEntry], Optional[float]]


def clean_token(token: str) -> str:
    """Strip surrounding punctuation, keeping the original casing."""
    return token.strip(PUNCTUATION)


def phonetic_similarity(a: str, b: str) -> float:
    """
    Consonant-overlap similarity between two lowercase words.

    Only indices present in both words are compared. An index counts when
    either word has a consonant there, and it matches when both words carry
    the same consonant. Words whose lengths differ by more than two
    characters are treated as dissimilar.
    """
    if abs(len(a) - len(b)) > 2:
        return DISSIMILAR_LENGTH_SCORE

    positions = 0
    matches = 0
    for x, y in zip(a, b):
        if x in CONSONANTS or y in CONSONANTS:
            positions += 1
            if x == y:
                matches += 1
    return matches / positions if positions else 0.0


class LexicalMatcher:
    """
    Dictionary-first Banjara translator.

    The lexicon is shared and read-only; the matcher keeps no per-request
    state, so one instance serves all concurrent requests.
    """

    def __init__(
        self,
        lexicon: Lexicon,
        translator: Optional[ExternalTranslator] = None,
        source_hint: str = "hi",
        fallback_timeout: float = 4.0,
    ):
        if len(lexicon) == 0:
            raise DictionaryConfigurationError("Refusing to start with an empty Banjara dictionary")

        self.lexicon = lexicon
        self.translator = translator
        self.source_hint = source_hint
        self.fallback_timeout = fallback_timeout
        self._max_phrase_words = max(
            [len(entry.source_phrase.split()) for entry in lexicon.entries]
            + [len(alias.split()) for alias in lexicon.aliases]
        )
        self._strategies: Sequence[_Strategy] = (
            _Strategy(MatchTier.EXACT, self._exact),
            _Strategy(MatchTier.ALIAS, self._alias),
            _Strategy(MatchTier.PHONETIC, self._phonetic),
            _Strategy(MatchTier.WORD_BOUNDARY, self._word_boundary),
            _Strategy(MatchTier.PREFIX, self._prefix),
            _Strategy(MatchTier.SUBSTRING, self._substring),
        )

    # Tier scorers: return a score when the entry qualifies, else None.

    @staticmethod
    def _exact(token: str, entry: DictionaryEntry) -> Optional[float]:
        return 1.0 if token == entry.source_phrase else None

    def _alias(self, token: str, entry: DictionaryEntry) -> Optional[float]:
        return 0.95 if self.lexicon.aliases.get(token) == entry.source_phrase else None

    @staticmethod
    def _phonetic(token: str, entry: DictionaryEntry) -> Optional[float]:
        similarity = phonetic_similarity(token, entry.source_phrase)
        return 0.9 * similarity if similarity > PHONETIC_THRESHOLD else None

    @staticmethod
    def _word_boundary(token: str, entry: DictionaryEntry) -> Optional[float]:
        phrase = entry.source_phrase
        if token.startswith(phrase + " ") or token.endswith(" " + phrase):
            return 0.85
        return None

    @staticmethod
    def _prefix(token: str, entry: DictionaryEntry) -> Optional[float]:
        return 0.7 if entry.source_phrase[:len(token)] == token else None

    @staticmethod
    def _substring(token: str, entry: DictionaryEntry) -> Optional[float]:
        phrase = entry.source_phrase
        if len(token) < MIN_SUBSTRING_LENGTH or len(phrase) < MIN_SUBSTRING_LENGTH:
            return None
        return 0.5 if token in phrase or phrase in token else None

    def match_token(self, token: str) -> TokenMatch:
        """Match one token (or a multi-word unit) against the lexicon."""
        original = clean_token(token)
        key = original.lower()
        if not key:
            return TokenMatch(original_token=original)

        for strategy in self._strategies:
            candidates = []
            for index, entry in enumerate(self.lexicon.entries):
                score = strategy.score(key, entry)
                if score is not None:
                    candidates.append((-score, index, entry, score))
            if candidates:
                candidates.sort(key=lambda c: (c[0], c[1]))
                _, _, entry, score = candidates[0]
                logger.debug(
                    f"Token '{original}' matched '{entry.source_phrase}' "
                    f"via {strategy.tier.value} ({score:.2f})"
                )
                return TokenMatch(original_token=original, matched_entry=entry, tier=strategy.tier, score=score)

        logger.debug(f"Token '{original}' has no dictionary match")
        return TokenMatch(original_token=original)

    def match_phrase(self, tokens: Sequence[str]) -> Optional[TokenMatch]:
        """
        Match a run of several tokens as one dictionary phrase.

        Only exact phrases and aliases count; a run that merely resembles a
        phrase is left to per-token matching.
        """
        cleaned = [clean_token(token) for token in tokens]
        if len(cleaned) < 2 or not all(cleaned):
            return None

        original = " ".join(cleaned)
        key = original.lower()
        entry = self.lexicon.get(key)
        if entry is not None:
            return TokenMatch(original_token=original, matched_entry=entry, tier=MatchTier.EXACT, score=1.0)
        entry = self.lexicon.resolve_alias(key)
        if entry is not None:
            return TokenMatch(original_token=original, matched_entry=entry, tier=MatchTier.ALIAS, score=0.95)
        return None

    def match_tokens(self, source_text: str) -> List[TokenMatch]:
        """
        Match whitespace-separated tokens, preferring the longest run of
        consecutive tokens that spells a multi-word dictionary phrase.
        """
        tokens = source_text.split()
        matches = []
        i = 0
        while i < len(tokens):
            widest = min(self._max_phrase_words, len(tokens) - i)
            for width in range(widest, 1, -1):
                phrase_match = self.match_phrase(tokens[i:i + width])
                if phrase_match is not None:
                    logger.debug(
                        f"Phrase '{phrase_match.original_token}' matched "
                        f"'{phrase_match.matched_entry.source_phrase}' via {phrase_match.tier.value}"
                    )
                    matches.append(phrase_match)
                    i += width
                    break
            else:
                matches.append(self.match_token(tokens[i]))
                i += 1
        return matches

    async def translate(self, source_text: str) -> TranslationResult:
        """
        Translate recognised Banjara text into Telugu (A) and English (B).

        Never raises: external failures degrade to placeholder text.

        Args:
            source_text: Raw recognised speech; callers reject empty input

        Returns:
            TranslationResult with both target texts
        """
        matches = self.match_tokens(source_text)

        if any(m.is_match for m in matches):
            target_a = []
            target_b = []
            for m in matches:
                if m.is_match:
                    target_a.append(m.matched_entry.target_a)
                    target_b.append(m.matched_entry.target_b)
                elif m.original_token:
                    target_a.append(m.original_token)
                    target_b.append(m.original_token)
            return TranslationResult(
                target_text_a=" ".join(target_a),
                target_text_b=" ".join(target_b),
                matches=tuple(matches),
                used_fallback=False,
            )

        return await self._fallback(source_text, tuple(matches))

    async def _fallback(self, source_text: str, matches) -> TranslationResult:
        text = source_text.strip()
        target_b = f"{text} {ENGLISH_UNAVAILABLE}".strip()
        target_a = await self._external_telugu(text)
        if target_a is None:
            target_a = f"{text} {TELUGU_UNAVAILABLE}".strip()

        return TranslationResult(
            target_text_a=target_a,
            target_text_b=target_b,
            matches=matches,
            used_fallback=True,
        )

    async def _external_telugu(self, text: str) -> Optional[str]:
        if not text or self.translator is None:
            return None

        try:
            translated = await asyncio.wait_for(
                self.translator.translate(text, self.source_hint, TARGET_A_LANGUAGE),
                timeout=self.fallback_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(f"External translation timed out after {self.fallback_timeout}s")
            return None
        except ExternalServiceError as e:
            logger.warning(f"External translation failed: {e.message}", extra={"details": e.details})
            return None
        except Exception as e:
            logger.error(f"External translation raised unexpectedly: {e}", exc_info=True)
            return None

        if not translated or not translated.strip():
            logger.warning("External translation returned empty text")
            return None
        return translated.strip()
