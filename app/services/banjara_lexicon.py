"""
Curated Banjara (Lambadi) dictionary.

The built-in entries are the primary source of translation quality. Entry
order is significant: when two entries score the same for a token, the one
declared first wins, so new entries should be appended rather than sorted in.

A JSON file can replace the built-in data (``LEXICON_PATH``)::

    {
      "entries": [{"banjara": "khaldo", "telugu": "తినండి", "english": "Eat"}],
      "aliases": {"kaldo": "khaldo"}
    }
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Sequence, Tuple

from app.core.exceptions import DictionaryConfigurationError
from app.models.internal_models import DictionaryEntry

logger = logging.getLogger(__name__)


# (banjara, telugu, english)
BUILTIN_ENTRIES: Tuple[Tuple[str, str, str], ...] = (
    # Greetings
    ("namaskar", "నమస్కారం", "Hello"),
    ("dhanyavad", "ధన్యవాదాలు", "Thank you"),
    ("ram ram", "రామ్ రామ్", "Greetings"),
    ("tu kasan che", "మీరు ఎలా ఉన్నారు", "How are you"),
    ("mar nav", "నా పేరు", "My name"),
    ("tar nav kai", "మీ పేరు ఏమిటి", "What is your name"),

    # Food
    ("khaldo", "తినండి", "Eat"),
    ("khavo", "తిను", "Eat"),
    ("pido", "తాగండి", "Drink"),
    ("pani", "నీళ్ళు", "Water"),
    ("roti", "రొట్టె", "Bread"),
    ("dudh", "పాలు", "Milk"),
    ("guddu", "గుడ్డు", "Egg"),
    ("bhaat", "అన్నం", "Rice"),

    # Family
    ("bapu", "నాన్న", "Father"),
    ("aaya", "అమ్మ", "Mother"),
    ("bhai", "అన్న", "Brother"),
    ("bai", "అక్క", "Sister"),
    ("chokro", "అబ్బాయి", "Boy"),
    ("chori", "అమ్మాయి", "Girl"),

    # Home and village
    ("ghar", "ఇల్లు", "House"),
    ("tanda", "తండా", "Hamlet"),
    ("angar", "నిప్పు", "Fire"),
    ("gaadi", "బండి", "Vehicle"),

    # Everyday words
    ("aaja", "రా", "Come"),
    ("jaa", "వెళ్ళు", "Go"),
    ("kai", "ఏమిటి", "What"),
    ("kun", "ఎవరు", "Who"),
    ("kate", "ఎక్కడ", "Where"),
    ("haa", "అవును", "Yes"),
    ("koni", "కాదు", "No"),
    ("sukh", "సుఖం", "Happiness"),
    ("kai karero", "ఏం చేస్తున్నావు", "What are you doing"),
)

# Irregular spellings that the phonetic heuristic does not catch reliably.
BUILTIN_ALIASES: Mapping[str, str] = {
    "kaldo": "khaldo",
    "khalo": "khaldo",
    "namaste": "namaskar",
    "namaskaram": "namaskar",
    "danyavad": "dhanyavad",
    "dhanyawad": "dhanyavad",
    "paani": "pani",
    "doodh": "dudh",
    "gudu": "guddu",
    "angaar": "angar",
    "haan": "haa",
    "kone": "koni",
    "bhat": "bhaat",
}


class Lexicon:
    """
    Immutable, ordered view of the dictionary and its alias table.

    Phrases and aliases are stored lowercase; lookups are case-insensitive.
    """

    def __init__(self, entries: Sequence[DictionaryEntry], aliases: Optional[Mapping[str, str]] = None):
        normalized = []
        seen = set()
        for entry in entries:
            phrase = entry.source_phrase.strip().lower()
            if not phrase:
                raise DictionaryConfigurationError("Dictionary entry with empty source phrase")
            if phrase in seen:
                raise DictionaryConfigurationError(
                    f"Duplicate dictionary phrase '{phrase}'",
                    details={"source_phrase": phrase},
                )
            seen.add(phrase)
            normalized.append(DictionaryEntry(phrase, entry.target_a, entry.target_b))

        self._entries: Tuple[DictionaryEntry, ...] = tuple(normalized)
        self._by_phrase = {entry.source_phrase: entry for entry in self._entries}

        alias_map = {}
        for alias, canonical in (aliases or {}).items():
            alias_key = alias.strip().lower()
            canonical_key = canonical.strip().lower()
            if canonical_key not in self._by_phrase:
                raise DictionaryConfigurationError(
                    f"Alias '{alias_key}' refers to unknown phrase '{canonical_key}'",
                    details={"alias": alias_key, "canonical": canonical_key},
                )
            alias_map[alias_key] = canonical_key
        self._aliases = MappingProxyType(alias_map)

    @property
    def entries(self) -> Tuple[DictionaryEntry, ...]:
        return self._entries

    @property
    def aliases(self) -> Mapping[str, str]:
        return self._aliases

    def get(self, phrase: str) -> Optional[DictionaryEntry]:
        return self._by_phrase.get(phrase.strip().lower())

    def resolve_alias(self, token: str) -> Optional[DictionaryEntry]:
        canonical = self._aliases.get(token)
        return self._by_phrase[canonical] if canonical else None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DictionaryEntry]:
        return iter(self._entries)


def builtin_lexicon() -> Lexicon:
    entries = [DictionaryEntry(*row) for row in BUILTIN_ENTRIES]
    return Lexicon(entries, BUILTIN_ALIASES)


def load_lexicon(path: Optional[str] = None) -> Lexicon:
    """
    Load the dictionary once at startup.

    Args:
        path: Optional JSON file replacing the built-in dictionary

    Returns:
        Lexicon ready to be handed to the matcher

    Raises:
        DictionaryConfigurationError: If the file is unreadable or malformed
    """
    if not path:
        lexicon = builtin_lexicon()
        logger.info(f"Loaded built-in Banjara dictionary with {len(lexicon)} entries")
        return lexicon

    file_path = Path(path)
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise DictionaryConfigurationError(
            f"Could not read dictionary file {file_path}: {e}",
            details={"path": str(file_path)},
        ) from e

    if not isinstance(raw, dict) or not isinstance(raw.get("entries"), list):
        raise DictionaryConfigurationError(
            "Dictionary file must be an object with an 'entries' list",
            details={"path": str(file_path)},
        )

    entries = []
    for i, item in enumerate(raw["entries"]):
        try:
            entries.append(DictionaryEntry(
                source_phrase=str(item["banjara"]),
                target_a=str(item["telugu"]),
                target_b=str(item["english"]),
            ))
        except (KeyError, TypeError) as e:
            raise DictionaryConfigurationError(
                f"Malformed dictionary entry at index {i}",
                details={"path": str(file_path), "index": i},
            ) from e

    aliases = raw.get("aliases") or {}
    if not isinstance(aliases, dict):
        raise DictionaryConfigurationError(
            "Dictionary 'aliases' must be an object",
            details={"path": str(file_path)},
        )

    lexicon = Lexicon(entries, aliases)
    logger.info(f"Loaded Banjara dictionary from {file_path} with {len(lexicon)} entries")
    return lexicon
