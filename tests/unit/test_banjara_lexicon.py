import json
import pytest

from app.core.exceptions import DictionaryConfigurationError
from app.models.internal_models import DictionaryEntry
from app.services.banjara_lexicon import BUILTIN_ENTRIES, Lexicon, builtin_lexicon, load_lexicon


def test_builtin_lexicon_keeps_declaration_order():
    lexicon = builtin_lexicon()
    assert len(lexicon) == len(BUILTIN_ENTRIES)
    assert [e.source_phrase for e in lexicon] == [row[0] for row in BUILTIN_ENTRIES]


def test_every_builtin_alias_points_at_an_entry():
    lexicon = builtin_lexicon()
    for alias in lexicon.aliases:
        assert lexicon.resolve_alias(alias) is not None


def test_lookup_is_case_insensitive():
    lexicon = Lexicon([DictionaryEntry("Khaldo", "తినండి", "Eat")])
    assert lexicon.get("KHALDO").source_phrase == "khaldo"


def test_duplicate_phrase_rejected():
    entries = [
        DictionaryEntry("pani", "నీళ్ళు", "Water"),
        DictionaryEntry("PANI", "నీరు", "Water"),
    ]
    with pytest.raises(DictionaryConfigurationError):
        Lexicon(entries)


def test_alias_to_unknown_phrase_rejected():
    with pytest.raises(DictionaryConfigurationError):
        Lexicon([DictionaryEntry("pani", "నీళ్ళు", "Water")], {"paani": "dudh"})


def test_load_lexicon_without_path_returns_builtin():
    assert len(load_lexicon(None)) == len(BUILTIN_ENTRIES)


def test_load_lexicon_from_json(tmp_path):
    path = tmp_path / "lexicon.json"
    path.write_text(json.dumps({
        "entries": [
            {"banjara": "pani", "telugu": "నీళ్ళు", "english": "Water"},
            {"banjara": "roti", "telugu": "రొట్టె", "english": "Bread"},
        ],
        "aliases": {"paani": "pani"},
    }, ensure_ascii=False), encoding="utf-8")

    lexicon = load_lexicon(str(path))
    assert [e.source_phrase for e in lexicon] == ["pani", "roti"]
    assert lexicon.resolve_alias("paani").target_b == "Water"


@pytest.mark.parametrize("content", [
    "not json",
    json.dumps(["pani"]),
    json.dumps({"entries": [{"banjara": "pani"}]}),
    json.dumps({"entries": [], "aliases": ["x"]}),
])
def test_malformed_lexicon_file_rejected(tmp_path, content):
    path = tmp_path / "lexicon.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(DictionaryConfigurationError):
        load_lexicon(str(path))


def test_missing_lexicon_file_rejected(tmp_path):
    with pytest.raises(DictionaryConfigurationError):
        load_lexicon(str(tmp_path / "missing.json"))
