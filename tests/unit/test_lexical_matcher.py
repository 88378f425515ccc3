"""
Unit tests for the Banjara lexical matcher
"""
import pytest

from app.core.exceptions import DictionaryConfigurationError, ExternalServiceError
from app.models.internal_models import MatchTier
from app.services.banjara_lexicon import Lexicon
from app.services.lexical_matcher import (
    ENGLISH_UNAVAILABLE,
    TELUGU_UNAVAILABLE,
    LexicalMatcher,
    phonetic_similarity,
)


def test_exact_match(matcher, lexicon):
    m = matcher.match_token("khaldo")
    assert m.matched_entry == lexicon.get("khaldo")
    assert m.tier == MatchTier.EXACT
    assert m.score == 1.0


def test_exact_match_ignores_case_and_punctuation(matcher, lexicon):
    m = matcher.match_token("KHALDO,")
    assert m.original_token == "KHALDO"
    assert m.matched_entry == lexicon.get("khaldo")
    assert m.tier == MatchTier.EXACT


def test_irregular_spelling_resolves_through_alias(matcher, lexicon):
    m = matcher.match_token("kaldo")
    assert m.matched_entry == lexicon.get("khaldo")
    assert m.tier == MatchTier.ALIAS
    assert m.score == pytest.approx(0.95)


def test_phonetic_match(matcher, lexicon):
    m = matcher.match_token("gaddu")
    assert m.matched_entry == lexicon.get("guddu")
    assert m.tier == MatchTier.PHONETIC
    assert m.score == pytest.approx(0.9)


def test_word_boundary_tie_goes_to_first_dictionary_entry(matcher, lexicon):
    # both "khaldo" and "roti" qualify with the same score
    m = matcher.match_token("khaldo roti")
    assert m.tier == MatchTier.WORD_BOUNDARY
    assert m.score == pytest.approx(0.85)
    assert m.matched_entry == lexicon.get("khaldo")


def test_prefix_match(matcher, lexicon):
    m = matcher.match_token("nama")
    assert m.matched_entry == lexicon.get("namaskar")
    assert m.tier == MatchTier.PREFIX
    assert m.score == pytest.approx(0.7)


def test_substring_match(matcher, lexicon):
    m = matcher.match_token("xkhaldox")
    assert m.matched_entry == lexicon.get("khaldo")
    assert m.tier == MatchTier.SUBSTRING
    assert m.score == pytest.approx(0.5)


def test_unmatched_token(matcher):
    m = matcher.match_token("xyzabc")
    assert not m.is_match
    assert m.tier is None
    assert m.score == 0.0


def test_punctuation_only_token_is_unmatched(matcher):
    m = matcher.match_token("!!!")
    assert m.original_token == ""
    assert not m.is_match


def test_phonetic_similarity_rules():
    assert phonetic_similarity("khaldo", "khaldo") == 1.0
    assert phonetic_similarity("ab", "abcdef") == 0.2
    assert phonetic_similarity("aaa", "aaa") == 0.0
    assert phonetic_similarity("ghor", "ghar") == 1.0
    assert phonetic_similarity("kaldo", "khaldo") == pytest.approx(0.2)


@pytest.mark.asyncio
async def test_translate_single_exact_word(matcher, fake_translator):
    result = await matcher.translate("khaldo")
    assert result.target_text_a == "తినండి"
    assert result.target_text_b == "Eat"
    assert result.used_fallback is False
    assert fake_translator.calls == []


@pytest.mark.asyncio
async def test_translate_alias_matches_canonical_entry(matcher):
    canonical = await matcher.translate("khaldo")
    alias = await matcher.translate("kaldo")
    assert alias.target_text_a == canonical.target_text_a
    assert alias.target_text_b == canonical.target_text_b


@pytest.mark.asyncio
async def test_translate_composes_tokens_in_order(matcher):
    result = await matcher.translate("namaskar dhanyavad")
    assert result.target_text_a == "నమస్కారం ధన్యవాదాలు"
    assert result.target_text_b == "Hello Thank you"
    assert [m.tier for m in result.matches] == [MatchTier.EXACT, MatchTier.EXACT]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "text,telugu,english",
    [
        ("ram ram", "రామ్ రామ్", "Greetings"),
        ("tu kasan che", "మీరు ఎలా ఉన్నారు", "How are you"),
        ("kai karero", "ఏం చేస్తున్నావు", "What are you doing"),
        ("mar nav", "నా పేరు", "My name"),
        ("Tar nav kai?", "మీ పేరు ఏమిటి", "What is your name"),
    ],
)
async def test_multi_word_phrase_translates_once(matcher, fake_translator, text, telugu, english):
    result = await matcher.translate(text)
    assert result.target_text_a == telugu
    assert result.target_text_b == english
    assert len(result.matches) == 1
    assert result.matches[0].tier == MatchTier.EXACT
    assert result.used_fallback is False
    assert fake_translator.calls == []


@pytest.mark.asyncio
async def test_multi_word_phrase_inside_sentence(matcher):
    result = await matcher.translate("Namaskar, tu kasan che?")
    assert result.target_text_b == "Hello How are you"
    assert [m.original_token for m in result.matches] == ["Namaskar", "tu kasan che"]


def test_match_phrase_requires_exact_phrase(matcher, lexicon):
    assert matcher.match_phrase(["ram", "ram"]).matched_entry == lexicon.get("ram ram")
    assert matcher.match_phrase(["ram", "rom"]) is None
    assert matcher.match_phrase(["ram"]) is None


@pytest.mark.asyncio
async def test_unmatched_tokens_pass_through(matcher, fake_translator):
    result = await matcher.translate("Khaldo xyzabc!")
    assert result.target_text_a == "తినండి xyzabc"
    assert result.target_text_b == "Eat xyzabc"
    assert fake_translator.calls == []


@pytest.mark.asyncio
async def test_no_match_uses_external_translation_for_telugu(matcher, fake_translator):
    result = await matcher.translate("xyzabc")
    assert result.used_fallback is True
    assert fake_translator.calls == [("xyzabc", "hi", "te")]
    assert result.target_text_a == "అనువాదం"
    assert result.target_text_b == f"xyzabc {ENGLISH_UNAVAILABLE}"


@pytest.mark.asyncio
async def test_external_failure_degrades_to_placeholders(lexicon, translator_factory):
    translator = translator_factory(error=ExternalServiceError("google-translate", "HTTP 500"))
    matcher = LexicalMatcher(lexicon, translator=translator)
    result = await matcher.translate("xyzabc")
    assert result.target_text_a == f"xyzabc {TELUGU_UNAVAILABLE}"
    assert result.target_text_b == f"xyzabc {ENGLISH_UNAVAILABLE}"


@pytest.mark.asyncio
async def test_external_timeout_degrades_to_placeholders(lexicon, translator_factory):
    translator = translator_factory(delay=0.5)
    matcher = LexicalMatcher(lexicon, translator=translator, fallback_timeout=0.05)
    result = await matcher.translate("xyzabc")
    assert result.target_text_a == f"xyzabc {TELUGU_UNAVAILABLE}"
    assert result.used_fallback is True


@pytest.mark.asyncio
async def test_empty_external_reply_degrades(lexicon, translator_factory):
    matcher = LexicalMatcher(lexicon, translator=translator_factory(reply="   "))
    result = await matcher.translate("xyzabc")
    assert result.target_text_a == f"xyzabc {TELUGU_UNAVAILABLE}"


@pytest.mark.asyncio
async def test_without_translator_both_outputs_are_placeholders(lexicon):
    matcher = LexicalMatcher(lexicon)
    result = await matcher.translate("zzzz")
    assert result.target_text_a == f"zzzz {TELUGU_UNAVAILABLE}"
    assert result.target_text_b == f"zzzz {ENGLISH_UNAVAILABLE}"


@pytest.mark.asyncio
async def test_empty_input_does_not_raise(matcher, fake_translator):
    result = await matcher.translate("")
    assert result.target_text_a == TELUGU_UNAVAILABLE
    assert result.target_text_b == ENGLISH_UNAVAILABLE
    assert fake_translator.calls == []


@pytest.mark.asyncio
async def test_translate_is_idempotent(matcher):
    first = await matcher.translate("namaskar gaddu xyzabc")
    second = await matcher.translate("namaskar gaddu xyzabc")
    assert first == second


def test_empty_dictionary_is_rejected():
    with pytest.raises(DictionaryConfigurationError):
        LexicalMatcher(Lexicon([]))
