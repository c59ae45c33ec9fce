import pytest

from app.intent_matcher import IntentMatcher, word_similarity
from app.models import Intent, MatchTier
from app.normalizer import TranscriptNormalizer
from app.patterns import INTENT_PATTERNS, iter_patterns


@pytest.fixture
def matcher():
    """Matcher over the built-in catalog."""
    return IntentMatcher()


@pytest.fixture
def small_matcher():
    """Matcher over a tiny catalog without corrections."""
    return IntentMatcher(
        normalizer=TranscriptNormalizer({}),
        patterns=[
            (Intent.READ_SUMMARY, "summary"),
            (Intent.GET_DEADLINES, "due date"),
            (Intent.STOP, "stop"),
        ],
    )


class TestWordSimilarity:
    """Test cases for the fuzzy word score."""

    def test_equal(self):
        assert word_similarity("stop", "stop") == 1.0

    def test_containment_either_way(self):
        assert word_similarity("stopping", "stop") == 0.8
        assert word_similarity("stop", "stopping") == 0.8

    def test_shared_prefix(self):
        assert word_similarity("summit", "summary") == 0.6

    def test_short_prefix_does_not_count(self):
        assert word_similarity("star", "stop") == 0.0

    def test_unrelated(self):
        assert word_similarity("abc", "xyz") == 0.0


class TestTiers:
    """Test cases for tier order and catalog order."""

    def test_exact_token(self, small_matcher):
        match = small_matcher.detect_intent("summary now")
        assert match.intent == Intent.READ_SUMMARY
        assert match.tier == MatchTier.EXACT
        assert match.matched_pattern == "summary"

    def test_phrase_substring(self, small_matcher):
        match = small_matcher.detect_intent("when is the due date")
        assert match.intent == Intent.GET_DEADLINES
        assert match.tier == MatchTier.PHRASE

    def test_phrase_inside_word(self, small_matcher):
        match = small_matcher.detect_intent("stopping")
        assert match.intent == Intent.STOP
        assert match.tier == MatchTier.PHRASE

    def test_fuzzy_containment(self, small_matcher):
        match = small_matcher.detect_intent("summ")
        assert match.intent == Intent.READ_SUMMARY
        assert match.tier == MatchTier.FUZZY

    def test_fuzzy_shared_prefix(self, small_matcher):
        match = small_matcher.detect_intent("summit")
        assert match.intent == Intent.READ_SUMMARY
        assert match.tier == MatchTier.FUZZY

    def test_fuzzy_skips_short_tokens(self, small_matcher):
        match = small_matcher.detect_intent("su st")
        assert match.intent == Intent.UNKNOWN
        assert match.tier == MatchTier.NONE

    def test_catalog_order_wins_within_tier(self, small_matcher):
        match = small_matcher.detect_intent("stop the summary")
        assert match.intent == Intent.READ_SUMMARY

    def test_exact_tier_beats_earlier_phrase(self):
        matcher = IntentMatcher(
            normalizer=TranscriptNormalizer({}),
            patterns=[(Intent.READ_SUMMARY, "sum"), (Intent.STOP, "stop")],
        )
        match = matcher.detect_intent("stop summit")
        assert match.intent == Intent.STOP
        assert match.tier == MatchTier.EXACT

    def test_counts_detections(self, small_matcher):
        small_matcher.detect_intent("summary")
        small_matcher.detect_intent("nothing")
        assert small_matcher.total_detections == 2


class TestCatalog:
    """Test cases against the built-in catalog."""

    def test_deadline(self, matcher):
        match = matcher.detect_intent("deadline")
        assert match.intent == Intent.GET_DEADLINES
        assert match.tier == MatchTier.EXACT
        assert match.params == {}

    def test_misheard_summary(self, matcher):
        match = matcher.detect_intent("Some Marie")
        assert match.intent == Intent.READ_SUMMARY
        assert match.normalized == "summary"

    def test_telugu_stop(self, matcher):
        assert matcher.detect_intent("ఆపు").intent == Intent.STOP

    def test_hindi_summary(self, matcher):
        assert matcher.detect_intent("सारांश").intent == Intent.READ_SUMMARY

    def test_gibberish_is_unknown(self, matcher):
        match = matcher.detect_intent("xyz gibberish")
        assert match.intent == Intent.UNKNOWN
        assert match.params == {}
        assert match.tier == MatchTier.NONE

    def test_translate_with_language(self, matcher):
        match = matcher.detect_intent("translate to tamil")
        assert match.intent == Intent.TRANSLATE
        assert match.params == {"language": "tamil", "language_code": "ta-IN"}

    def test_translate_defaults_to_hindi(self, matcher):
        match = matcher.detect_intent("translate")
        assert match.intent == Intent.TRANSLATE
        assert match.params == {"language": "hindi", "language_code": "hi-IN"}

    def test_every_intent_has_triggers(self):
        for intent, groups in INTENT_PATTERNS.items():
            assert any(groups.values()), intent

    def test_single_word_triggers_resolve_to_first_owner(self, matcher):
        first_owner = {}
        for intent, trigger in iter_patterns():
            first_owner.setdefault(trigger, intent)

        checked = 0
        for trigger, intent in first_owner.items():
            if trigger.split() != [trigger]:
                continue
            assert matcher.detect_intent(trigger).intent == intent, trigger
            checked += 1

        assert checked > 100

    @pytest.mark.parametrize(
        "text,intent",
        [
            ("appudu", Intent.GET_DEADLINES),
            ("pointukal", Intent.GET_KEY_INFO),
            ("apakadam", Intent.WARNINGS),
            ("porimaan", Intent.GET_AMOUNT),
            ("marosari", Intent.REPEAT),
            ("kannadam", Intent.TRANSLATE),
        ],
    )
    def test_romanized_triggers_survive_corrections(self, matcher, text, intent):
        match = matcher.detect_intent(text)
        assert match.intent == intent
        assert match.tier == MatchTier.EXACT
