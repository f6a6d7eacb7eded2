# src/e2e/test_suggest.py
import pytest

from sentence_finder import SentenceFinder
from sentence_finder.lexicon import SortedLexicon


@pytest.fixture
def finder():
    return SentenceFinder().initialize(["quick", "quicker", "quickly", "quiet", "queue", "zebra"])


def test_suggests_sorted_words_with_prefix(finder):
    assert finder.suggest("qui").suggestions == ["quick", "quicker", "quickly", "quiet"]


def test_empty_prefix_returns_nothing(finder):
    assert finder.suggest("").suggestions == []
    assert finder.suggest("  ").suggestions == []


def test_prefix_is_casefolded(finder):
    assert finder.suggest("QUICK").suggestions == ["quick", "quicker", "quickly"]


def test_case_sensitive_prefix():
    f = SentenceFinder(case_sensitive=True).initialize(["Quick quick Quiet"])
    assert f.suggest("Q").suggestions == ["Quick", "Quiet"]
    assert f.suggest("q").suggestions == ["quick"]


def test_no_match_past_end_of_lexicon(finder):
    assert finder.suggest("zz").suggestions == []


def test_suggest_equals_brute_force_filter():
    f = SentenceFinder().initialize([
        "The quick brown fox jumps over the lazy dog",
        "Quick foxes are known for jumping",
        "Dogs are usually lazy in the afternoon",
    ])
    words = list(f.get_dictionary())
    prefixes = {w[:i] for w in words for i in range(1, len(w) + 1)} | {"x", "zz", "b"}
    for p in prefixes:
        assert f.suggest(p).suggestions == sorted(w for w in words if w.startswith(p)), p


def test_sorted_cache_reused_until_mutation(finder):
    lexicon = finder._index.lexicon
    finder.suggest("q")
    assert lexicon.dirty is False
    snapshot = lexicon.keys([])
    finder.suggest("z")
    assert lexicon.keys([]) is snapshot

    finder.merge(SentenceFinder().initialize(["quill"]))
    assert lexicon.dirty is True
    assert finder.suggest("quil").suggestions == ["quill"]

    finder.reset()
    assert lexicon.dirty is True
    assert finder.suggest("q").suggestions == []


def test_reinitialize_invalidates_cache(finder):
    finder.suggest("q")
    finder.initialize(["alpha", "beta"])
    assert finder.suggest("q").suggestions == []
    assert finder.suggest("al").suggestions == ["alpha"]


def test_lexicon_lower_bound_scan():
    lex = SortedLexicon()
    words = ["pear", "apple", "apricot", "banana", "app"]
    assert lex.with_prefix("ap", words) == ["app", "apple", "apricot"]
    assert lex.with_prefix("b", words) == ["banana"]
    assert lex.with_prefix("c", words) == []
