# src/e2e/test_merge.py
import pytest

from sentence_finder import InvalidArgumentError, SentenceFinder


def _assert_consistent(finder: SentenceFinder) -> None:
    d = finder.get_dictionary()
    freq = finder.get_word_frequency()
    assert set(d) == set(freq)
    for word, positions in d.items():
        assert freq[word] == len(positions)
        assert all(0 <= p < len(finder) for p in positions)


def test_merge_with_deduplication():
    f1 = SentenceFinder().initialize(["common sentence", "unique one"])
    f2 = SentenceFinder().initialize(["common sentence", "unique two"])
    f1.merge(f2, deduplicate=True)
    assert f1.search_array("sentence") == ["common sentence"]
    assert f1.sentences == ("common sentence", "unique one", "unique two")
    assert f1.get_word_frequency()["common"] == 1
    _assert_consistent(f1)


def test_merge_without_deduplication_rebases_positions():
    f1 = SentenceFinder().initialize(["common sentence", "unique one"])
    f2 = SentenceFinder().initialize(["common sentence", "unique two"])
    f1.merge(f2)
    assert len(f1) == 4
    assert f1.get_dictionary()["common"] == [0, 2]
    assert f1.get_dictionary()["two"] == [3]
    assert f1.get_word_frequency()["unique"] == 2
    assert f1.search_array("sentence") == ["common sentence", "common sentence"]
    _assert_consistent(f1)


def test_skipped_duplicates_leave_no_gaps():
    f1 = SentenceFinder().initialize(["a x"])
    f2 = SentenceFinder().initialize(["a x", "b y"])
    f1.merge(f2, deduplicate=True)
    assert f1.get_dictionary()["b"] == [1]
    assert f1.position_of("b y") == 1
    _assert_consistent(f1)


def test_dedup_merge_is_idempotent():
    f1 = SentenceFinder().initialize(["one", "two"])
    src = SentenceFinder().initialize(["two", "three"])
    f1.merge(src, deduplicate=True)
    after_first = len(f1)
    f1.merge(src, deduplicate=True)
    assert len(f1) == after_first == 3
    _assert_consistent(f1)


def test_merge_reports_source_size():
    seen = []
    f1 = SentenceFinder().initialize(["same"]).on("merge", seen.append)
    f1.merge(SentenceFinder().initialize(["same", "other", "third"]), deduplicate=True)
    assert seen == [3]
    assert len(f1) == 3


def test_merge_reindexes_with_receiving_tokenizer():
    strict = SentenceFinder(strict_tokens=True).initialize(["plain words"])
    loose = SentenceFinder().initialize(["Hi-tech gear"])
    assert "hi" in loose.get_dictionary()
    strict.merge(loose)
    assert "hi-tech" in strict.get_dictionary()
    assert "hi" not in strict.get_dictionary()
    assert strict.search_array("hi-tech") == ["Hi-tech gear"]


def test_merge_into_itself_doubles_collection():
    f = SentenceFinder().initialize(["a b", "c"])
    f.merge(f)
    assert f.sentences == ("a b", "c", "a b", "c")
    assert f.get_dictionary()["a"] == [0, 2]
    _assert_consistent(f)


def test_merge_rejects_incompatible_object():
    f = SentenceFinder().initialize(["keep me"])
    with pytest.raises(InvalidArgumentError):
        f.merge(["not", "a", "finder"])
    with pytest.raises(TypeError):
        f.merge(None)
    assert f.sentences == ("keep me",)
