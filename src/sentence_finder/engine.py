# sentence_finder/engine.py
from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Mapping, Optional, Sequence, Union

from . import config as CFG
from . import search as search_mod
from .errors import InvalidArgumentError
from .events import EventName, EventRegistry, Listener
from .index import WordIndex
from .models import IndexStats, SearchResult, SuggestResult
from .tokenize import make_tokenizer, normalize_word

log = logging.getLogger(__name__)


def _check_min_match(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"min_match_count must be an integer >= 1, got {value!r}")
    return value


class SentenceFinder:
    """
    Facade over the word index, search/ranking and suggestion pipeline:
      - WordIndex       (sentences, dictionary, frequency, text lookup)
      - search.run      (exact / prefix-fallback / substring matching, ranking)
      - SortedLexicon   (cached sorted words for suggest())
      - EventRegistry   (init/search/suggest/merge/reset listeners)

    Mutators (initialize, merge, reset) and on() return self so calls chain:

        finder = SentenceFinder(strict_tokens=True).initialize(lines)
        finder.search("fox jump", ranked=True).results
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        *,
        min_match_count: int = CFG.MIN_MATCH_COUNT,
        case_sensitive: bool = CFG.CASE_SENSITIVE,
        tokenizer: Optional[Callable[[str], Iterable[str]]] = None,
        strict_tokens: bool = CFG.STRICT_TOKENS,
    ) -> None:
        self.min_match_count = _check_min_match(min_match_count)
        self.case_sensitive = bool(case_sensitive)
        self.tokenizer = make_tokenizer(
            tokenizer, strict_tokens=strict_tokens, case_sensitive=self.case_sensitive
        )
        self._index = WordIndex(self.tokenizer, case_sensitive=self.case_sensitive)
        self._events = EventRegistry()

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return (f"SentenceFinder(sentences={len(self._index)}, "
                f"words={len(self._index.dictionary)}, min_match_count={self.min_match_count})")

    # /* ~~~ Replace the whole collection and rebuild every structure ~~~ */
    def initialize(self, sentences: Sequence[str]) -> "SentenceFinder":
        n = self._index.build(sentences)
        log.info("initialize(): sentences=%d words=%d", n, len(self._index.dictionary))
        self._events.emit(EventName.INIT, n)
        return self

    # /* ~~~ Append another finder's sentences, re-indexed with our tokenizer ~~~ */
    def merge(self, other: Union["SentenceFinder", WordIndex], *, deduplicate: bool = False) -> "SentenceFinder":
        if isinstance(other, SentenceFinder):
            source = other._index
        elif isinstance(other, WordIndex):
            source = other
        else:
            raise InvalidArgumentError(
                f"can only merge with another SentenceFinder, got {type(other).__name__}"
            )
        incoming = len(source)
        added = self._index.merge(source, deduplicate=deduplicate)
        log.info("merge(): incoming=%d added=%d deduplicate=%s total=%d",
                 incoming, added, deduplicate, len(self._index))
        # reports the source size, not the post-dedup count
        self._events.emit(EventName.MERGE, incoming)
        return self

    def reset(self) -> "SentenceFinder":
        self._index.clear()
        log.info("reset(): index cleared")
        self._events.emit(EventName.RESET)
        return self

    # ------------- query -------------

    def search(
        self,
        query: str,
        *,
        ranked: bool = False,
        min_match_count: Optional[int] = None,
        partial: bool = False,
    ) -> SearchResult:
        min_match = self.min_match_count if min_match_count is None else _check_min_match(min_match_count)
        results = search_mod.run(
            self._index, query, min_match_count=min_match, ranked=ranked, partial=partial
        )
        log.debug("search(%r, ranked=%s, partial=%s, min=%d): %d results",
                  query, ranked, partial, min_match, len(results))
        self._events.emit(EventName.SEARCH, len(results))
        return SearchResult(results=results, finder=self)

    def search_array(
        self,
        query: str,
        *,
        ranked: bool = False,
        min_match_count: Optional[int] = None,
        partial: bool = False,
    ) -> List[str]:
        """Same as search(), returning only the list of sentences."""
        return self.search(query, ranked=ranked, min_match_count=min_match_count, partial=partial).results

    def suggest(self, prefix: str) -> SuggestResult:
        """
        Dictionary words starting with prefix, in sorted order.
        The first call after a mutation sorts the vocabulary; later calls
        reuse the sorted snapshot and only binary-search it.
        """
        if not prefix.strip():
            suggestions: List[str] = []
        else:
            suggestions = self._index.words_with_prefix(normalize_word(prefix, self.case_sensitive))
        log.debug("suggest(%r): %d words", prefix, len(suggestions))
        self._events.emit(EventName.SUGGEST, len(suggestions))
        return SuggestResult(suggestions=suggestions, finder=self)

    # ------------- notifications -------------

    def on(self, event: Union[EventName, str], listener: Listener) -> "SentenceFinder":
        self._events.add(event, listener)
        return self

    # ------------- accessors -------------

    def get_dictionary(self) -> Mapping[str, List[int]]:
        """Read-only live view: word -> sentence positions (one entry per occurrence)."""
        return self._index.dictionary

    def get_word_frequency(self) -> Mapping[str, int]:
        """Read-only live view: word -> total occurrences across the collection."""
        return self._index.frequency

    @property
    def sentences(self) -> tuple:
        return self._index.sentences

    def position_of(self, text: str) -> Optional[int]:
        return self._index.position_of(text)

    def stats(self, n: int = 10) -> IndexStats:
        freq = self._index.frequency
        top = sorted(freq.items(), key=lambda kv: (-kv[1], kv[0]))[:max(0, n)]
        return IndexStats(
            sentences=len(self._index),
            vocabulary=len(freq),
            tokens=sum(freq.values()),
            top_words=top,
        )
