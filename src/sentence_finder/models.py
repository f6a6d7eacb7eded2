# sentence_finder/models.py
"""
Result containers returned by the finder.

These classes carry no logic; they only give the public operations a stable,
typed shape (the web layer serializes them with dataclasses.asdict).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Tuple


@dataclass(frozen=True, slots=True)
class SearchResult:
    """
    Outcome of SentenceFinder.search().

    Attributes
    ----------
    results : List[str]
        Matching sentence texts. Collection order when unranked, otherwise
        score desc, earliest match asc, collection position asc.
    finder : SentenceFinder
        The finder that produced the result, for chaining.
    """
    results: List[str]
    finder: Any = field(default=None, repr=False, compare=False)


@dataclass(frozen=True, slots=True)
class SuggestResult:
    """Dictionary words starting with the requested prefix, in sorted order."""
    suggestions: List[str]
    finder: Any = field(default=None, repr=False, compare=False)


@dataclass(frozen=True, slots=True)
class IndexStats:
    sentences: int
    vocabulary: int
    tokens: int              # total token occurrences across the collection
    top_words: List[Tuple[str, int]]
