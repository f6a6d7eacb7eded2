"""
Sentence Finder

Indexes an in-memory collection of short texts ("sentences") by word tokens
and answers three kinds of queries against that index:

- search:  multi-token membership (exact, prefix fallback, or substring),
           optionally ranked by a relevance score
- suggest: dictionary words starting with a prefix
- merge:   fold another finder's sentences into this one

Example Usage:
    from sentence_finder import SentenceFinder

    finder = SentenceFinder(strict_tokens=True).initialize([
        "The quick brown fox jumps over the lazy dog",
        "Quick foxes are known for jumping",
    ])
    finder.on("search", lambda n: print(f"found {n}"))

    finder.search("fox jump", ranked=True).results
    finder.suggest("qu").suggestions
"""

# src/sentence_finder/__init__.py
from .engine import SentenceFinder
from .errors import FinderError, InvalidArgumentError, InvalidInputError
from .events import EventName
from .loader import load_sentences
from .models import IndexStats, SearchResult, SuggestResult

__version__ = "1.0.0"
__all__ = [
    "SentenceFinder",
    "EventName",
    "FinderError",
    "InvalidInputError",
    "InvalidArgumentError",
    "SearchResult",
    "SuggestResult",
    "IndexStats",
    "load_sentences",
]
