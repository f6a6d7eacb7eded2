"""
Word index over an in-memory sentence collection.

The index owns four structures that must always agree with each other:

- sentences:   the collection; a sentence's position is its identity
- dictionary:  token -> sentence positions, one entry per occurrence
- frequency:   token -> total occurrences (== len(dictionary[token]))
- positions:   exact sentence text -> position (last write wins)

plus a SortedLexicon cache of the dictionary keys that every mutation
invalidates. Nothing outside this module writes to these structures.
"""

from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from .errors import InvalidArgumentError, InvalidInputError
from .lexicon import SortedLexicon
from .tokenize import Tokenizer, normalize_word

log = logging.getLogger(__name__)


def _check_sentences(sentences) -> List[str]:
    # str is itself a sequence of str; reject it explicitly
    if isinstance(sentences, (str, bytes)) or not isinstance(sentences, (list, tuple)):
        raise InvalidInputError(
            f"sentences must be a list or tuple of str, got {type(sentences).__name__}"
        )
    for i, s in enumerate(sentences):
        if not isinstance(s, str):
            raise InvalidInputError(f"sentence #{i} is {type(s).__name__}, expected str")
    return list(sentences)


class WordIndex:
    def __init__(self, tokenizer: Tokenizer, *, case_sensitive: bool = False) -> None:
        self.tokenizer = tokenizer
        self.case_sensitive = case_sensitive
        self._sentences: List[str] = []
        self._dictionary: Dict[str, List[int]] = {}
        self._frequency: Dict[str, int] = {}
        self._positions: Dict[str, int] = {}
        self.lexicon = SortedLexicon()

    # ---- Tokens ----
    def tokens(self, text: str) -> List[str]:
        """Tokenize and normalize text exactly as indexing does. Empty tokens are dropped."""
        return [normalize_word(t, self.case_sensitive) for t in self.tokenizer.tokenize(text) if t]

    # ---- Build ----
    def build(self, sentences: Sequence[str]) -> int:
        """Replace the whole collection. Returns the new sentence count."""
        items = _check_sentences(sentences)
        self.clear()
        for text in items:
            self._append(text)
        log.debug("index built: sentences=%d words=%d", len(self._sentences), len(self._dictionary))
        return len(self._sentences)

    def merge(self, other: "WordIndex", *, deduplicate: bool = False) -> int:
        """
        Append the other index's sentences, re-tokenized with this index's
        tokenizer. With deduplicate, sentences whose exact text is already in
        this collection (as it stood before the merge) are skipped. Positions
        stay contiguous. Returns the number of sentences appended.
        """
        if not isinstance(other, WordIndex):
            raise InvalidArgumentError(
                f"can only merge another index, got {type(other).__name__}"
            )
        incoming = list(other._sentences)  # snapshot: other may be self
        existing = set(self._positions) if deduplicate else set()
        added = 0
        for text in incoming:
            if deduplicate and text in existing:
                continue
            self._append(text)
            added += 1
        self.lexicon.invalidate()
        log.debug("index merged: incoming=%d added=%d", len(incoming), added)
        return added

    def clear(self) -> None:
        self._sentences = []
        self._dictionary.clear()
        self._frequency.clear()
        self._positions.clear()
        self.lexicon.invalidate()

    def _append(self, text: str) -> None:
        pos = len(self._sentences)
        self._sentences.append(text)
        self._positions[text] = pos
        for tok in self.tokens(text):
            self._dictionary.setdefault(tok, []).append(pos)
            self._frequency[tok] = self._frequency.get(tok, 0) + 1
        self.lexicon.invalidate()

    # ---- Read access ----
    def __len__(self) -> int:
        return len(self._sentences)

    def sentence(self, pos: int) -> str:
        return self._sentences[pos]

    @property
    def sentences(self) -> tuple:
        return tuple(self._sentences)

    @property
    def dictionary(self) -> Mapping[str, List[int]]:
        return MappingProxyType(self._dictionary)

    @property
    def frequency(self) -> Mapping[str, int]:
        return MappingProxyType(self._frequency)

    def position_of(self, text: str) -> Optional[int]:
        return self._positions.get(text)

    def postings(self, token: str) -> List[int]:
        return self._dictionary.get(token, [])

    def iter_words(self) -> Iterable[str]:
        return self._dictionary.keys()

    def words_with_prefix(self, prefix: str) -> List[str]:
        return self.lexicon.with_prefix(prefix, self._dictionary.keys())
