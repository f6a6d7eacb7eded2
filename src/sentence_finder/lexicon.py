from __future__ import annotations
import bisect
from typing import Iterable, List, Optional


class SortedLexicon:
    """
    Lazily built, sorted snapshot of dictionary words.
    Any index mutation calls invalidate(); the next lookup re-sorts the keys.
    The snapshot is a pure cache: dropping it only costs a rebuild.
    """
    def __init__(self) -> None:
        self._keys: Optional[List[str]] = None
        self._dirty: bool = True

    @property
    def dirty(self) -> bool:
        return self._dirty

    def invalidate(self) -> None:
        self._keys = None
        self._dirty = True

    def keys(self, words: Iterable[str]) -> List[str]:
        """Return the sorted snapshot, rebuilding it from `words` if dirty."""
        if self._dirty or self._keys is None:
            self._keys = sorted(words)
            self._dirty = False
        return self._keys

    def with_prefix(self, prefix: str, words: Iterable[str]) -> List[str]:
        # All keys sharing a prefix are contiguous in sorted order
        keys = self.keys(words)
        out: List[str] = []
        i = bisect.bisect_left(keys, prefix)
        while i < len(keys) and keys[i].startswith(prefix):
            out.append(keys[i])
            i += 1
        return out
