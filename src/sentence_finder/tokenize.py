from __future__ import annotations
import re
from typing import Callable, Iterable, List, Optional, Protocol

# Separator runs: anything that is not a letter or a digit (underscore included)
_SPLIT_RE = re.compile(r"[\W_]+")

# Strict mode: alternating runs of word chars (letters, digits, ' and -) and everything else
_WORD = r"(?:[^\W_]|['\-])"
_STRICT_RE = re.compile(rf"{_WORD}+|(?:(?!{_WORD}).)+", re.DOTALL)

_SPACES_RE = re.compile(r"\s+")


def normalize_word(word: str, case_sensitive: bool = False) -> str:
    """Casefold a token unless the finder is case-sensitive."""
    return word if case_sensitive else word.casefold()


class Tokenizer(Protocol):
    def tokenize(self, text: str) -> List[str]: ...


class DefaultTokenizer:
    """
    Split on runs of characters that are neither letters nor digits.

        >>> DefaultTokenizer().tokenize("Hi-tech, I'm here")
        ['hi', 'tech', 'i', 'm', 'here']
    """
    def __init__(self, case_sensitive: bool = False) -> None:
        self.case_sensitive = case_sensitive

    def tokenize(self, text: str) -> List[str]:
        return [normalize_word(w, self.case_sensitive) for w in _SPLIT_RE.split(text) if w]


class StrictTokenizer:
    """
    Keep hyphenated compounds and contractions together.

    Whitespace runs are collapsed first, then the text is cut wherever a
    word run (letters, digits, apostrophes, hyphens) meets a non-word run.
    Fragments are stripped and empty ones dropped, so a punctuation run
    like "," survives as its own token.

        >>> StrictTokenizer().tokenize("Hi-tech, I'm here")
        ['hi-tech', ',', "i'm", 'here']
    """
    def __init__(self, case_sensitive: bool = False) -> None:
        self.case_sensitive = case_sensitive

    def tokenize(self, text: str) -> List[str]:
        text = _SPACES_RE.sub(" ", text)
        out: List[str] = []
        for frag in _STRICT_RE.findall(text):
            frag = frag.strip()
            if frag:
                out.append(normalize_word(frag, self.case_sensitive))
        return out


class CallableTokenizer:
    """Adapter for a caller-supplied ``str -> iterable of str`` function."""
    def __init__(self, func: Callable[[str], Iterable[str]]) -> None:
        if not callable(func):
            raise ValueError("tokenizer must be callable")
        self.func = func

    def tokenize(self, text: str) -> List[str]:
        return [str(t) for t in self.func(text)]


def make_tokenizer(tokenizer: Optional[Callable[[str], Iterable[str]]] = None,
                   *,
                   strict_tokens: bool = False,
                   case_sensitive: bool = False) -> Tokenizer:
    """A custom callable wins over strict_tokens; default tokenizer otherwise."""
    if tokenizer is not None:
        return CallableTokenizer(tokenizer)
    if strict_tokens:
        return StrictTokenizer(case_sensitive=case_sensitive)
    return DefaultTokenizer(case_sensitive=case_sensitive)
