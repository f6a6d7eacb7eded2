from __future__ import annotations
from typing import Dict, Iterable, List, Set, Tuple
from .index import WordIndex
from .config import EXACT_WEIGHT, PREFIX_WEIGHT, SUBSTRING_WEIGHT

_NO_MATCH = float("inf")


def _matching_words(index: WordIndex, token: str, partial: bool) -> Iterable[str]:
    if partial:
        return [w for w in index.iter_words() if token in w]
    if index.postings(token):
        return [token]
    # exact miss: fall back to every word starting with the token
    return index.words_with_prefix(token)


def collect_matches(index: WordIndex, tokens: List[str], partial: bool = False) -> Dict[int, Set[str]]:
    """Sentence position -> distinct query tokens that hit it. Built fresh per query."""
    matches: Dict[int, Set[str]] = {}
    for tok in tokens:
        for word in _matching_words(index, tok, partial):
            for pos in index.postings(word):
                matches.setdefault(pos, set()).add(tok)
    return matches


def _occurrences(word: str, token: str) -> int:
    """Non-overlapping occurrences of token inside word."""
    n = 0
    start = 0
    while True:
        found = word.find(token, start)
        if found == -1:
            break
        n += 1
        start = found + len(token)
    return n


def score_sentence(sentence_tokens: List[str], query_tokens: List[str]) -> Tuple[int, float]:
    """
    Return (score, earliest token position that matched anything).
    Each occurrence of a query token inside a sentence token is worth
    EXACT_WEIGHT when the whole token is equal, PREFIX_WEIGHT when the token
    starts with it, SUBSTRING_WEIGHT otherwise.
    """
    score = 0
    earliest = _NO_MATCH
    for q in query_tokens:
        for pos, st in enumerate(sentence_tokens):
            occ = _occurrences(st, q)
            if not occ:
                continue
            if st == q:
                weight = EXACT_WEIGHT
            elif st.startswith(q):
                weight = PREFIX_WEIGHT
            else:
                weight = SUBSTRING_WEIGHT
            score += occ * weight
            earliest = min(earliest, pos)
    return score, earliest


def run(index: WordIndex,
        query: str,
        *,
        min_match_count: int,
        ranked: bool = False,
        partial: bool = False) -> List[str]:
    if not query.strip():
        return []
    tokens = index.tokens(query)
    if not tokens:
        return []

    matches = collect_matches(index, tokens, partial=partial)
    kept = sorted(pos for pos, hit in matches.items() if len(hit) >= min_match_count)

    if ranked:
        keys: Dict[int, Tuple[int, float, int]] = {}
        for pos in kept:
            score, earliest = score_sentence(index.tokens(index.sentence(pos)), tokens)
            keys[pos] = (-score, earliest, pos)
        kept.sort(key=keys.__getitem__)

    return [index.sentence(pos) for pos in kept]
