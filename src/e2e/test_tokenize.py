# src/e2e/test_tokenize.py
import pytest

from sentence_finder.tokenize import (
    CallableTokenizer, DefaultTokenizer, StrictTokenizer, make_tokenizer, normalize_word,
)


def test_default_splits_on_non_alphanumerics_and_casefolds():
    assert DefaultTokenizer().tokenize("Hi-tech, I'm  here!") == ["hi", "tech", "i", "m", "here"]


def test_default_treats_underscore_as_separator_and_keeps_unicode_letters():
    assert DefaultTokenizer().tokenize("snake_case Café 42") == ["snake", "case", "café", "42"]


def test_default_case_sensitive_keeps_case():
    assert DefaultTokenizer(case_sensitive=True).tokenize("Hello World") == ["Hello", "World"]


def test_strict_keeps_hyphens_and_apostrophes():
    assert StrictTokenizer().tokenize("Hi-tech, I'm here") == ["hi-tech", ",", "i'm", "here"]


def test_strict_collapses_whitespace_and_drops_empty_fragments():
    assert StrictTokenizer().tokenize("  a\t\n b  ") == ["a", "b"]


def test_empty_text_yields_no_tokens():
    assert DefaultTokenizer().tokenize("") == []
    assert StrictTokenizer().tokenize("   ") == []


def test_make_tokenizer_prefers_custom_callable():
    tok = make_tokenizer(lambda s: s.split(","), strict_tokens=True)
    assert isinstance(tok, CallableTokenizer)
    assert tok.tokenize("A,b") == ["A", "b"]
    assert isinstance(make_tokenizer(strict_tokens=True), StrictTokenizer)
    assert isinstance(make_tokenizer(), DefaultTokenizer)


def test_custom_tokenizer_must_be_callable():
    with pytest.raises(ValueError):
        CallableTokenizer("not a function")


def test_normalize_word():
    assert normalize_word("Straße") == "strasse"
    assert normalize_word("Straße", case_sensitive=True) == "Straße"
