from __future__ import annotations
import logging
import os
from typing import Iterable, List

from .config import EXCLUDE_DIRS, INCLUDE_EXTS, TEXT_UNIT, VERBOSE

log = logging.getLogger(__name__)

PROGRESS_EVERY_FILES = 500


def _iter_text_files(roots: Iterable[str]) -> Iterable[str]:
    """Yield text file paths under each root, in sorted order. A root may be a file."""
    for root in roots:
        root = os.path.abspath(root)
        if os.path.isfile(root):
            yield root
            continue
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if d not in EXCLUDE_DIRS)
            for fn in sorted(filenames):
                if fn.lower().endswith(INCLUDE_EXTS):
                    yield os.path.join(dirpath, fn)


def _line_units(lines: List[str]) -> Iterable[str]:
    for raw in lines:
        text = raw.strip()
        if text:
            yield text


def _paragraph_units(lines: List[str]) -> Iterable[str]:
    block: List[str] = []
    for raw in lines:
        if raw.strip() == "":
            if block:
                yield " ".join(block)
                block = []
        else:
            block.append(raw.strip())
    if block:
        yield " ".join(block)


def load_sentences(roots: List[str], unit: str | None = None) -> List[str]:
    """
    Scan roots for text files and return their sentences in file order.
    unit: "line" (default, one sentence per non-blank line) or "paragraph"
    (blank-line separated blocks joined with single spaces).
    """
    if not roots:
        raise ValueError("load_sentences(): at least one root is required")
    unit = (unit or TEXT_UNIT).lower()
    if unit not in ("line", "paragraph"):
        raise ValueError(f"unknown text unit: {unit!r}")

    sentences: List[str] = []
    file_count = 0
    for path in _iter_text_files(roots):
        try:
            with open(path, "r", encoding="utf-8", errors="ignore") as f:
                raw_lines = [ln.rstrip("\r\n") for ln in f]
        except OSError as exc:
            log.warning("skipping unreadable file %s: %s", path, exc)
            continue

        gen = _paragraph_units(raw_lines) if unit == "paragraph" else _line_units(raw_lines)
        sentences.extend(gen)

        file_count += 1
        if VERBOSE and file_count % PROGRESS_EVERY_FILES == 0:
            log.info("[scanned] files=%d sentences=%d", file_count, len(sentences))

    log.info("loaded %d sentences from %d files", len(sentences), file_count)
    return sentences
