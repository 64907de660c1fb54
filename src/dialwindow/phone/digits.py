"""Phone digit normalizer."""

from __future__ import annotations

import re
from typing import Final

MIN_RESOLVABLE_DIGITS: Final = 4

_STRIP_RE: Final = re.compile(r"[^\d+]")


def normalize_digits(raw: str | None) -> str:
    """Strip formatting from *raw* and return its bare digit sequence.

    A single leading ``+`` is consumed; any other ``+`` is dropped with the
    rest of the punctuation. Never raises: garbage input normalizes to ``""``.

    >>> normalize_digits("+1 (415) 555-1234")
    '14155551234'
    """
    cleaned = _STRIP_RE.sub("", raw or "")
    if cleaned.startswith("+"):
        cleaned = cleaned[1:]
    return cleaned.replace("+", "")


def is_resolvable_length(digits: str) -> bool:
    return len(digits) >= MIN_RESOLVABLE_DIGITS


__all__ = ["MIN_RESOLVABLE_DIGITS", "is_resolvable_length", "normalize_digits"]
