"""
Producer name normalization.

Responsibilities:
- split a raw producer field on commas, ampersands and the word "and"
- strip role prefixes ("Producer:", "Produced by", "Executive Producer:")
- drop trailing parenthetical notes
- collapse whitespace
- discard fragments that cannot be a name
"""

from __future__ import annotations

from typing import List, Optional

from .rules import (
    HAS_LETTER,
    MIN_NAME_LENGTH,
    PRODUCER_SEPARATORS,
    ROLE_PREFIX,
    TRAILING_PARENTHETICAL,
    TRIM_CHARS,
    WHITESPACE_RUN,
)


def clean_producer_name(fragment: Optional[str]) -> str:
    """
    Clean a single producer fragment.

    Returns an empty string when the cleaned fragment is shorter than
    two characters or has no letter in it.
    """
    if fragment is None:
        return ""

    name = fragment.strip(TRIM_CHARS)
    name = ROLE_PREFIX.sub("", name, count=1)
    name = TRAILING_PARENTHETICAL.sub("", name, count=1)
    name = WHITESPACE_RUN.sub(" ", name).strip(TRIM_CHARS)

    if len(name) < MIN_NAME_LENGTH or not HAS_LETTER.search(name):
        return ""
    return name


def split_producers(raw_producers: Optional[str]) -> List[str]:
    """
    Split a raw producer field into cleaned names, left to right.

    Duplicates are kept; grouping by name takes care of them.
    """
    if raw_producers is None or not raw_producers.strip(TRIM_CHARS):
        return []

    names = []
    for fragment in PRODUCER_SEPARATORS.split(raw_producers):
        name = clean_producer_name(fragment)
        if name:
            names.append(name)
    return names
