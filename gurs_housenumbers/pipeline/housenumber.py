"""Comparable sort keys for house numbers."""

from __future__ import annotations

# Sorts below every lower-case letter suffix.
NO_SUFFIX_PLACEHOLDER = "_"


def normalize_housenumber(housenumber: str) -> str:
    """Return a 4 character key: 3 zero-padded digits plus a suffix letter or ``_``.

    "12" -> "012_", "12c" -> "012c", "" -> "000_"
    """
    if not housenumber or housenumber[-1].isdigit():
        return housenumber.rjust(3, "0") + NO_SUFFIX_PLACEHOLDER
    return housenumber.rjust(4, "0")
