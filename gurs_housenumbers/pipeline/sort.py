"""Deterministic ordering of address features.

Features are ordered by postcode, then street, then place, then house
number. The street and place tiers only apply when both features carry
the tag; a feature with a street compared against one with only a place
falls straight through to the house number. With such mixed groups inside
one postcode the comparison is not transitive, so the result depends on
the input order; it is still deterministic for a given input.
"""

from __future__ import annotations

from functools import cmp_to_key

from gurs_housenumbers.common.models import AddressFeature
from gurs_housenumbers.pipeline.housenumber import normalize_housenumber


def _cmp(left: str, right: str) -> int:
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def compare_features(left: AddressFeature, right: AddressFeature) -> int:
    result = _cmp(left.postcode or "", right.postcode or "")
    if result:
        return result

    if left.street is not None and right.street is not None:
        result = _cmp(left.street, right.street)
        if result:
            return result

    if left.place is not None and right.place is not None:
        result = _cmp(left.place, right.place)
        if result:
            return result

    return _cmp(normalize_housenumber(left.housenumber), normalize_housenumber(right.housenumber))


def sort_features(features: list[AddressFeature]) -> None:
    features.sort(key=cmp_to_key(compare_features))
