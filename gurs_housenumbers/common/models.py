"""Data models used across the pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Mapping

from gurs_housenumbers.common.constants import (
    SOURCE_VALUE,
    TAG_CITY,
    TAG_HOUSENUMBER,
    TAG_PLACE,
    TAG_POSTCODE,
    TAG_REF,
    TAG_SOURCE,
    TAG_SOURCE_DATE,
    TAG_STREET,
)

LookupTable = Mapping[str, str]


def _empty_table() -> LookupTable:
    return MappingProxyType({})


@dataclass(frozen=True)
class LookupTables:
    postal_code: LookupTable = field(default_factory=_empty_table)
    city_name: LookupTable = field(default_factory=_empty_table)
    street_name: LookupTable = field(default_factory=_empty_table)
    street_name_alt: LookupTable = field(default_factory=_empty_table)
    settlement_name: LookupTable = field(default_factory=_empty_table)
    settlement_name_alt: LookupTable = field(default_factory=_empty_table)

    def sizes(self) -> dict[str, int]:
        return {f.name: len(getattr(self, f.name)) for f in fields(self)}


@dataclass(frozen=True)
class AddressRecord:
    """One row of the house number (HS) layer."""

    ref: str
    status: str
    label: str
    street_mid: str
    settlement_mid: str
    municipality_mid: str
    postal_mid: str
    spatial_area_mid: str
    valid_from: str
    entered_on: str
    geometry: dict[str, Any] | None


@dataclass
class AddressFeature:
    lat: float
    lon: float
    housenumber: str
    source_date: str
    ref: str
    postcode: str | None = None
    city: str | None = None
    street: str | None = None
    place: str | None = None
    # Language-suffixed tags such as addr:street:sl or addr:place:hu.
    name_variants: dict[str, str] = field(default_factory=dict)

    def properties(self) -> dict[str, str]:
        tags = {
            TAG_HOUSENUMBER: self.housenumber,
            TAG_POSTCODE: self.postcode,
            TAG_CITY: self.city,
            TAG_STREET: self.street,
            TAG_PLACE: self.place,
            TAG_SOURCE_DATE: self.source_date,
            TAG_SOURCE: SOURCE_VALUE,
            TAG_REF: self.ref,
        }
        tags.update(self.name_variants)
        return {key: tags[key] for key in sorted(tags) if tags[key] is not None}

    def to_geojson(self) -> dict[str, Any]:
        return {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [self.lat, self.lon]},
            "properties": self.properties(),
        }
