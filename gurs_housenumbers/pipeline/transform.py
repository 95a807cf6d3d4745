"""Turn house number records into OpenStreetMap tagged point features."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable, Iterator

from gurs_housenumbers.common.codepage import decode_windows1250
from gurs_housenumbers.common.constants import (
    BILINGUAL_SEPARATOR,
    ITALIAN_HUNGARIAN_SPLIT_LONGITUDE,
    LANG_SUFFIX_HUNGARIAN,
    LANG_SUFFIX_ITALIAN,
    LANG_SUFFIX_SLOVENIAN,
    TAG_PLACE,
    TAG_STREET,
    VALID_STATUS,
)
from gurs_housenumbers.common.geometry import bbox_min_corner, round_coordinate
from gurs_housenumbers.common.models import AddressFeature, AddressRecord, LookupTable, LookupTables

# HS layer columns, see http://www.e-prostor.gov.si/fileadmin/struktura/RPE_struktura.pdf
COL_REF = "HS_MID"
COL_LABEL = "LABELA"
COL_STREET_MID = "UL_MID"
COL_SETTLEMENT_MID = "NA_MID"
COL_MUNICIPALITY_MID = "OB_MID"
COL_POSTAL_MID = "PT_MID"
COL_SPATIAL_AREA_MID = "PO_MID"
COL_VALID_FROM = "D_OD"
COL_ENTERED_ON = "DV_OD"
COL_STATUS = "STATUS"

ADDRESS_COLUMNS = [
    COL_REF,
    COL_LABEL,
    COL_STREET_MID,
    COL_SETTLEMENT_MID,
    COL_MUNICIPALITY_MID,
    COL_POSTAL_MID,
    COL_SPATIAL_AREA_MID,
    COL_VALID_FROM,
    COL_ENTERED_ON,
    COL_STATUS,
]


@dataclass
class TransformStats:
    records_read: int = 0
    skipped_invalid: int = 0
    skipped_no_geometry: int = 0
    features: int = 0
    bilingual_streets: int = 0
    bilingual_places: int = 0
    unresolved_names: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def read_address_records(source) -> Iterator[AddressRecord]:
    for record in source:
        yield AddressRecord(
            ref=decode_windows1250(record.raw(COL_REF)),
            status=decode_windows1250(record.raw(COL_STATUS)),
            label=decode_windows1250(record.raw(COL_LABEL)),
            street_mid=decode_windows1250(record.raw(COL_STREET_MID)),
            settlement_mid=decode_windows1250(record.raw(COL_SETTLEMENT_MID)),
            municipality_mid=decode_windows1250(record.raw(COL_MUNICIPALITY_MID)),
            postal_mid=decode_windows1250(record.raw(COL_POSTAL_MID)),
            spatial_area_mid=decode_windows1250(record.raw(COL_SPATIAL_AREA_MID)),
            valid_from=decode_windows1250(record.raw(COL_VALID_FROM)),
            entered_on=decode_windows1250(record.raw(COL_ENTERED_ON)),
            geometry=record.geometry,
        )


def language_suffixed_tag(prefix: str, lon: float) -> str:
    """Pick the minority language of a bilingual name from its longitude."""
    if lon > ITALIAN_HUNGARIAN_SPLIT_LONGITUDE:
        return prefix + LANG_SUFFIX_HUNGARIAN
    return prefix + LANG_SUFFIX_ITALIAN


def resolve_name(
    mid: str,
    names: LookupTable,
    alt_names: LookupTable,
    tag: str,
    lon: float,
) -> tuple[str | None, dict[str, str]]:
    """Return the tag value for ``mid`` and any language-suffixed variants."""
    name = names.get(mid)
    if name is None:
        return None, {}
    alt_name = alt_names.get(mid)
    if alt_name is None or alt_name == name:
        return name, {}
    variants = {
        tag + LANG_SUFFIX_SLOVENIAN: name,
        language_suffixed_tag(tag, lon): alt_name,
    }
    return name + BILINGUAL_SEPARATOR + alt_name, variants


def iso_date(compact: str) -> str:
    # No calendar validation: YYYYMMDD is sliced as is.
    return f"{compact[0:4]}-{compact[4:6]}-{compact[6:8]}"


def transform_record(record: AddressRecord, lookups: LookupTables, stats: TransformStats) -> AddressFeature | None:
    if record.status != VALID_STATUS:
        stats.skipped_invalid += 1
        return None

    corner = bbox_min_corner(record.geometry)
    if corner is None:
        stats.skipped_no_geometry += 1
        return None
    lat, lon = round_coordinate(corner[0]), round_coordinate(corner[1])

    feature = AddressFeature(
        lat=lat,
        lon=lon,
        housenumber=record.label.lower(),
        source_date=iso_date(record.valid_from),
        ref=record.ref,
        postcode=lookups.postal_code.get(record.postal_mid),
        city=lookups.city_name.get(record.postal_mid),
    )

    street, variants = resolve_name(
        record.street_mid, lookups.street_name, lookups.street_name_alt, TAG_STREET, lon
    )
    if street is not None:
        feature.street = street
        if variants:
            stats.bilingual_streets += 1
    else:
        feature.place, variants = resolve_name(
            record.settlement_mid, lookups.settlement_name, lookups.settlement_name_alt, TAG_PLACE, lon
        )
        if feature.place is None:
            stats.unresolved_names += 1
        elif variants:
            stats.bilingual_places += 1
    feature.name_variants = variants

    return feature


def transform_records(
    records: Iterable[AddressRecord],
    lookups: LookupTables,
    stats: TransformStats | None = None,
) -> list[AddressFeature]:
    stats = stats if stats is not None else TransformStats()
    features: list[AddressFeature] = []
    for record in records:
        stats.records_read += 1
        feature = transform_record(record, lookups, stats)
        if feature is not None:
            features.append(feature)
    stats.features = len(features)
    return features
