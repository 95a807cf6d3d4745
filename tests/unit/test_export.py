from __future__ import annotations

import json
from pathlib import Path

import pytest

from gurs_housenumbers.common.errors import OutputError
from gurs_housenumbers.common.models import AddressFeature
from gurs_housenumbers.pipeline.export import build_feature_collection, write_feature_collection


def _feature() -> AddressFeature:
    return AddressFeature(
        lat=46.0512346,
        lon=14.5058123,
        housenumber="12a",
        source_date="2020-01-31",
        ref="1001",
        postcode="1000",
        city="Ljubljana",
        street="Kidričeva ulica / Via Kidrič",
        name_variants={"addr:street:sl": "Kidričeva ulica", "addr:street:it": "Via Kidrič"},
    )


def test_feature_collection_puts_latitude_first():
    collection = build_feature_collection([_feature()])

    assert collection["type"] == "FeatureCollection"
    feature = collection["features"][0]
    assert feature["type"] == "Feature"
    assert feature["geometry"] == {"type": "Point", "coordinates": [46.0512346, 14.5058123]}


def test_properties_are_emitted_in_sorted_key_order():
    properties = build_feature_collection([_feature()])["features"][0]["properties"]

    assert list(properties) == sorted(properties)
    assert properties["source:addr"] == "GURS"
    assert properties["ref:GURS:HS_MID"] == "1001"


def test_write_feature_collection_is_indented_utf8(tmp_path: Path):
    path = tmp_path / "out" / "addresses.geojson"

    write_feature_collection(path, [_feature()])

    text = path.read_text(encoding="utf-8")
    assert text.startswith('{\n  "type": "FeatureCollection",\n  "features": [\n')
    assert "Kidričeva" in text
    assert json.loads(text)["features"][0]["properties"]["addr:housenumber"] == "12a"


def test_write_feature_collection_failure_is_output_error(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(OutputError):
        write_feature_collection(blocker / "addresses.geojson", [_feature()])
