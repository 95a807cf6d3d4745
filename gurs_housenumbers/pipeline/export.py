"""GeoJSON export of the sorted feature collection."""

from __future__ import annotations

from pathlib import Path

from gurs_housenumbers.common.errors import OutputError
from gurs_housenumbers.common.fs import write_json
from gurs_housenumbers.common.models import AddressFeature


def build_feature_collection(features: list[AddressFeature]) -> dict:
    return {
        "type": "FeatureCollection",
        "features": [feature.to_geojson() for feature in features],
    }


def write_feature_collection(path: Path, features: list[AddressFeature]) -> Path:
    # Keys stay in construction order; properties are already sorted.
    try:
        write_json(path, build_feature_collection(features), sort_keys=False)
    except OSError as exc:
        raise OutputError(f"Cannot write {path}: {exc}") from exc
    return path
