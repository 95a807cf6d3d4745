"""Read-only access to ESRI Shapefile layers through fiona.

Attribute values are handed out as the raw bytes stored in the DBF table:
text columns are not decoded here, so the layer is opened with a
byte-transparent encoding and re-encoded on the way out.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import Any, Iterator, Mapping

import fiona
from fiona.errors import FionaError

from gurs_housenumbers.common.errors import SourceError

PASSTHROUGH_ENCODING = "latin-1"


@dataclass(frozen=True)
class SourceRecord:
    values: Mapping[str, bytes]
    geometry: dict[str, Any] | None

    def raw(self, name: str) -> bytes:
        try:
            return self.values[name]
        except KeyError as exc:
            raise SourceError(f"Unknown column: {name}") from exc


def _raw_bytes(value: Any, field_type: str) -> bytes:
    if value is None:
        return b""
    if field_type.startswith("str"):
        return str(value).encode(PASSTHROUGH_ENCODING)
    if field_type.startswith("date"):
        # DBF stores dates as YYYYMMDD.
        return str(value).replace("-", "").encode("ascii")
    return str(value).encode("ascii")


def _geometry_mapping(geometry: Any) -> dict[str, Any] | None:
    if geometry is None:
        return None
    return {"type": geometry.type, "coordinates": geometry.coordinates}


class ShapefileSource:
    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._collection = None
        self._field_types: dict[str, str] = {}

    def __enter__(self) -> "ShapefileSource":
        try:
            self._collection = fiona.open(self.path, encoding=PASSTHROUGH_ENCODING)
        except (FionaError, OSError) as exc:
            raise SourceError(f"Cannot open data source {self.path}: {exc}") from exc
        self._field_types = dict(self._collection.schema["properties"])
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._collection is not None:
            self._collection.close()
            self._collection = None

    @property
    def fields(self) -> list[str]:
        return list(self._field_types)

    def __iter__(self) -> Iterator[SourceRecord]:
        if self._collection is None:
            raise SourceError(f"Data source {self.path} is not open")
        for feature in self._collection:
            properties = feature.properties
            values = {
                name: _raw_bytes(properties[name], field_type)
                for name, field_type in self._field_types.items()
            }
            yield SourceRecord(values=values, geometry=_geometry_mapping(feature.geometry))


def open_source(path: Path) -> ShapefileSource:
    return ShapefileSource(path)


def require_fields(source, names: list[str]) -> None:
    missing = [name for name in names if name not in source.fields]
    if missing:
        raise SourceError(f"{source.path}: missing columns {', '.join(missing)}")
