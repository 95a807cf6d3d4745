from __future__ import annotations

from pathlib import Path

import pytest

from gurs_housenumbers.common.codepage import encode_windows1250
from gurs_housenumbers.common.errors import SourceError
from gurs_housenumbers.sources.shapefile import SourceRecord


def _raw(value) -> bytes:
    if value is None:
        return b""
    if isinstance(value, bytes):
        return value
    return encode_windows1250(str(value))


class FakeSource:
    """In-memory stand-in for a shapefile layer."""

    def __init__(self, path, rows: list[dict], geometries: list | None = None, fields: list[str] | None = None):
        self.path = Path(path)
        self.rows = rows
        self.geometries = geometries or [None] * len(rows)
        self._fields = fields if fields is not None else (list(rows[0]) if rows else [])
        self.opened = 0

    @property
    def fields(self) -> list[str]:
        return self._fields

    def __enter__(self):
        self.opened += 1
        return self

    def __exit__(self, *_exc):
        return None

    def __iter__(self):
        for row, geometry in zip(self.rows, self.geometries):
            yield SourceRecord(values={k: _raw(v) for k, v in row.items()}, geometry=geometry)


def _fake_opener(sources: dict):
    by_path = {Path(path): source for path, source in sources.items()}

    def _open(path):
        try:
            return by_path[Path(path)]
        except KeyError as exc:
            raise SourceError(f"Cannot open data source {path}") from exc

    return _open


def _point(lon: float, lat: float) -> dict:
    return {"type": "Point", "coordinates": (lon, lat)}


def _hs_row(
    ref="1",
    label="12",
    street="10",
    settlement="20",
    postal="30",
    valid_from="20200131",
    status="V",
) -> dict:
    return {
        "HS_MID": ref,
        "LABELA": label,
        "UL_MID": street,
        "NA_MID": settlement,
        "OB_MID": "1",
        "PT_MID": postal,
        "PO_MID": "1",
        "D_OD": valid_from,
        "DV_OD": "20200201",
        "STATUS": status,
    }


@pytest.fixture
def make_fake_source():
    return FakeSource


@pytest.fixture
def fake_opener():
    return _fake_opener


@pytest.fixture
def point():
    return _point


@pytest.fixture
def hs_row():
    return _hs_row


@pytest.fixture
def gurs_dataset(tmp_path: Path) -> Path:
    """Write a tiny GURS-like register as real shapefiles under data/temp."""
    import fiona

    data_dir = tmp_path / "data"

    def _write(path: Path, properties_schema: dict, features: list[tuple[tuple[float, float], dict]]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        schema = {"geometry": "Point", "properties": properties_schema}
        with fiona.open(
            path, "w", driver="ESRI Shapefile", schema=schema, crs="EPSG:4326", encoding="cp1250"
        ) as dst:
            for coords, properties in features:
                dst.write({"geometry": {"type": "Point", "coordinates": coords}, "properties": properties})

    _write(
        data_dir / "temp" / "PT" / "SI.GURS.RPE.PUB.PT.shp",
        {"PT_MID": "int:8", "PT_ID": "str:4", "PT_UIME": "str:40"},
        [
            ((14.5, 46.0), {"PT_MID": 30, "PT_ID": "1000", "PT_UIME": "Ljubljana"}),
            ((13.7, 45.5), {"PT_MID": 31, "PT_ID": "6000", "PT_UIME": "Koper - Capodistria"}),
        ],
    )
    _write(
        data_dir / "temp" / "UL" / "SI.GURS.RPE.PUB.UL.shp",
        {"UL_MID": "int:8", "UL_UIME": "str:60", "UL_DJ": "str:60"},
        [
            ((14.5, 46.0), {"UL_MID": 10, "UL_UIME": "Čopova ulica", "UL_DJ": ""}),
            ((13.7, 45.5), {"UL_MID": 11, "UL_UIME": "Kidričeva ulica", "UL_DJ": "Via Kidrič"}),
        ],
    )
    _write(
        data_dir / "temp" / "NA" / "SI.GURS.RPE.PUB.NA.shp",
        {"NA_MID": "int:8", "NA_UIME": "str:60", "NA_DJ": "str:60"},
        [((14.5, 46.0), {"NA_MID": 20, "NA_UIME": "Šmartno", "NA_DJ": ""})],
    )
    hs_schema = {
        "HS_MID": "int:8",
        "LABELA": "str:4",
        "UL_MID": "int:8",
        "NA_MID": "int:8",
        "OB_MID": "int:8",
        "PT_MID": "int:8",
        "PO_MID": "int:8",
        "D_OD": "date",
        "DV_OD": "date",
        "STATUS": "str:1",
    }

    def _hs(ref, label, street, settlement, postal, status="V"):
        return {
            "HS_MID": ref,
            "LABELA": label,
            "UL_MID": street,
            "NA_MID": settlement,
            "OB_MID": 1,
            "PT_MID": postal,
            "PO_MID": 1,
            "D_OD": "2019-05-17",
            "DV_OD": "2019-06-01",
            "STATUS": status,
        }

    _write(
        data_dir / "temp" / "HS-etrs89" / "SI.GURS.RPE.PUB.HS-etrs89.shp",
        hs_schema,
        [
            ((14.5058123456, 46.0512345678), _hs(1001, "12A", 10, 20, 30)),
            ((14.5058, 46.0512), _hs(1002, "2", 10, 20, 30)),
            ((13.7291, 45.5469), _hs(1003, "5", 11, 20, 31)),
            ((14.6, 46.1), _hs(1004, "7", 0, 20, 30)),
            ((14.5, 46.0), _hs(1005, "9", 10, 20, 30, status="Z")),
        ],
    )
    return data_dir


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Copy of the shipped config, independent of the test working directory."""
    repo_config = Path(__file__).resolve().parent.parent / "config" / "gurs.yml"
    target = tmp_path / "config"
    target.mkdir()
    (target / "gurs.yml").write_text(repo_config.read_text(encoding="utf-8"), encoding="utf-8")
    return target
