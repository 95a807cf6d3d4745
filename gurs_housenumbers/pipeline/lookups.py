"""Lookup tables joined against the house number layer.

Each table maps a GURS MID identifier to a decoded name or code. The six
tables are independent; they are scanned in parallel and handed back as a
single read-only bundle.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Callable

from gurs_housenumbers.common.codepage import decode_windows1250
from gurs_housenumbers.common.constants import LOOKUP_TABLES
from gurs_housenumbers.common.logging import get_logger, log_event
from gurs_housenumbers.common.models import LookupTable, LookupTables
from gurs_housenumbers.sources.shapefile import open_source as open_shapefile
from gurs_housenumbers.sources.shapefile import require_fields


@dataclass(frozen=True)
class LookupSpec:
    name: str
    path: Path
    key: str
    value: str


def lookup_specs_from_config(cfg: dict, data_dir: Path) -> list[LookupSpec]:
    specs = []
    for name in LOOKUP_TABLES:
        entry = cfg["lookups"][name]
        specs.append(LookupSpec(name=name, path=data_dir / entry["path"], key=entry["key"], value=entry["value"]))
    return specs


def load_lookup(
    source_path: Path,
    key_field: str,
    value_field: str,
    *,
    open_source: Callable = open_shapefile,
) -> LookupTable:
    result: dict[str, str] = {}
    with open_source(source_path) as source:
        require_fields(source, [key_field, value_field])
        for record in source:
            # Fixed-width text is NUL padded when there is no value.
            value = decode_windows1250(record.raw(value_field)).strip("\x00")
            if value:
                result[decode_windows1250(record.raw(key_field))] = value
    return MappingProxyType(result)


def _load_timed(spec: LookupSpec, open_source: Callable) -> tuple[LookupTable, int]:
    started = time.perf_counter()
    table = load_lookup(spec.path, spec.key, spec.value, open_source=open_source)
    return table, int((time.perf_counter() - started) * 1000)


def load_lookups(
    specs: list[LookupSpec],
    *,
    open_source: Callable = open_shapefile,
    max_workers: int = len(LOOKUP_TABLES),
) -> LookupTables:
    logger = get_logger()
    tables: dict[str, LookupTable] = {}

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {spec.name: (spec, executor.submit(_load_timed, spec, open_source)) for spec in specs}
        for name, (spec, future) in futures.items():
            table, duration_ms = future.result()
            tables[name] = table
            if not table:
                log_event(
                    logger,
                    f"{spec.path} read no records for {spec.key}:{spec.value}",
                    level=logging.WARNING,
                    stage="convert",
                    table=name,
                    source=str(spec.path),
                    event="LOOKUP_EMPTY",
                    status="warning",
                    duration_ms=duration_ms,
                    rows_out=0,
                )
                continue
            log_event(
                logger,
                f"loaded lookup {name}",
                stage="convert",
                table=name,
                source=str(spec.path),
                event="LOOKUP_LOADED",
                status="ok",
                duration_ms=duration_ms,
                rows_out=len(table),
            )

    return LookupTables(**tables)
