"""Convert the GURS house number layer into a sorted GeoJSON file."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable

from gurs_housenumbers.common.logging import get_logger, log_event
from gurs_housenumbers.pipeline.export import write_feature_collection
from gurs_housenumbers.pipeline.lookups import load_lookups, lookup_specs_from_config
from gurs_housenumbers.pipeline.reports import write_run_summary
from gurs_housenumbers.pipeline.sort import sort_features
from gurs_housenumbers.pipeline.transform import (
    ADDRESS_COLUMNS,
    TransformStats,
    read_address_records,
    transform_records,
)
from gurs_housenumbers.sources.shapefile import open_source as open_shapefile
from gurs_housenumbers.sources.shapefile import require_fields


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


def run_convert(
    cfg: dict,
    *,
    input_path: Path,
    output_path: Path,
    data_dir: Path,
    run_id: str,
    open_source: Callable = open_shapefile,
) -> dict:
    logger = get_logger()

    lookups = load_lookups(lookup_specs_from_config(cfg, data_dir), open_source=open_source)

    started = time.perf_counter()
    stats = TransformStats()
    with open_source(input_path) as source:
        require_fields(source, ADDRESS_COLUMNS)
        features = transform_records(read_address_records(source), lookups, stats)
    log_event(
        logger,
        f"read {input_path}",
        stage="convert",
        source=str(input_path),
        event="RECORDS_TRANSFORMED",
        status="ok",
        duration_ms=_elapsed_ms(started),
        rows_in=stats.records_read,
        rows_out=stats.features,
    )

    started = time.perf_counter()
    sort_features(features)
    log_event(
        logger,
        f"sorted {len(features)} features",
        stage="convert",
        event="FEATURES_SORTED",
        status="ok",
        duration_ms=_elapsed_ms(started),
        rows_out=len(features),
    )

    write_feature_collection(output_path, features)
    log_event(
        logger,
        f"saved {len(features)} addresses to {output_path}",
        stage="convert",
        source=str(output_path),
        event="OUTPUT_WRITTEN",
        status="ok",
        rows_out=len(features),
    )

    summary_path = write_run_summary(
        data_dir,
        run_id=run_id,
        input_path=input_path,
        output_path=output_path,
        lookup_sizes=lookups.sizes(),
        stats=stats.to_dict(),
    )
    return {
        "output": str(output_path),
        "features": len(features),
        "stats": stats.to_dict(),
        "summary": str(summary_path),
    }
