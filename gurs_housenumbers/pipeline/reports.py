"""Run summary report."""

from __future__ import annotations

from pathlib import Path

from gurs_housenumbers.common.fs import write_json


def write_run_summary(
    data_dir: Path,
    *,
    run_id: str,
    input_path: Path,
    output_path: Path,
    lookup_sizes: dict[str, int],
    stats: dict[str, int],
) -> Path:
    empty_lookups = sorted(name for name, size in lookup_sizes.items() if size == 0)
    payload = {
        "run_id": run_id,
        "status": "partial" if empty_lookups else "success",
        "input": str(input_path),
        "output": str(output_path),
        "lookups": lookup_sizes,
        "empty_lookups": empty_lookups,
        "transform": stats,
    }
    summary_path = data_dir / "run_meta" / f"{run_id}.summary.json"
    write_json(summary_path, payload)
    return summary_path
