"""Convert the Slovenian GURS house number register into OpenStreetMap tagged GeoJSON."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from gurs_housenumbers.common.config_loader import load_config
from gurs_housenumbers.common.constants import (
    DEFAULT_INPUT_PATH,
    DEFAULT_OUTPUT_PATH,
    EXIT_HARD_FAIL,
    EXIT_SUCCESS,
    STAGES,
)
from gurs_housenumbers.common.errors import PipelineError
from gurs_housenumbers.common.ids import generate_run_id
from gurs_housenumbers.common.logging import build_logger, log_event
from gurs_housenumbers.pipeline.convert import run_convert
from gurs_housenumbers.pipeline.fetch import run_fetch


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("command", nargs="?", default="convert", choices=[*STAGES, "all"])
    parser.add_argument(
        "--in",
        dest="input_path",
        default=DEFAULT_INPUT_PATH,
        help=f"input house number shapefile (default: {DEFAULT_INPUT_PATH})",
    )
    parser.add_argument(
        "--out",
        dest="output_path",
        default=DEFAULT_OUTPUT_PATH,
        help=f"output GeoJSON file (default: {DEFAULT_OUTPUT_PATH})",
    )
    parser.add_argument("--config-dir", default="./config")
    parser.add_argument("--overlay-config-dir", default=None)
    parser.add_argument("--data-dir", default="./data")
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    return parser.parse_args(argv)


def execute_stage(stage: str, cfg: dict, args: argparse.Namespace, data_dir: Path, run_id: str) -> dict:
    if stage == "fetch":
        return run_fetch(cfg, data_dir)
    if stage == "convert":
        return run_convert(
            cfg,
            input_path=Path(args.input_path),
            output_path=Path(args.output_path),
            data_dir=data_dir,
            run_id=run_id,
        )
    raise ValueError(f"Unknown stage: {stage}")


def run_command(args: argparse.Namespace) -> int:
    run_id = args.run_id or generate_run_id()
    data_dir = Path(args.data_dir)
    overlay_config_dir = Path(args.overlay_config_dir) if args.overlay_config_dir else None

    logger = build_logger(run_id, data_dir=data_dir, level=args.log_level)
    cfg = load_config(Path(args.config_dir), overlay_config_dir=overlay_config_dir)
    stages = STAGES if args.command == "all" else (args.command,)

    for stage in stages:
        log_event(logger, "stage start", stage=stage, event="STAGE_START", status="ok")
        try:
            execute_stage(stage, cfg, args, data_dir, run_id)
        except PipelineError as exc:
            log_event(
                logger,
                f"stage failed: {exc}",
                level=logging.ERROR,
                stage=stage,
                event="STAGE_FAIL",
                status="error",
                error_code=exc.error_code,
            )
            return EXIT_HARD_FAIL
        except Exception as exc:
            log_event(
                logger,
                f"unexpected failure: {exc!r}",
                level=logging.ERROR,
                stage=stage,
                event="STAGE_FAIL",
                status="error",
                error_code="UNEXPECTED_ERROR",
            )
            return EXIT_HARD_FAIL
        log_event(logger, "stage end", stage=stage, event="STAGE_END", status="ok")

    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    try:
        return run_command(args)
    except PipelineError:
        return EXIT_HARD_FAIL
    except Exception:
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())
