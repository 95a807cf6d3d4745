"""Minimal strict schemas for YAML config validation."""

from __future__ import annotations

from gurs_housenumbers.common.constants import LOOKUP_TABLES
from gurs_housenumbers.common.errors import ConfigError


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def validate_pipeline_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    top_required = {"lookups", "fetch"}
    _assert_required_keys(cfg, top_required, "pipeline config")
    _assert_no_unknown_keys(cfg, top_required, "pipeline config", allow_unknown)

    _assert_required_keys(cfg["lookups"], set(LOOKUP_TABLES), "lookups")
    _assert_no_unknown_keys(cfg["lookups"], set(LOOKUP_TABLES), "lookups", allow_unknown)
    for name in LOOKUP_TABLES:
        _assert_required_keys(cfg["lookups"][name], {"path", "key", "value"}, f"lookups.{name}")

    _assert_required_keys(cfg["fetch"], {"enabled", "archives"}, "fetch")
    if not isinstance(cfg["fetch"]["archives"], list):
        raise ConfigError("fetch.archives must be a list")
    for idx, archive in enumerate(cfg["fetch"]["archives"]):
        _assert_required_keys(archive, {"name", "url", "extract_dir"}, f"fetch.archives[{idx}]")

    return cfg
