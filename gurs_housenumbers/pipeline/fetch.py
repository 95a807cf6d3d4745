"""Download and unpack the GURS register archives."""

from __future__ import annotations

import zipfile
from pathlib import Path
from urllib.parse import urlparse

from gurs_housenumbers.common.errors import StageError
from gurs_housenumbers.common.fs import ensure_dir
from gurs_housenumbers.common.http import HttpClient
from gurs_housenumbers.common.logging import get_logger, log_event


def _download_filename(url: str, name: str) -> str:
    basename = Path(urlparse(url).path).name
    if basename:
        return basename
    return f"{name}.zip"


def _extract_archive(archive_path: Path, target_dir: Path) -> list[str]:
    ensure_dir(target_dir)
    try:
        with zipfile.ZipFile(archive_path) as archive:
            names = archive.namelist()
            archive.extractall(target_dir)
    except zipfile.BadZipFile as exc:
        raise StageError(f"{archive_path} is not a zip archive") from exc
    return names


def run_fetch(cfg: dict, data_dir: Path, *, http_client: HttpClient | None = None) -> dict:
    logger = get_logger()
    fetch_cfg = cfg["fetch"]
    archives = fetch_cfg["archives"]

    if not fetch_cfg["enabled"] or not archives:
        log_event(logger, "no archives configured, skipping fetch", stage="fetch", event="FETCH_SKIPPED", status="ok")
        return {"enabled": bool(fetch_cfg["enabled"]), "archives": []}

    download_dir = data_dir / "download"
    client = http_client or HttpClient()
    results = []
    try:
        for archive in archives:
            target = download_dir / _download_filename(archive["url"], archive["name"])
            size = client.download(archive["url"], target)
            extract_dir = data_dir / archive["extract_dir"]
            members = _extract_archive(target, extract_dir)
            log_event(
                logger,
                f"fetched {archive['name']}",
                stage="fetch",
                source=archive["url"],
                event="ARCHIVE_FETCHED",
                status="ok",
                rows_out=len(members),
            )
            results.append(
                {
                    "name": archive["name"],
                    "path": str(target),
                    "bytes": size,
                    "extract_dir": str(extract_dir),
                    "members": sorted(members),
                }
            )
    finally:
        if http_client is None:
            client.close()

    return {"enabled": True, "archives": results}
