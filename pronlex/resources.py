"""Resolve dictionary locations (paths and URLs) to readable byte streams."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import IO
from urllib.parse import unquote, urlparse

import httpx

logger = logging.getLogger(__name__)

REMOTE_SCHEMES = ("http", "https")


def _local_path(location: str | Path) -> Path:
    if isinstance(location, Path):
        return location
    parsed = urlparse(location)
    if parsed.scheme == "file":
        return Path(unquote(parsed.path))
    return Path(location)


def open_resource(location: str | Path, timeout: float = 60) -> IO[bytes]:
    """Open a dictionary location for binary reading.

    Supports filesystem paths, ``file:`` URLs and ``http(s):`` URLs. Remote
    bodies are fetched eagerly and returned as an in-memory stream.
    """
    if isinstance(location, str) and urlparse(location).scheme in REMOTE_SCHEMES:
        logger.debug("Fetching dictionary resource %s", location)
        with httpx.Client(timeout=timeout, follow_redirects=True) as c:
            r = c.get(location)
            r.raise_for_status()
            return io.BytesIO(r.content)

    path = _local_path(location)
    if not path.exists():
        raise FileNotFoundError(f"Dictionary resource not found: {location}")
    logger.debug("Opening dictionary resource %s", path)
    return path.open("rb")
