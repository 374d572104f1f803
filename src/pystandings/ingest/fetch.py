"""Fetch standings text from a URL or a local file."""

from __future__ import annotations

import logging
from pathlib import Path

import httpx


logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = 10.0


class StandingsLoadError(RuntimeError):
    """Raised when the standings source does not yield usable text."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Unable to load standings from {source}: {reason}")


def is_remote_source(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


async def _fetch_remote(source: str, *, client: httpx.AsyncClient | None, timeout: float) -> str:
    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(timeout=timeout, follow_redirects=True)
    try:
        resp = await client.get(source)
        resp.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise StandingsLoadError(source, f"HTTP {exc.response.status_code}") from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise StandingsLoadError(source, str(exc) or type(exc).__name__) from exc
    finally:
        if owns_client:
            await client.aclose()
    return resp.text


def _read_local(source: str) -> str:
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise StandingsLoadError(source, "file not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise StandingsLoadError(source, str(exc)) from exc


async def fetch_standings_text(
    source: str,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float = _DEFAULT_TIMEOUT,
) -> str:
    """Return the raw standings text for ``source``.

    ``source`` is either an ``http(s)://`` URL or a filesystem path. Blank
    responses count as a failed load.
    """

    if is_remote_source(source):
        text = await _fetch_remote(source, client=client, timeout=timeout)
    else:
        text = _read_local(source)
    if not text.strip():
        raise StandingsLoadError(source, "source is empty")
    logger.debug("Fetched %s characters from %s", len(text), source)
    return text
