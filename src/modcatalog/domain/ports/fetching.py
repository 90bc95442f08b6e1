"""Ports for fetching catalog input from outside."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class DownloadResult:
    """Outcome of a download after all retries; ``error`` is the last failure."""

    ok: bool
    error: str | None = None


@runtime_checkable
class Downloader(Protocol):
    """Fetch ``url`` to ``destination``, retrying up to ``retries`` extra times."""

    def __call__(self, url: str, destination: Path, *, retries: int) -> DownloadResult: ...


@runtime_checkable
class WorkshopCrawler(Protocol):
    """Yields raw mod facts scraped from the workshop listing pages, one mapping per mod."""

    def __call__(self) -> Iterable[Mapping[str, object]]: ...


__all__ = ["DownloadResult", "Downloader", "WorkshopCrawler"]
