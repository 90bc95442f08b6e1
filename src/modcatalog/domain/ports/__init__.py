"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import Downloader, DownloadResult, WorkshopCrawler
from .serialization import CatalogSerializer

__all__ = [
    "CatalogSerializer",
    "DownloadResult",
    "Downloader",
    "WorkshopCrawler",
]
