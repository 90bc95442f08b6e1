"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from modcatalog.adapters.workshop import CatalogPayload, ModPayload, apply_catalog_payload
from modcatalog.config import get_download_config
from modcatalog.domain.model import UpdateOrigin
from modcatalog.domain.updating import SessionResult, UpdateSession

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime
    from pathlib import Path

    from modcatalog.domain.model import Catalog
    from modcatalog.domain.ports import Downloader, WorkshopCrawler

    PayloadLoader = Callable[[Path], CatalogPayload]


log = getLogger(__name__)


def apply_payload(
    catalog: Catalog,
    payload: CatalogPayload,
    *,
    origin: UpdateOrigin | None = None,
    clock: Callable[[], datetime] | None = None,
) -> SessionResult:
    """Apply one payload to ``catalog`` in a single session and commit it."""

    with UpdateSession(catalog, origin=origin or payload.origin, clock=clock) as session:
        apply_catalog_payload(session, payload, now=clock() if clock else None)
        result = session.commit()

    log.info(
        f"Finished {session.origin} session: state={result.state}, version={result.version}, "
        f"added={len(result.added)}, updated={len(result.updated)}, "
        f"removed={len(result.removed)}, issues={len(result.issues)}"
    )
    return result


def run_crawler_session(
    catalog: Catalog,
    *,
    url: str,
    destination: Path,
    downloader: Downloader,
    load_payload: PayloadLoader,
    retries: int | None = None,
    clock: Callable[[], datetime] | None = None,
) -> SessionResult | None:
    """Download crawler output and apply it; no session is started when the download fails."""

    effective_retries = get_download_config().retries if retries is None else retries
    log.info("Downloading %s to %s (retries=%d)", url, destination, effective_retries)
    download = downloader(url, destination, retries=effective_retries)
    if not download.ok:
        log.warning("Download of %s failed, catalog not updated: %s", url, download.error)
        return None

    payload = load_payload(destination)
    return apply_payload(catalog, payload, origin=UpdateOrigin.CRAWLER, clock=clock)


def run_workshop_crawl(
    catalog: Catalog,
    crawler: WorkshopCrawler,
    *,
    clock: Callable[[], datetime] | None = None,
) -> SessionResult:
    """Apply every mod the crawler scraped in one crawler session."""

    mods = [ModPayload.model_validate(raw) for raw in crawler()]
    log.info("Crawler returned %d mods", len(mods))
    payload = CatalogPayload(origin=UpdateOrigin.CRAWLER, mods=mods)
    return apply_payload(catalog, payload, clock=clock)
