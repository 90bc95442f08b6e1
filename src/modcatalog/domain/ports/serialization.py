"""Port for persisting catalogs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from modcatalog.domain.model import CatalogRecord


@runtime_checkable
class CatalogSerializer(Protocol):
    """Round-trips every persisted catalog field; session-only state is not stored."""

    def dump(self, record: CatalogRecord, destination: Path) -> None: ...

    def load(self, source: Path) -> CatalogRecord: ...


__all__ = ["CatalogSerializer"]
