from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from modcatalog.domain.entity_updates import ModUpdate
from modcatalog.domain.model import Catalog, ModFields, UpdateOrigin
from modcatalog.domain.updating import UpdateSession

if TYPE_CHECKING:
    from collections.abc import Callable

FIXED_NOW = datetime(2024, 5, 17, 12, 0, tzinfo=UTC)


@pytest.fixture
def clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


@pytest.fixture
def catalog() -> Catalog:
    return Catalog()


@pytest.fixture
def seeded_catalog(clock: Callable[[], datetime]) -> Catalog:
    """Catalog at version 1 with three real mods and one group of two of them."""

    catalog = Catalog()
    with UpdateSession(catalog, clock=clock) as session:
        for mod_id, name in ((1_000_001, "Traffic"), (1_000_002, "Roads"), (1_000_003, "Parks")):
            session.upsert_mod(mod_id, ModUpdate(fields=ModFields(name=name)))
        session.upsert_group(10_001, "Road tools", [1_000_001, 1_000_002])
        session.commit()
    return catalog


@pytest.fixture
def curation(catalog: Catalog, clock: Callable[[], datetime]) -> UpdateSession:
    session = UpdateSession(catalog, origin=UpdateOrigin.CURATION, clock=clock)
    session.begin()
    return session


@pytest.fixture
def crawler_for(clock: Callable[[], datetime]) -> Callable[[Catalog], UpdateSession]:
    def factory(target: Catalog) -> UpdateSession:
        session = UpdateSession(target, origin=UpdateOrigin.CRAWLER, clock=clock)
        session.begin()
        return session

    return factory


@pytest.fixture(scope="session")
def workshop_payload_path() -> Path:
    return Path(__file__).resolve().parent / "data" / "workshop_catalog.json"
