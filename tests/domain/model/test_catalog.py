from __future__ import annotations

from dataclasses import replace
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest

from modcatalog.domain.model import Catalog, ModFields, RelationshipKind

if TYPE_CHECKING:
    from modcatalog.domain.model import Mod


def test_catalog_views_are_read_only(seeded_catalog: Catalog) -> None:
    with pytest.raises(TypeError):
        seeded_catalog.mods[1] = None  # type: ignore[index]

    assert seeded_catalog.version == 1
    assert set(seeded_catalog.mods) == {1_000_001, 1_000_002, 1_000_003}
    assert set(seeded_catalog.groups) == {10_001}


def test_group_lookup_helpers(seeded_catalog: Catalog) -> None:
    group = seeded_catalog.group_of(1_000_002)

    assert group is not None
    assert group.group_id == 10_001
    assert seeded_catalog.group_of(1_000_003) is None
    assert seeded_catalog.is_group_id(10_001)
    assert seeded_catalog.is_group_id(20_000)
    assert not seeded_catalog.is_group_id(1_000_001)


def test_copy_is_independent(seeded_catalog: Catalog) -> None:
    clone = seeded_catalog.copy()
    mod: Mod | None = clone.get_mod(1_000_001)
    assert mod is not None
    mod.apply_update(ModFields(name="Changed"))
    mod.add_relationship(RelationshipKind.REQUIRED_MOD, 1_000_003)
    group = clone.get_group(10_001)
    assert group is not None
    group.add_member(1_000_003)

    original = seeded_catalog.get_mod(1_000_001)
    assert original is not None
    assert original.name == "Traffic"
    assert original.required_mods == ()
    original_group = seeded_catalog.get_group(10_001)
    assert original_group is not None
    assert original_group.members == (1_000_001, 1_000_002)


def test_record_round_trip(seeded_catalog: Catalog) -> None:
    record = seeded_catalog.to_record()

    restored = Catalog.from_record(record, ranges=seeded_catalog.ranges)

    assert restored.to_record() == record
    assert restored.version == 1
    assert restored.built_at == seeded_catalog.built_at
    assert all(not mod.added_this_session for mod in restored.mods.values())


def test_record_with_naive_build_time_restores_as_utc(seeded_catalog: Catalog) -> None:
    record = replace(seeded_catalog.to_record(), built_at=datetime(2024, 5, 17, 12, 0))  # noqa: DTZ001

    restored = Catalog.from_record(record)

    assert restored.built_at == datetime(2024, 5, 17, 12, 0, tzinfo=UTC)
