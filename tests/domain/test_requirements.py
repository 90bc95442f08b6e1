from __future__ import annotations

from typing import TYPE_CHECKING

from modcatalog.domain.entity_updates import ModUpdate
from modcatalog.domain.requirements import resolve_requirement, unsatisfied_requirements
from modcatalog.domain.updating import UpdateSession

if TYPE_CHECKING:
    from modcatalog.domain.model import Catalog


def _require(catalog: Catalog, mod_id: int, *required: int) -> None:
    with UpdateSession(catalog) as session:
        session.upsert_mod(mod_id, ModUpdate(required_mods=required))
        session.commit()


def test_group_requirement_satisfied_by_any_active_member(seeded_catalog: Catalog) -> None:
    _require(seeded_catalog, 1_000_003, 10_001)

    assert resolve_requirement(seeded_catalog, 1_000_003, 10_001, {1_000_001})
    assert resolve_requirement(seeded_catalog, 1_000_003, 10_001, {1_000_002})
    assert not resolve_requirement(seeded_catalog, 1_000_003, 10_001, set())
    assert not resolve_requirement(seeded_catalog, 1_000_003, 10_001, {1_000_003})


def test_plain_requirement_needs_the_mod_itself(seeded_catalog: Catalog) -> None:
    assert resolve_requirement(seeded_catalog, 1_000_003, 1_000_001, {1_000_001})
    assert not resolve_requirement(seeded_catalog, 1_000_003, 1_000_001, {1_000_002})


def test_requiring_mod_never_satisfies_its_own_group(seeded_catalog: Catalog) -> None:
    assert not resolve_requirement(seeded_catalog, 1_000_001, 10_001, {1_000_001})
    assert resolve_requirement(seeded_catalog, 1_000_001, 10_001, {1_000_001, 1_000_002})


def test_unregistered_group_id_is_never_satisfied(seeded_catalog: Catalog) -> None:
    assert not resolve_requirement(seeded_catalog, 1_000_003, 20_000, {20_000})


def test_group_substitute_independent_of_previous_direct_requirement(seeded_catalog: Catalog) -> None:
    _require(seeded_catalog, 1_000_003, 1_000_002)
    _require(seeded_catalog, 1_000_003, 10_001)

    assert resolve_requirement(seeded_catalog, 1_000_003, 10_001, {1_000_001})
    assert unsatisfied_requirements(seeded_catalog, 1_000_003, {1_000_001}) == ()


def test_membership_changes_are_seen_immediately(seeded_catalog: Catalog) -> None:
    _require(seeded_catalog, 1_000_003, 10_001)
    assert resolve_requirement(seeded_catalog, 1_000_003, 10_001, {1_000_002})

    with UpdateSession(seeded_catalog) as session:
        session.upsert_group(10_001, "Road tools", [1_000_001])
        session.commit()

    assert not resolve_requirement(seeded_catalog, 1_000_003, 10_001, {1_000_002})


def test_unsatisfied_requirements_in_list_order(seeded_catalog: Catalog) -> None:
    _require(seeded_catalog, 1_000_003, 1_000_009, 10_001, 1_000_008)

    missing = unsatisfied_requirements(seeded_catalog, 1_000_003, {1_000_008})

    assert missing == (1_000_009, 10_001)
    assert unsatisfied_requirements(seeded_catalog, 1_000_404, set()) == ()
