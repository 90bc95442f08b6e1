"""Requirement satisfaction checks shared by validation and reporting.

A group ID in a required-mods list is satisfied by any one active member; any
other ID must itself be active. Group membership is looked up on every call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modcatalog.domain.model import IdClass, classify_id

if TYPE_CHECKING:
    from collections.abc import Container

    from modcatalog.domain.model import Catalog


def resolve_requirement(
    catalog: Catalog,
    mod_id: int,
    required_id: int,
    active: Container[int],
) -> bool:
    """Return whether ``required_id``, as required by ``mod_id``, is satisfied by ``active``.

    The requiring mod never satisfies a group requirement on its own behalf.
    An ID in the group range with no registered group is never satisfied.
    """

    group = catalog.get_group(required_id)
    if group is None:
        if classify_id(required_id, catalog.ranges) is IdClass.GROUP:
            return False
        return required_id in active
    return any(member != mod_id and member in active for member in group.members)


def unsatisfied_requirements(
    catalog: Catalog,
    mod_id: int,
    active: Container[int],
) -> tuple[int, ...]:
    """Required IDs of ``mod_id`` that ``active`` does not satisfy, in list order."""

    mod = catalog.get_mod(mod_id)
    if mod is None:
        return ()
    return tuple(
        required_id
        for required_id in mod.required_mods
        if not resolve_requirement(catalog, mod_id, required_id, active)
    )
