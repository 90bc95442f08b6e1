"""Guarded group upserts."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from modcatalog.domain.model import MIN_GROUP_MEMBERS, Group
from modcatalog.domain.model._internal import put_group

from .issues import IssueKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .issues import MergeContext


def merge_group(
    group_id: int,
    name: str | None,
    members: Iterable[int],
    context: MergeContext,
) -> Group | None:
    """Create or replace ``group_id`` in the staged catalog.

    Group IDs in ``members`` are dropped, and so are members that already belong
    to a different group: the existing group keeps them. Range and size problems
    are recorded but do not stop the group from being stored. A group whose ID
    is already a mod in the catalog or a member of a group is rejected.
    """

    catalog = context.catalog
    owner = catalog.group_of(group_id)
    if owner is not None or catalog.get_mod(group_id) is not None:
        context.report(
            IssueKind.NESTED_GROUP,
            group_id,
            f"[Group {group_id}]: ID is already used by "
            f"{owner.label() if owner is not None else 'a mod'}, group not stored",
            target=group_id,
            level=logging.ERROR,
        )
        return None

    accepted: list[int] = []
    for member in dict.fromkeys(members):
        if member == group_id or catalog.is_group_id(member):
            context.report(
                IssueKind.NESTED_GROUP,
                group_id,
                f"[Group {group_id}]: group {member} cannot be a member of another group, dropped",
                target=member,
            )
            continue
        owner = catalog.group_of(member)
        if owner is not None and owner.group_id != group_id:
            context.report(
                IssueKind.GROUP_MEMBERSHIP_CONFLICT,
                group_id,
                f"[Group {group_id}]: mod {member} already belongs to {owner.label()}, dropped",
                target=member,
            )
            continue
        accepted.append(member)

    group = Group.create(group_id, name, accepted, ranges=None)
    if not group.in_range(catalog.ranges):
        context.report(
            IssueKind.GROUP_ID_OUT_OF_RANGE,
            group_id,
            f"Group ID out of range: {group.label()}. This might give weird results.",
            level=logging.ERROR,
        )
    if group.is_undersized:
        context.report(
            IssueKind.GROUP_TOO_SMALL,
            group_id,
            f"Found group with less than {MIN_GROUP_MEMBERS} members: {group.label()}",
        )
    put_group(catalog, group)
    return group
