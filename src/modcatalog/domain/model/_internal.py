"""Private helpers for mutating catalog state.

Only the update session should import this module.
"""

# ruff: noqa: SLF001

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from modcatalog.domain.model.catalog import Catalog
    from modcatalog.domain.model.group import Group
    from modcatalog.domain.model.mod import Mod


def add_mod(catalog: Catalog, mod: Mod) -> None:
    catalog._mods[mod.steam_id] = mod


def drop_mod(catalog: Catalog, mod_id: int) -> Mod | None:
    return catalog._mods.pop(mod_id, None)


def put_group(catalog: Catalog, group: Group) -> None:
    catalog._groups[group.group_id] = group


def drop_group(catalog: Catalog, group_id: int) -> Group | None:
    return catalog._groups.pop(group_id, None)


def bump_version(catalog: Catalog, built_at: datetime) -> None:
    catalog._version += 1
    catalog._built_at = built_at


def adopt_catalog_state(target: Catalog, source: Catalog) -> None:
    """Swap the staged contents of ``source`` into ``target`` (same identity for readers)."""
    target._version = source._version
    target._built_at = source._built_at
    target._mods = source._mods
    target._groups = source._groups


def mark_session_start(mod: Mod) -> None:
    """Clear session bookkeeping on an entry carried over from an earlier session."""
    mod._added_this_session = False
    mod._updated_this_session = False
