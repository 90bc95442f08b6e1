"""Domain update DTOs (source-agnostic).

Both the crawler and manual curation describe proposed changes with these types.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from modcatalog.domain.model import (
    UNSET,
    EditAction,
    ExclusionKind,
    Maybe,
    ModFields,
    RelationshipKind,
)


@dataclass(frozen=True, slots=True)
class RelationshipEdit:
    """Add or remove one target in one of a mod's relationship lists."""

    kind: RelationshipKind
    target: int
    action: EditAction = EditAction.ADD


@dataclass(frozen=True, slots=True)
class ExclusionEdit:
    """Set (``ADD``) or clear (``REMOVE``) an exclusion. Set exclusions need a target."""

    kind: ExclusionKind
    target: str | int | None = None
    action: EditAction = EditAction.ADD


@dataclass(frozen=True, slots=True, kw_only=True)
class ModUpdate:
    """Proposed partial update for one mod.

    ``required_mods`` and ``required_dlcs`` are full-list syncs: when present, the
    stored list is brought in line with them. ``relationships`` are individual edits
    applied in order.
    """

    fields: ModFields = field(default_factory=ModFields)
    relationships: tuple[RelationshipEdit, ...] = ()
    required_mods: Maybe[tuple[int, ...]] = UNSET
    required_dlcs: Maybe[tuple[str, ...]] = UNSET
    statuses_added: tuple[str, ...] = ()
    statuses_removed: tuple[str, ...] = ()
    has_description: Maybe[bool] = UNSET
    exclusions: tuple[ExclusionEdit, ...] = ()
    change_note: str | None = None
