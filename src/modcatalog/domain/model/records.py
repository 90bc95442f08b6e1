"""Plain records of every persisted catalog field.

These are the hand-off shape for the serialization collaborator. Session-transient
and subscription state never appears here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from .enums import ExclusionKind, Stability


@dataclass(frozen=True, slots=True, kw_only=True)
class ModRecord:
    steam_id: int
    name: str
    published: datetime | None
    updated: datetime | None
    author_id: int
    author_url: str
    stability: Stability
    stability_note: str
    note: str
    game_version: str
    source_url: str
    required_dlcs: tuple[str, ...]
    required_mods: tuple[int, ...]
    successors: tuple[int, ...]
    alternatives: tuple[int, ...]
    recommendations: tuple[int, ...]
    statuses: tuple[str, ...]
    exclusion_flags: frozenset[ExclusionKind]
    exclusion_required_dlcs: tuple[str, ...]
    exclusion_required_mods: tuple[int, ...]
    review_date: datetime | None
    auto_review_date: datetime | None
    change_notes: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class GroupRecord:
    group_id: int
    name: str
    members: tuple[int, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogRecord:
    version: int
    built_at: datetime | None
    mods: tuple[ModRecord, ...]
    groups: tuple[GroupRecord, ...]
