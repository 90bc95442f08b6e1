"""Pydantic models describing crawler and curation payloads.

Only keys that are actually present in a payload become part of the update, so
an absent key leaves the stored value alone while an explicit ``null`` clears it.
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from modcatalog.domain.model import (  # noqa: TC001
    SET_EXCLUSIONS,
    EditAction,
    ExclusionKind,
    RelationshipKind,
    Stability,
    UpdateOrigin,
)


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class WorkshopBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class RelationshipPayload(WorkshopBaseModel):
    kind: RelationshipKind
    target: int
    action: EditAction = EditAction.ADD


class ExclusionPayload(WorkshopBaseModel):
    kind: ExclusionKind
    target: str | int | None = None
    action: EditAction = EditAction.ADD

    @model_validator(mode="after")
    def _check_target(self) -> ExclusionPayload:
        if self.kind in SET_EXCLUSIONS and self.target is None:
            raise ValueError(f"{self.kind} exclusions need a target")
        if self.kind not in SET_EXCLUSIONS and self.target is not None:
            raise ValueError(f"{self.kind} exclusions do not take a target")
        if self.kind is ExclusionKind.REQUIRED_MOD and isinstance(self.target, str):
            self.target = int(self.target)
        return self


class ModPayload(WorkshopBaseModel):
    steam_id: int
    name: str | None = None
    published: str | datetime | None = None
    updated: str | datetime | None = None
    author_id: int | None = None
    author_url: str | None = None
    game_version: str | None = None
    source_url: str | None = None
    has_description: bool | None = None
    required_dlcs: list[str] | None = None
    required_mods: list[int] | None = None

    # curation only
    stability: Stability | None = None
    stability_note: str | None = None
    note: str | None = None
    statuses_added: list[str] = Field(default_factory=list[str])
    statuses_removed: list[str] = Field(default_factory=list[str])
    relationships: list[RelationshipPayload] = Field(default_factory=list["RelationshipPayload"])
    exclusions: list[ExclusionPayload] = Field(default_factory=list["ExclusionPayload"])
    change_note: str | None = None

    _normalize_blanks = field_validator("published", "updated", "game_version", mode="before")(
        _blank_to_none
    )


class GroupPayload(WorkshopBaseModel):
    group_id: int
    name: str | None = None
    members: list[int] = Field(default_factory=list[int])


class CatalogPayload(WorkshopBaseModel):
    origin: UpdateOrigin = UpdateOrigin.CURATION
    groups: list[GroupPayload] = Field(default_factory=list["GroupPayload"])
    mods: list[ModPayload] = Field(default_factory=list["ModPayload"])
    removed_mods: list[int] = Field(default_factory=list[int])
    removed_groups: list[int] = Field(default_factory=list[int])
