"""Public domain model surface."""

from __future__ import annotations

from modcatalog.domain.model.catalog import Catalog
from modcatalog.domain.model.enums import (
    Dlc,
    EditAction,
    ExclusionKind,
    ModStatus,
    RelationshipKind,
    ReportSeverity,
    Stability,
    UpdateOrigin,
)
from modcatalog.domain.model.exclusions import FLAG_EXCLUSIONS, SET_EXCLUSIONS, Exclusions
from modcatalog.domain.model.fields import UNSET, Maybe, ModFields, Unset
from modcatalog.domain.model.group import MIN_GROUP_MEMBERS, Group
from modcatalog.domain.model.identity import (
    DEFAULT_ID_RANGES,
    IdClass,
    IdRanges,
    classify_id,
    id_tag,
    workshop_url,
)
from modcatalog.domain.model.mod import DISABLED_PREFIX, ELLIPSIS, Mod, cut_off
from modcatalog.domain.model.records import CatalogRecord, GroupRecord, ModRecord
from modcatalog.domain.model.versions import UNKNOWN_VERSION_STRING, GameVersion

__all__ = [  # noqa: RUF022
    # identity
    "DEFAULT_ID_RANGES",
    "IdClass",
    "IdRanges",
    "classify_id",
    "id_tag",
    "workshop_url",
    # entities
    "Catalog",
    "Group",
    "MIN_GROUP_MEMBERS",
    "Mod",
    "DISABLED_PREFIX",
    "ELLIPSIS",
    "cut_off",
    # exclusions
    "Exclusions",
    "FLAG_EXCLUSIONS",
    "SET_EXCLUSIONS",
    # partial updates
    "Maybe",
    "ModFields",
    "UNSET",
    "Unset",
    # records
    "CatalogRecord",
    "GroupRecord",
    "ModRecord",
    # versions
    "GameVersion",
    "UNKNOWN_VERSION_STRING",
    # enums
    "Dlc",
    "EditAction",
    "ExclusionKind",
    "ModStatus",
    "RelationshipKind",
    "ReportSeverity",
    "Stability",
    "UpdateOrigin",
]
