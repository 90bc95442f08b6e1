"""Data-quality issues raised while merging proposed updates."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum

from modcatalog.domain.model import Catalog, UpdateOrigin

log = logging.getLogger(__name__)


class IssueKind(StrEnum):
    RELATIONSHIP_CONFLICT = "relationship_conflict"
    SELF_REFERENCE = "self_reference"
    GROUP_NOT_ALLOWED = "group_not_allowed"
    GROUP_MEMBERSHIP_CONFLICT = "group_membership_conflict"
    NESTED_GROUP = "nested_group"
    GROUP_TOO_SMALL = "group_too_small"
    GROUP_ID_OUT_OF_RANGE = "group_id_out_of_range"
    EXCLUDED_FACT = "excluded_fact"
    IGNORED_EXCLUSION_EDIT = "ignored_exclusion_edit"
    INVALID_EXCLUSION_EDIT = "invalid_exclusion_edit"
    MISSING_GROUP_MEMBER = "missing_group_member"
    UNKNOWN_MOD = "unknown_mod"


@dataclass(frozen=True, slots=True)
class DataQualityIssue:
    """One rejected or adjusted edit that needs curator attention."""

    kind: IssueKind
    subject_id: int
    message: str
    target: str | int | None = None


@dataclass(slots=True)
class MergeContext:
    """What a merge needs besides the entry itself: the staged catalog and an issue sink."""

    catalog: Catalog
    origin: UpdateOrigin = UpdateOrigin.CURATION
    issues: list[DataQualityIssue] = field(default_factory=list[DataQualityIssue])

    @property
    def automated(self) -> bool:
        return self.origin is UpdateOrigin.CRAWLER

    def report(
        self,
        kind: IssueKind,
        subject_id: int,
        message: str,
        *,
        target: str | int | None = None,
        level: int = logging.WARNING,
    ) -> DataQualityIssue:
        issue = DataQualityIssue(kind=kind, subject_id=subject_id, message=message, target=target)
        self.issues.append(issue)
        log.log(level, "%s", message)
        return issue
