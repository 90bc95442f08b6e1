"""Domain entity update subsystem."""

from __future__ import annotations

from .apply import apply_mod_update, apply_relationship_edit
from .dto import ExclusionEdit, ModUpdate, RelationshipEdit
from .groups import merge_group
from .issues import DataQualityIssue, IssueKind, MergeContext

__all__ = [
    "DataQualityIssue",
    "ExclusionEdit",
    "IssueKind",
    "MergeContext",
    "ModUpdate",
    "RelationshipEdit",
    "apply_mod_update",
    "apply_relationship_edit",
    "merge_group",
]
