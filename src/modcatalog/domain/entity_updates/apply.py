"""Apply update DTOs to catalog entries.

Edits that would break a catalog invariant are dropped and reported; the rest of
the update still applies. Crawler updates additionally respect the entry's
exclusions and substitute group IDs for group members in required-mods lists.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from modcatalog.domain.model import (
    SET_EXCLUSIONS,
    UNSET,
    EditAction,
    ExclusionKind,
    ModStatus,
    RelationshipKind,
)

from .issues import IssueKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from modcatalog.domain.model import Mod, ModFields

    from .dto import ExclusionEdit, ModUpdate, RelationshipEdit
    from .issues import MergeContext

log = logging.getLogger(__name__)

# Review stamps change on every pass; they are not worth a change note.
_UNNOTED_FIELDS: Final[frozenset[str]] = frozenset({"review_date", "auto_review_date"})

# Scalar fields a curator can protect from the crawler.
_EXCLUDABLE_FIELDS: Final[dict[str, ExclusionKind]] = {
    "game_version": ExclusionKind.GAME_VERSION,
    "source_url": ExclusionKind.SOURCE_URL,
}


def apply_mod_update(mod: Mod, update: ModUpdate, context: MergeContext) -> list[str]:
    """Apply ``update`` to ``mod`` and return human-readable descriptions of what changed."""

    changes: list[str] = []
    _apply_exclusion_edits(mod, update.exclusions, context, changes)
    _apply_fields(mod, update.fields, context, changes)
    if update.has_description is not UNSET:
        _apply_description_status(mod, has_description=update.has_description, context=context, changes=changes)
    for status in update.statuses_added:
        _edit_status(mod, status, EditAction.ADD, context, changes)
    for status in update.statuses_removed:
        _edit_status(mod, status, EditAction.REMOVE, context, changes)
    if update.required_dlcs is not UNSET:
        _sync_required_dlcs(mod, update.required_dlcs, context, changes)
    if update.required_mods is not UNSET:
        _sync_required_mods(mod, update.required_mods, context, changes)
    for edit in update.relationships:
        apply_relationship_edit(mod, edit, context, changes)
    if update.change_note:
        mod.append_change_note(update.change_note)
    return changes


def apply_relationship_edit(
    mod: Mod,
    edit: RelationshipEdit,
    context: MergeContext,
    changes: list[str],
) -> bool:
    if edit.action is EditAction.ADD:
        return _add_relationship(mod, edit.kind, edit.target, context, changes)
    return _remove_relationship(mod, edit.kind, edit.target, context, changes)


def _add_relationship(
    mod: Mod,
    kind: RelationshipKind,
    target: int,
    context: MergeContext,
    changes: list[str],
) -> bool:
    label = _kind_label(kind)
    if target == mod.steam_id:
        context.report(
            IssueKind.SELF_REFERENCE,
            mod.steam_id,
            f"{_who(mod, context)}: cannot list itself as {label}",
            target=target,
        )
        return False
    if kind is not RelationshipKind.REQUIRED_MOD and context.catalog.is_group_id(target):
        context.report(
            IssueKind.GROUP_NOT_ALLOWED,
            mod.steam_id,
            f"{_who(mod, context)}: group {target} can only be used as required mod, not as {label}",
            target=target,
        )
        return False
    if (
        kind is RelationshipKind.REQUIRED_MOD
        and context.automated
        and mod.is_excluded(ExclusionKind.REQUIRED_MOD, target)
    ):
        context.report(
            IssueKind.EXCLUDED_FACT,
            mod.steam_id,
            f"{_who(mod, context)}: required mod {target} is excluded, not added",
            target=target,
            level=logging.DEBUG,
        )
        return False
    conflicting = [other for other in mod.relationship_kinds_of(target) if other is not kind]
    if conflicting:
        existing = ", ".join(_kind_label(other) for other in conflicting)
        context.report(
            IssueKind.RELATIONSHIP_CONFLICT,
            mod.steam_id,
            f"{_who(mod, context)}: {target} not added as {label}, already listed as {existing}",
            target=target,
        )
        return False
    if not mod.add_relationship(kind, target):
        return False
    changes.append(f"{label} {target} added")
    return True


def _remove_relationship(
    mod: Mod,
    kind: RelationshipKind,
    target: int,
    context: MergeContext,
    changes: list[str],
) -> bool:
    if (
        kind is RelationshipKind.REQUIRED_MOD
        and context.automated
        and mod.is_excluded(ExclusionKind.REQUIRED_MOD, target)
    ):
        context.report(
            IssueKind.EXCLUDED_FACT,
            mod.steam_id,
            f"{_who(mod, context)}: required mod {target} is excluded, not removed",
            target=target,
            level=logging.DEBUG,
        )
        return False
    if not mod.remove_relationship(kind, target):
        return False
    changes.append(f"{_kind_label(kind)} {target} removed")
    return True


def _apply_exclusion_edits(
    mod: Mod,
    edits: Iterable[ExclusionEdit],
    context: MergeContext,
    changes: list[str],
) -> None:
    for edit in edits:
        if context.automated:
            context.report(
                IssueKind.IGNORED_EXCLUSION_EDIT,
                mod.steam_id,
                f"{_who(mod, context)}: exclusions can only be changed by curation, ignored {edit.kind}",
                target=edit.target,
            )
            continue
        if (edit.target is None) == (edit.kind in SET_EXCLUSIONS):
            context.report(
                IssueKind.INVALID_EXCLUSION_EDIT,
                mod.steam_id,
                f"{_who(mod, context)}: {edit.kind} exclusion "
                f"{'needs a target' if edit.target is None else 'takes no target'}, ignored",
                target=edit.target,
            )
            continue
        adding = edit.action is EditAction.ADD
        if edit.target is None:
            changed = mod.set_exclusion(edit.kind, adding)
            subject = f"exclusion for {_kind_label(edit.kind)}"
        elif adding:
            changed = mod.add_exclusion(edit.kind, edit.target)
            subject = f"exclusion for {_kind_label(edit.kind)} {edit.target}"
        else:
            changed = mod.remove_exclusion(edit.kind, edit.target)
            subject = f"exclusion for {_kind_label(edit.kind)} {edit.target}"
        if changed:
            changes.append(f"{subject} {'added' if adding else 'removed'}")


def _apply_fields(
    mod: Mod,
    fields: ModFields,
    context: MergeContext,
    changes: list[str],
) -> None:
    if context.automated:
        for name, kind in _EXCLUDABLE_FIELDS.items():
            value = getattr(fields, name)
            if value is UNSET or not mod.is_excluded(kind):
                continue
            context.report(
                IssueKind.EXCLUDED_FACT,
                mod.steam_id,
                f"{_who(mod, context)}: {_kind_label(name)} is excluded, ignored {value!r}",
                target=name,
                level=logging.DEBUG,
            )
            fields = fields.without(name)

    present = fields.present()
    before = {name: getattr(mod, name) for name in present}
    mod.apply_update(fields)
    for name, old_value in before.items():
        if name in _UNNOTED_FIELDS or getattr(mod, name) == old_value:
            continue
        changes.append(f"{_kind_label(name)} changed")


def _apply_description_status(
    mod: Mod,
    *,
    has_description: bool,
    context: MergeContext,
    changes: list[str],
) -> None:
    action = EditAction.REMOVE if has_description else EditAction.ADD
    _edit_status(mod, ModStatus.NO_DESCRIPTION, action, context, changes)


def _edit_status(
    mod: Mod,
    status: str,
    action: EditAction,
    context: MergeContext,
    changes: list[str],
) -> None:
    if (
        status == ModStatus.NO_DESCRIPTION
        and context.automated
        and mod.is_excluded(ExclusionKind.NO_DESCRIPTION)
    ):
        context.report(
            IssueKind.EXCLUDED_FACT,
            mod.steam_id,
            f"{_who(mod, context)}: no-description status is excluded, ignored",
            target=status,
            level=logging.DEBUG,
        )
        return
    if action is EditAction.ADD:
        if mod.add_status(status):
            changes.append(f"status {_kind_label(status)} added")
    elif mod.remove_status(status):
        changes.append(f"status {_kind_label(status)} removed")


def _sync_required_dlcs(
    mod: Mod,
    desired: Iterable[str],
    context: MergeContext,
    changes: list[str],
) -> None:
    wanted = list(dict.fromkeys(desired))
    for dlc in wanted:
        if dlc in mod.required_dlcs:
            continue
        if context.automated and mod.is_excluded(ExclusionKind.REQUIRED_DLC, dlc):
            context.report(
                IssueKind.EXCLUDED_FACT,
                mod.steam_id,
                f"{_who(mod, context)}: required DLC {dlc} is excluded, not added",
                target=dlc,
                level=logging.DEBUG,
            )
            continue
        mod.add_required_dlc(dlc)
        changes.append(f"required DLC {dlc} added")
    for dlc in mod.required_dlcs:
        if dlc in wanted:
            continue
        if context.automated and mod.is_excluded(ExclusionKind.REQUIRED_DLC, dlc):
            context.report(
                IssueKind.EXCLUDED_FACT,
                mod.steam_id,
                f"{_who(mod, context)}: required DLC {dlc} is excluded, not removed",
                target=dlc,
                level=logging.DEBUG,
            )
            continue
        mod.remove_required_dlc(dlc)
        changes.append(f"required DLC {dlc} removed")


def _sync_required_mods(
    mod: Mod,
    desired: Iterable[int],
    context: MergeContext,
    changes: list[str],
) -> None:
    wanted = list(dict.fromkeys(_substitute_group(mod, target, context) for target in desired))
    for target in wanted:
        if target not in mod.required_mods:
            _add_relationship(mod, RelationshipKind.REQUIRED_MOD, target, context, changes)
    for target in mod.required_mods:
        if target not in wanted:
            _remove_relationship(mod, RelationshipKind.REQUIRED_MOD, target, context, changes)


def _substitute_group(mod: Mod, target: int, context: MergeContext) -> int:
    """Crawler only: a required group member is recorded as its group instead."""
    if not context.automated or mod.is_excluded(ExclusionKind.REQUIRED_MOD, target):
        return target
    group = context.catalog.group_of(target)
    if group is None:
        return target
    log.debug("%s: required mod %s replaced by %s", _who(mod, context), target, group.label())
    return group.group_id


def _who(mod: Mod, context: MergeContext) -> str:
    return mod.render_label(ranges=context.catalog.ranges)


def _kind_label(kind: str) -> str:
    return kind.replace("_", " ")
