"""Update sessions: staged, all-or-nothing batches of catalog edits.

A session works on a copy of the catalog. Individual edits that would break an
invariant are dropped and recorded as issues while the session continues;
structural problems found at commit time abort the whole session and leave the
live catalog as it was.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import TYPE_CHECKING

from modcatalog.domain.entity_updates import (
    DataQualityIssue,
    IssueKind,
    MergeContext,
    ModUpdate,
    apply_mod_update,
    merge_group,
)
from modcatalog.domain.model import Mod, RelationshipKind, UpdateOrigin
from modcatalog.domain.model._internal import (
    add_mod,
    adopt_catalog_state,
    bump_version,
    drop_group,
    drop_mod,
    mark_session_start,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from types import TracebackType

    from modcatalog.domain.model import Catalog, Group

log = logging.getLogger(__name__)


class SessionState(StrEnum):
    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    COMMITTED = "committed"
    ABORTED = "aborted"


class SessionStateError(RuntimeError):
    """Raised when a session operation is called in the wrong state."""


@dataclass(frozen=True, slots=True)
class SessionResult:
    """Outcome of a finished session."""

    state: SessionState
    version: int
    added: tuple[int, ...] = ()
    updated: tuple[int, ...] = ()
    removed: tuple[int, ...] = ()
    issues: tuple[DataQualityIssue, ...] = ()

    @property
    def committed(self) -> bool:
        return self.state is SessionState.COMMITTED


def _utcnow() -> datetime:
    return datetime.now(UTC)


class UpdateSession:
    """One batch of crawler or curation edits against a catalog.

    Usable as a context manager: entering begins the session, and leaving the
    block without committing aborts it.
    """

    def __init__(
        self,
        catalog: Catalog,
        *,
        origin: UpdateOrigin = UpdateOrigin.CURATION,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._catalog = catalog
        self._origin = origin
        self._clock = clock or _utcnow
        self._state = SessionState.IDLE
        self._base_version = catalog.version
        self._context: MergeContext | None = None
        self._changes: dict[int, list[str]] = {}
        self._removed: list[int] = []

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def origin(self) -> UpdateOrigin:
        return self._origin

    @property
    def staged(self) -> Catalog:
        """The working copy edits go to; only valid while the session is in progress."""
        return self._require_context().catalog

    @property
    def issues(self) -> tuple[DataQualityIssue, ...]:
        if self._context is None:
            return ()
        return tuple(self._context.issues)

    def __enter__(self) -> UpdateSession:
        self.begin()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool:
        if self._state is SessionState.IN_PROGRESS:
            self.abort()
        return False

    # Lifecycle

    def begin(self) -> None:
        if self._state is not SessionState.IDLE:
            raise SessionStateError(f"Cannot begin a session that is {self._state}")
        staged = self._catalog.copy()
        for mod in staged.mods.values():
            mark_session_start(mod)
        self._base_version = self._catalog.version
        self._context = MergeContext(staged, origin=self._origin)
        self._state = SessionState.IN_PROGRESS
        log.info(
            "Started %s session on catalog version %d", self._origin, self._base_version
        )

    def commit(self) -> SessionResult:
        context = self._require_context()
        staged = context.catalog

        missing = False
        for group in staged.groups.values():
            for member in group.members:
                if staged.has_mod(member):
                    continue
                missing = True
                context.report(
                    IssueKind.MISSING_GROUP_MEMBER,
                    group.group_id,
                    f"{group.label()}: member {member} is not in the catalog",
                    target=member,
                    level=logging.ERROR,
                )
        if missing:
            log.error(
                "Aborting session, catalog stays at version %d", self._catalog.version
            )
            return self._finish(SessionState.ABORTED)

        now = self._clock()
        for mod_id, changes in self._changes.items():
            mod = staged.get_mod(mod_id)
            if mod is not None and changes:
                mod.append_change_note(f"{now:%Y-%m-%d}: {'; '.join(changes)}")
        bump_version(staged, now)
        adopt_catalog_state(self._catalog, staged)
        log.info(
            "Committed catalog version %d (%d mods, %d groups)",
            self._catalog.version,
            len(self._catalog.mods),
            len(self._catalog.groups),
        )
        return self._finish(SessionState.COMMITTED)

    def abort(self) -> SessionResult:
        self._require_context()
        log.info("Session aborted, catalog stays at version %d", self._catalog.version)
        return self._finish(SessionState.ABORTED)

    # Mods

    def upsert_mod(self, mod_id: int, update: ModUpdate | None = None) -> Mod:
        """Create ``mod_id`` if needed and merge ``update`` into it."""
        context = self._require_context()
        mod = context.catalog.get_mod(mod_id)
        changes = self._changes.setdefault(mod_id, [])
        if mod is None:
            mod = Mod(mod_id)
            add_mod(context.catalog, mod)
            if mod_id in self._removed:
                self._removed.remove(mod_id)
            changes.append("added")
            log.debug("Added %s", mod.render_label(ranges=context.catalog.ranges))
        changes.extend(apply_mod_update(mod, update or ModUpdate(), context))
        return mod

    def remove_mod(self, mod_id: int) -> bool:
        """Delist ``mod_id`` and strip every reference to it from other mods and groups."""
        context = self._require_context()
        staged = context.catalog
        removed = drop_mod(staged, mod_id)
        if removed is None:
            context.report(
                IssueKind.UNKNOWN_MOD,
                mod_id,
                f"Cannot remove mod {mod_id}, it is not in the catalog",
            )
            return False

        for other in staged.mods.values():
            for kind in RelationshipKind:
                if other.remove_relationship(kind, mod_id):
                    self._changes.setdefault(other.steam_id, []).append(
                        f"{kind.replace('_', ' ')} {mod_id} removed"
                    )
        for group in staged.groups.values():
            if group.remove_member(mod_id):
                log.info("Removed %s from %s", mod_id, group.label())

        self._changes.pop(mod_id, None)
        self._removed.append(mod_id)
        log.info("Removed %s", removed.render_label(ranges=staged.ranges))
        return True

    # Groups

    def upsert_group(
        self, group_id: int, name: str | None, members: Iterable[int]
    ) -> Group | None:
        return merge_group(group_id, name, members, self._require_context())

    def remove_group(self, group_id: int) -> bool:
        context = self._require_context()
        group = drop_group(context.catalog, group_id)
        if group is None:
            return False
        log.info("Removed %s", group.label())
        return True

    # Helpers

    def _require_context(self) -> MergeContext:
        if self._state is not SessionState.IN_PROGRESS or self._context is None:
            raise SessionStateError(f"Session is {self._state}, not in progress")
        return self._context

    def _finish(self, state: SessionState) -> SessionResult:
        context = self._require_context()
        staged = context.catalog
        added: list[int] = []
        updated: list[int] = []
        if state is SessionState.COMMITTED:
            for mod in staged.mods.values():
                if mod.added_this_session:
                    added.append(mod.steam_id)
                elif mod.updated_this_session:
                    updated.append(mod.steam_id)
        result = SessionResult(
            state=state,
            version=self._catalog.version,
            added=tuple(added),
            updated=tuple(updated),
            removed=tuple(self._removed) if state is SessionState.COMMITTED else (),
            issues=tuple(context.issues),
        )
        self._state = state
        return result
