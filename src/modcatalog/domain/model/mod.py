"""Mod catalog entry.

State is private; every mutation goes through a named operation so invariants
(clamped dates, duplicate-free lists, one-way severity) hold at every call site.
The cross-list exclusivity of relationship lists is enforced by the update session,
not here.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Final

from .enums import ExclusionKind, RelationshipKind, ReportSeverity, Stability
from .exclusions import FLAG_EXCLUSIONS, SET_EXCLUSIONS, Exclusions
from .fields import UNSET
from .identity import DEFAULT_ID_RANGES, id_tag
from .records import ModRecord
from .versions import UNKNOWN_VERSION_STRING, GameVersion, normalize_version_string

if TYPE_CHECKING:
    from .fields import ModFields
    from .identity import IdRanges

DISABLED_PREFIX: Final[str] = "[Disabled] "
ELLIPSIS: Final[str] = "..."


def cut_off(text: str, width: int) -> str:
    """Shorten ``text`` to ``width`` characters, ending in an ellipsis when cut."""
    if len(text) <= width:
        return text
    if width <= len(ELLIPSIS):
        return ELLIPSIS[: max(width, 0)]
    return text[: width - len(ELLIPSIS)] + ELLIPSIS


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def optional_utc(value: datetime | None) -> datetime | None:
    """UTC view of a stored date; naive values are taken as UTC."""
    return None if value is None else _as_utc(value)


@dataclass(eq=False, slots=True)
class Mod:
    _steam_id: int

    _name: str = field(default="", init=False)
    _published: datetime | None = field(default=None, init=False, repr=False)
    _updated: datetime | None = field(default=None, init=False, repr=False)
    _author_id: int = field(default=0, init=False, repr=False)
    _author_url: str = field(default="", init=False, repr=False)

    _stability: Stability = field(default=Stability.NOT_REVIEWED, init=False, repr=False)
    _stability_note: str = field(default="", init=False, repr=False)
    _note: str = field(default="", init=False, repr=False)
    _game_version: str = field(default=UNKNOWN_VERSION_STRING, init=False, repr=False)
    _source_url: str = field(default="", init=False, repr=False)
    _required_dlcs: list[str] = field(default_factory=list[str], init=False, repr=False)
    _statuses: list[str] = field(default_factory=list[str], init=False, repr=False)

    _required_mods: list[int] = field(default_factory=list[int], init=False, repr=False)
    _successors: list[int] = field(default_factory=list[int], init=False, repr=False)
    _alternatives: list[int] = field(default_factory=list[int], init=False, repr=False)
    _recommendations: list[int] = field(default_factory=list[int], init=False, repr=False)

    _exclusions: Exclusions = field(default_factory=Exclusions, init=False, repr=False)

    _review_date: datetime | None = field(default=None, init=False, repr=False)
    _auto_review_date: datetime | None = field(default=None, init=False, repr=False)
    _change_notes: list[str] = field(default_factory=list[str], init=False, repr=False)

    # Not persisted: session bookkeeping
    _added_this_session: bool = field(default=True, init=False, repr=False)
    _updated_this_session: bool = field(default=False, init=False, repr=False)

    # Not persisted: subscription state, only meaningful to reporting
    _is_disabled: bool = field(default=False, init=False, repr=False)
    _is_camera_script: bool = field(default=False, init=False, repr=False)
    _mod_path: str = field(default="", init=False, repr=False)
    _downloaded: datetime | None = field(default=None, init=False, repr=False)
    _report_severity: ReportSeverity = field(
        default=ReportSeverity.NOTHING_TO_REPORT, init=False, repr=False
    )

    # Read access

    @property
    def steam_id(self) -> int:
        return self._steam_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def published(self) -> datetime | None:
        return self._published

    @property
    def updated(self) -> datetime | None:
        return self._updated

    @property
    def author_id(self) -> int:
        return self._author_id

    @property
    def author_url(self) -> str:
        return self._author_url

    @property
    def stability(self) -> Stability:
        return self._stability

    @property
    def stability_note(self) -> str:
        return self._stability_note

    @property
    def note(self) -> str:
        return self._note

    @property
    def game_version(self) -> str:
        return self._game_version

    def game_version_info(self) -> GameVersion:
        return GameVersion.parse(self._game_version)

    @property
    def source_url(self) -> str:
        return self._source_url

    @property
    def required_dlcs(self) -> tuple[str, ...]:
        return tuple(self._required_dlcs)

    @property
    def statuses(self) -> tuple[str, ...]:
        return tuple(self._statuses)

    @property
    def required_mods(self) -> tuple[int, ...]:
        return tuple(self._required_mods)

    @property
    def successors(self) -> tuple[int, ...]:
        return tuple(self._successors)

    @property
    def alternatives(self) -> tuple[int, ...]:
        return tuple(self._alternatives)

    @property
    def recommendations(self) -> tuple[int, ...]:
        return tuple(self._recommendations)

    @property
    def review_date(self) -> datetime | None:
        return self._review_date

    @property
    def auto_review_date(self) -> datetime | None:
        return self._auto_review_date

    @property
    def change_notes(self) -> tuple[str, ...]:
        return tuple(self._change_notes)

    @property
    def added_this_session(self) -> bool:
        return self._added_this_session

    @property
    def updated_this_session(self) -> bool:
        return self._updated_this_session

    @property
    def is_disabled(self) -> bool:
        return self._is_disabled

    @property
    def is_camera_script(self) -> bool:
        return self._is_camera_script

    @property
    def mod_path(self) -> str:
        return self._mod_path

    @property
    def downloaded(self) -> datetime | None:
        return self._downloaded

    @property
    def report_severity(self) -> ReportSeverity:
        return self._report_severity

    # Partial update

    def apply_update(self, fields: ModFields) -> None:
        """Apply every present field; absent fields keep their value.

        Never fails: ``None`` text becomes ``""``, ``None`` dates and a zero author ID
        are ignored, and an unparseable game version becomes the unknown version.
        The entry counts as updated this session even if nothing changed.
        """

        if fields.name is not UNSET:
            self._name = fields.name or ""
        if fields.published is not UNSET and fields.published is not None:
            self._published = _as_utc(fields.published)
        if fields.updated is not UNSET and fields.updated is not None:
            self._updated = _as_utc(fields.updated)
        if self._published is not None and (
            self._updated is None or self._updated < self._published
        ):
            self._updated = self._published

        if fields.author_id is not UNSET and fields.author_id:
            self._author_id = fields.author_id
        if fields.author_url is not UNSET:
            self._author_url = fields.author_url or ""

        if fields.stability is not UNSET and fields.stability is not None:
            self._stability = fields.stability
        if fields.stability_note is not UNSET:
            self._stability_note = fields.stability_note or ""
        if fields.note is not UNSET:
            self._note = fields.note or ""
        if fields.game_version is not UNSET:
            self._game_version = normalize_version_string(fields.game_version)
        if fields.source_url is not UNSET:
            self._source_url = fields.source_url or ""

        if fields.review_date is not UNSET and fields.review_date is not None:
            self._review_date = _as_utc(fields.review_date)
        if fields.auto_review_date is not UNSET and fields.auto_review_date is not None:
            self._auto_review_date = _as_utc(fields.auto_review_date)

        self._updated_this_session = True

    # Relationship lists

    def relationships(self, kind: RelationshipKind) -> tuple[int, ...]:
        return tuple(self._relationship_list(kind))

    def add_relationship(self, kind: RelationshipKind, target: int) -> bool:
        """Append ``target`` to the list; returns False if it was already there."""
        targets = self._relationship_list(kind)
        if target in targets:
            return False
        targets.append(target)
        return True

    def remove_relationship(self, kind: RelationshipKind, target: int) -> bool:
        targets = self._relationship_list(kind)
        if target not in targets:
            return False
        targets.remove(target)
        return True

    def relationship_kinds_of(self, target: int) -> tuple[RelationshipKind, ...]:
        """Every relationship list that currently holds ``target``."""
        return tuple(kind for kind in RelationshipKind if target in self._relationship_list(kind))

    def _relationship_list(self, kind: RelationshipKind) -> list[int]:
        match kind:
            case RelationshipKind.REQUIRED_MOD:
                return self._required_mods
            case RelationshipKind.SUCCESSOR:
                return self._successors
            case RelationshipKind.ALTERNATIVE:
                return self._alternatives
            case RelationshipKind.RECOMMENDATION:
                return self._recommendations

    # Add-ons and statuses

    def add_required_dlc(self, dlc: str) -> bool:
        if dlc in self._required_dlcs:
            return False
        self._required_dlcs.append(dlc)
        return True

    def remove_required_dlc(self, dlc: str) -> bool:
        if dlc not in self._required_dlcs:
            return False
        self._required_dlcs.remove(dlc)
        return True

    def add_status(self, status: str) -> bool:
        if status in self._statuses:
            return False
        self._statuses.append(status)
        return True

    def remove_status(self, status: str) -> bool:
        if status not in self._statuses:
            return False
        self._statuses.remove(status)
        return True

    # Exclusions

    def is_excluded(self, kind: ExclusionKind, target: str | int | None = None) -> bool:
        return self._exclusions.is_excluded(kind, target)

    def set_exclusion(self, kind: ExclusionKind, value: bool) -> bool:  # noqa: FBT001
        if kind not in FLAG_EXCLUSIONS:
            raise ValueError(f"{kind} is not a flag exclusion")
        if value:
            return self._exclusions.exclude(kind)
        return self._exclusions.unexclude(kind)

    def add_exclusion(self, kind: ExclusionKind, target: str | int) -> bool:
        if kind not in SET_EXCLUSIONS:
            raise ValueError(f"{kind} does not take a target")
        return self._exclusions.exclude(kind, target)

    def remove_exclusion(self, kind: ExclusionKind, target: str | int) -> bool:
        if kind not in SET_EXCLUSIONS:
            raise ValueError(f"{kind} does not take a target")
        return self._exclusions.unexclude(kind, target)

    @property
    def exclusion_flags(self) -> frozenset[ExclusionKind]:
        return self._exclusions.flags

    @property
    def excluded_required_dlcs(self) -> tuple[str, ...]:
        return self._exclusions.required_dlcs

    @property
    def excluded_required_mods(self) -> tuple[int, ...]:
        return self._exclusions.required_mods

    # Review history and reporting state

    def append_change_note(self, text: str) -> None:
        self._change_notes.append(text)

    def update_subscription(
        self,
        *,
        is_disabled: bool,
        is_camera_script: bool,
        mod_path: str,
        downloaded: datetime | None,
    ) -> None:
        self._is_disabled = is_disabled
        self._is_camera_script = is_camera_script
        self._mod_path = mod_path
        self._downloaded = downloaded

    def raise_severity(self, severity: ReportSeverity) -> ReportSeverity:
        """Raise the report severity; never lowers it."""
        self._report_severity = max(self._report_severity, severity)
        return self._report_severity

    # Display

    def render_label(
        self,
        *,
        hide_id: bool = False,
        name_first: bool = False,
        truncate_to_width: int | None = None,
        rich_text: bool = False,
        ranges: IdRanges = DEFAULT_ID_RANGES,
    ) -> str:
        """Return ``[Disabled] [tag] name`` (or name before tag).

        With ``truncate_to_width`` only the name is shortened, so the whole label
        fits the width; the identity tag is never cut.
        """

        prefix = DISABLED_PREFIX if self._is_disabled else ""
        tag = id_tag(self._steam_id, ranges, hide_id=hide_id)
        name = self._name
        if truncate_to_width is not None:
            name = cut_off(name, truncate_to_width - len(tag) - 1 - len(prefix))
        if rich_text:
            name = html.escape(name)
            if prefix:
                prefix = f'<span class="disabled minor f-small">{prefix}</span>'
        return f"{prefix}{name} {tag}" if name_first else f"{prefix}{tag} {name}"

    def __str__(self) -> str:
        return self.render_label()

    # Copies and records

    def copy(self) -> Mod:
        """Independent deep copy, including session and subscription state."""
        clone = Mod.from_record(self.to_record())
        clone._added_this_session = self._added_this_session
        clone._updated_this_session = self._updated_this_session
        clone._is_disabled = self._is_disabled
        clone._is_camera_script = self._is_camera_script
        clone._mod_path = self._mod_path
        clone._downloaded = self._downloaded
        clone._report_severity = self._report_severity
        return clone

    def to_record(self) -> ModRecord:
        return ModRecord(
            steam_id=self._steam_id,
            name=self._name,
            published=self._published,
            updated=self._updated,
            author_id=self._author_id,
            author_url=self._author_url,
            stability=self._stability,
            stability_note=self._stability_note,
            note=self._note,
            game_version=self._game_version,
            source_url=self._source_url,
            required_dlcs=tuple(self._required_dlcs),
            required_mods=tuple(self._required_mods),
            successors=tuple(self._successors),
            alternatives=tuple(self._alternatives),
            recommendations=tuple(self._recommendations),
            statuses=tuple(self._statuses),
            exclusion_flags=self._exclusions.flags,
            exclusion_required_dlcs=self._exclusions.required_dlcs,
            exclusion_required_mods=self._exclusions.required_mods,
            review_date=self._review_date,
            auto_review_date=self._auto_review_date,
            change_notes=tuple(self._change_notes),
        )

    @classmethod
    def from_record(cls, record: ModRecord) -> Mod:
        """Restore a persisted entry; restored entries are not new this session."""
        mod = cls(record.steam_id)
        mod._name = record.name
        mod._published = optional_utc(record.published)
        mod._updated = optional_utc(record.updated)
        mod._author_id = record.author_id
        mod._author_url = record.author_url
        mod._stability = record.stability
        mod._stability_note = record.stability_note
        mod._note = record.note
        mod._game_version = record.game_version
        mod._source_url = record.source_url
        mod._required_dlcs = list(record.required_dlcs)
        mod._required_mods = list(record.required_mods)
        mod._successors = list(record.successors)
        mod._alternatives = list(record.alternatives)
        mod._recommendations = list(record.recommendations)
        mod._statuses = list(record.statuses)
        mod._exclusions = Exclusions(
            _flags=set(record.exclusion_flags),
            _required_dlcs=list(record.exclusion_required_dlcs),
            _required_mods=list(record.exclusion_required_mods),
        )
        mod._review_date = optional_utc(record.review_date)
        mod._auto_review_date = optional_utc(record.auto_review_date)
        mod._change_notes = list(record.change_notes)
        mod._added_this_session = False
        return mod
