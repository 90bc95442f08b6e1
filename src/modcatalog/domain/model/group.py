"""Groups: sets of interchangeable mods.

A group ID may stand in a required-mods list, where any one member satisfies the
requirement. A mod belongs to at most one group, and groups never nest; both rules
are enforced by the update session. Range and size problems are only warnings.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from .identity import DEFAULT_ID_RANGES
from .records import GroupRecord

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .identity import IdRanges

log = getLogger(__name__)

MIN_GROUP_MEMBERS = 2


@dataclass(eq=False, slots=True)
class Group:
    _group_id: int
    _name: str = ""
    _members: list[int] = field(default_factory=list[int])
    ranges: InitVar[IdRanges | None] = DEFAULT_ID_RANGES

    def __post_init__(self, ranges: IdRanges | None) -> None:
        self._name = self._name or ""
        self._members = list(dict.fromkeys(self._members))
        if ranges is None:
            return
        if not self.in_range(ranges):
            log.error("Group ID out of range: %s. This might give weird results.", self.label())
        if self.is_undersized:
            log.warning("Found group with less than %d members: %s", MIN_GROUP_MEMBERS, self.label())

    @classmethod
    def create(
        cls,
        group_id: int,
        name: str | None,
        members: Iterable[int],
        *,
        ranges: IdRanges | None = DEFAULT_ID_RANGES,
    ) -> Group:
        return cls(group_id, name or "", list(members), ranges)

    @property
    def group_id(self) -> int:
        return self._group_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def members(self) -> tuple[int, ...]:
        return tuple(self._members)

    @property
    def is_undersized(self) -> bool:
        return len(self._members) < MIN_GROUP_MEMBERS

    def in_range(self, ranges: IdRanges = DEFAULT_ID_RANGES) -> bool:
        return ranges.is_group(self._group_id)

    def has_member(self, mod_id: int) -> bool:
        return mod_id in self._members

    def add_member(self, mod_id: int) -> bool:
        if mod_id in self._members:
            return False
        self._members.append(mod_id)
        return True

    def remove_member(self, mod_id: int) -> bool:
        if mod_id not in self._members:
            return False
        self._members.remove(mod_id)
        return True

    def rename(self, name: str | None) -> None:
        self._name = name or ""

    def label(self) -> str:
        return f"[Group {self._group_id}] {self._name}"

    def __str__(self) -> str:
        return self.label()

    def copy(self) -> Group:
        """Independent copy; the member list is never shared."""
        return Group(self._group_id, self._name, list(self._members), None)

    def to_record(self) -> GroupRecord:
        return GroupRecord(self._group_id, self._name, tuple(self._members))

    @classmethod
    def from_record(
        cls, record: GroupRecord, *, ranges: IdRanges | None = DEFAULT_ID_RANGES
    ) -> Group:
        return cls(record.group_id, record.name, list(record.members), ranges)
