"""Catalog aggregate: every mod and group, plus the catalog version.

Readers get read-only views. Mutation is reserved for the update session, which
goes through ``modcatalog.domain.model._internal``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from .group import Group
from .identity import DEFAULT_ID_RANGES, IdClass, classify_id
from .mod import Mod, optional_utc
from .records import CatalogRecord

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

    from .identity import IdRanges


@dataclass(eq=False, slots=True)
class Catalog:
    ranges: IdRanges = DEFAULT_ID_RANGES
    _version: int = field(default=0, init=False)
    _built_at: datetime | None = field(default=None, init=False)
    _mods: dict[int, Mod] = field(default_factory=dict[int, Mod], init=False, repr=False)
    _groups: dict[int, Group] = field(default_factory=dict[int, Group], init=False, repr=False)

    @property
    def version(self) -> int:
        return self._version

    @property
    def built_at(self) -> datetime | None:
        return self._built_at

    @property
    def mods(self) -> Mapping[int, Mod]:
        return MappingProxyType(self._mods)

    @property
    def groups(self) -> Mapping[int, Group]:
        return MappingProxyType(self._groups)

    def get_mod(self, mod_id: int) -> Mod | None:
        return self._mods.get(mod_id)

    def get_group(self, group_id: int) -> Group | None:
        return self._groups.get(group_id)

    def has_mod(self, mod_id: int) -> bool:
        return mod_id in self._mods

    def is_group_id(self, mod_id: int) -> bool:
        """True for registered groups and for any ID in the configured group range."""
        return mod_id in self._groups or classify_id(mod_id, self.ranges) is IdClass.GROUP

    def group_of(self, mod_id: int) -> Group | None:
        """The group ``mod_id`` is a member of, if any."""
        for group in self._groups.values():
            if group.has_member(mod_id):
                return group
        return None

    def copy(self) -> Catalog:
        clone = Catalog(self.ranges)
        clone._version = self._version
        clone._built_at = self._built_at
        clone._mods = {mod_id: mod.copy() for mod_id, mod in self._mods.items()}
        clone._groups = {group_id: group.copy() for group_id, group in self._groups.items()}
        return clone

    def to_record(self) -> CatalogRecord:
        return CatalogRecord(
            version=self._version,
            built_at=self._built_at,
            mods=tuple(mod.to_record() for mod in self._mods.values()),
            groups=tuple(group.to_record() for group in self._groups.values()),
        )

    @classmethod
    def from_record(cls, record: CatalogRecord, *, ranges: IdRanges = DEFAULT_ID_RANGES) -> Catalog:
        catalog = cls(ranges)
        catalog._version = record.version
        catalog._built_at = optional_utc(record.built_at)
        for mod_record in record.mods:
            catalog._mods[mod_record.steam_id] = Mod.from_record(mod_record)
        for group_record in record.groups:
            catalog._groups[group_record.group_id] = Group.from_record(group_record, ranges=ranges)
        return catalog
