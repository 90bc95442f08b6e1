"""Identity classification for numeric mod IDs.

Real workshop entries carry IDs above ``highest_fake_id``. Everything at or below it
is synthetic: built-in mods, locally installed mods, and groups each get a reserved
range. Classification is a pure function of the configured ranges.

When ranges overlap (misconfiguration), the most specific class wins in a fixed
order: Group > Builtin > Local > Real.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

WORKSHOP_URL_TEMPLATE: Final[str] = "https://steamcommunity.com/sharedfiles/filedetails/?id={}"


class IdClass(StrEnum):
    REAL = "real"
    LOCAL = "local"
    BUILTIN = "builtin"
    GROUP = "group"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class IdRanges:
    """Inclusive ID boundaries for every synthetic identity class."""

    lowest_builtin_id: int = 1
    highest_builtin_id: int = 99
    lowest_local_id: int = 100
    highest_local_id: int = 9_999
    lowest_group_id: int = 10_000
    highest_group_id: int = 999_999
    highest_fake_id: int = 999_999

    def __post_init__(self) -> None:
        for label, low, high in (
            ("builtin", self.lowest_builtin_id, self.highest_builtin_id),
            ("local", self.lowest_local_id, self.highest_local_id),
            ("group", self.lowest_group_id, self.highest_group_id),
        ):
            if low < 0 or high < 0:
                raise ValueError(f"{label} ID range must be non-negative")
            if low > high:
                raise ValueError(f"{label} ID range is inverted: {low} > {high}")
        if self.highest_fake_id < 0:
            raise ValueError("highest fake ID must be non-negative")

    def is_group(self, mod_id: int) -> bool:
        return self.lowest_group_id <= mod_id <= self.highest_group_id

    def is_builtin(self, mod_id: int) -> bool:
        return self.lowest_builtin_id <= mod_id <= self.highest_builtin_id

    def is_local(self, mod_id: int) -> bool:
        return self.lowest_local_id <= mod_id <= self.highest_local_id

    def is_real(self, mod_id: int) -> bool:
        return mod_id > self.highest_fake_id


DEFAULT_ID_RANGES: Final[IdRanges] = IdRanges()


def classify_id(mod_id: int, ranges: IdRanges = DEFAULT_ID_RANGES) -> IdClass:
    if ranges.is_group(mod_id):
        return IdClass.GROUP
    if ranges.is_builtin(mod_id):
        return IdClass.BUILTIN
    if ranges.is_local(mod_id):
        return IdClass.LOCAL
    if ranges.is_real(mod_id):
        return IdClass.REAL
    return IdClass.UNKNOWN


def id_tag(mod_id: int, ranges: IdRanges = DEFAULT_ID_RANGES, *, hide_id: bool = False) -> str:
    """Return the bracketed identity tag, e.g. ``[Steam ID    1234567]`` or ``[local mod 123]``.

    ``hide_id`` only hides synthetic IDs; real and group IDs are always shown.
    """

    id_class = classify_id(mod_id, ranges)
    if id_class is IdClass.REAL:
        return f"[Steam ID {mod_id:>10}]"
    if id_class is IdClass.GROUP:
        return f"[Group {mod_id}]"
    word = {
        IdClass.BUILTIN: "built-in mod",
        IdClass.LOCAL: "local mod",
        IdClass.UNKNOWN: "unknown mod",
    }[id_class]
    return f"[{word}]" if hide_id else f"[{word} {mod_id}]"


def workshop_url(mod_id: int, ranges: IdRanges = DEFAULT_ID_RANGES) -> str:
    """Public listing URL for real workshop IDs; empty for synthetic IDs."""
    if classify_id(mod_id, ranges) is IdClass.REAL:
        return WORKSHOP_URL_TEMPLATE.format(mod_id)
    return ""
