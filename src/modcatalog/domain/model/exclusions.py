"""Exclusion tracker: curator overrides that keep the crawler from re-applying facts.

Boolean exclusions guard a single automated fact (game version, missing description,
source URL). Set exclusions guard individual entries of a collection (required
add-ons, required mods).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from .enums import ExclusionKind

FLAG_EXCLUSIONS: Final[frozenset[ExclusionKind]] = frozenset(
    {ExclusionKind.GAME_VERSION, ExclusionKind.NO_DESCRIPTION, ExclusionKind.SOURCE_URL}
)
SET_EXCLUSIONS: Final[frozenset[ExclusionKind]] = frozenset(
    {ExclusionKind.REQUIRED_DLC, ExclusionKind.REQUIRED_MOD}
)


@dataclass(eq=False, slots=True)
class Exclusions:
    _flags: set[ExclusionKind] = field(default_factory=set["ExclusionKind"])
    _required_dlcs: list[str] = field(default_factory=list[str])
    _required_mods: list[int] = field(default_factory=list[int])

    @property
    def flags(self) -> frozenset[ExclusionKind]:
        return frozenset(self._flags)

    @property
    def required_dlcs(self) -> tuple[str, ...]:
        return tuple(self._required_dlcs)

    @property
    def required_mods(self) -> tuple[int, ...]:
        return tuple(self._required_mods)

    def is_excluded(self, kind: ExclusionKind, target: str | int | None = None) -> bool:
        if kind in FLAG_EXCLUSIONS:
            return kind in self._flags
        if target is None:
            raise ValueError(f"{kind} exclusions need a target")
        return target in self._target_list(kind)

    def exclude(self, kind: ExclusionKind, target: str | int | None = None) -> bool:
        """Set a flag or add a target; returns whether anything changed."""
        if kind in FLAG_EXCLUSIONS:
            if kind in self._flags:
                return False
            self._flags.add(kind)
            return True
        if target is None:
            raise ValueError(f"{kind} exclusions need a target")
        targets = self._target_list(kind)
        if target in targets:
            return False
        targets.append(target)
        return True

    def unexclude(self, kind: ExclusionKind, target: str | int | None = None) -> bool:
        """Clear a flag or remove a target; returns whether anything changed."""
        if kind in FLAG_EXCLUSIONS:
            if kind not in self._flags:
                return False
            self._flags.discard(kind)
            return True
        if target is None:
            raise ValueError(f"{kind} exclusions need a target")
        targets = self._target_list(kind)
        if target not in targets:
            return False
        targets.remove(target)
        return True

    def copy(self) -> Exclusions:
        return Exclusions(
            _flags=set(self._flags),
            _required_dlcs=list(self._required_dlcs),
            _required_mods=list(self._required_mods),
        )

    def _target_list(self, kind: ExclusionKind) -> list[str] | list[int]:
        if kind is ExclusionKind.REQUIRED_DLC:
            return self._required_dlcs
        return self._required_mods
