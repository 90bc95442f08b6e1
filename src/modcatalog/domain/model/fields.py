"""Partial field-update sets for catalog entries.

Every field is either a value or ``UNSET``. Only present fields are applied, which
keeps "leave unchanged" distinct from legitimately empty values such as ``""``.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import TYPE_CHECKING, Final, TypeAlias, TypeVar

if TYPE_CHECKING:
    from datetime import datetime

    from .enums import Stability


class Unset(Enum):
    UNSET = "unset"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = Unset.UNSET

T = TypeVar("T")

Maybe: TypeAlias = T | Unset


@dataclass(frozen=True, slots=True, kw_only=True)
class ModFields:
    """Scalar fields of a mod, each optionally present."""

    name: Maybe[str | None] = UNSET
    published: Maybe[datetime | None] = UNSET
    updated: Maybe[datetime | None] = UNSET
    author_id: Maybe[int] = UNSET
    author_url: Maybe[str | None] = UNSET
    stability: Maybe[Stability | None] = UNSET
    stability_note: Maybe[str | None] = UNSET
    note: Maybe[str | None] = UNSET
    game_version: Maybe[str | None] = UNSET
    source_url: Maybe[str | None] = UNSET
    review_date: Maybe[datetime | None] = UNSET
    auto_review_date: Maybe[datetime | None] = UNSET

    def present(self) -> dict[str, object]:
        """Return ``{field name: value}`` for every field that is not ``UNSET``."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def is_empty(self) -> bool:
        return not self.present()

    def without(self, *names: str) -> ModFields:
        """Copy with the given fields reset to ``UNSET``."""
        return replace(self, **dict.fromkeys(names, UNSET))
