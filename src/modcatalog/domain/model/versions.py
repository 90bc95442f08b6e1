"""Game version value type.

Catalog entries store the compatible game version as a normalized dotted string;
``GameVersion`` is the structured form produced on demand.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from logging import getLogger
from typing import ClassVar, Final

log = getLogger(__name__)

# Accepts "1.13.3.9", "1.13.3-f9" and "1.13.3f9"
_SEPARATORS: Final = re.compile(r"[.\-f]+")
_COMPONENTS: Final[int] = 4


@dataclass(frozen=True, slots=True, order=True)
class GameVersion:
    major: int = 0
    minor: int = 0
    build: int = 0
    revision: int = 0

    UNKNOWN: ClassVar[GameVersion]

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.build}.{self.revision}"

    @property
    def is_unknown(self) -> bool:
        return self == GameVersion.UNKNOWN

    @classmethod
    def parse(cls, text: str | None) -> GameVersion:
        """Parse a version string; anything unparseable becomes ``GameVersion.UNKNOWN``.

        Missing trailing components are padded with zeros. More than four components,
        negative or non-numeric parts are rejected.
        """

        if text is None or not text.strip():
            return cls.UNKNOWN
        parts = [part for part in _SEPARATORS.split(text.strip()) if part]
        if not parts or len(parts) > _COMPONENTS or not all(part.isdigit() for part in parts):
            log.debug("Unparseable game version %r, using unknown version", text)
            return cls.UNKNOWN
        numbers = [int(part) for part in parts]
        numbers.extend([0] * (_COMPONENTS - len(numbers)))
        return cls(*numbers)


GameVersion.UNKNOWN = GameVersion()

UNKNOWN_VERSION_STRING: Final[str] = str(GameVersion.UNKNOWN)


def normalize_version_string(text: str | None) -> str:
    return str(GameVersion.parse(text))
