from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(scope="session")
def workshop_payload(workshop_payload_path: Path) -> dict[str, object]:
    with workshop_payload_path.open() as handle:
        return json.load(handle)
