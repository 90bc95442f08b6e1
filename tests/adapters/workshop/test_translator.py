"""Translator tests for workshop payloads."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest

from modcatalog.adapters.workshop import (
    CatalogPayload,
    apply_catalog_payload,
    parse_catalog_payload,
    parse_workshop_datetime,
    translate_mod_payload,
)
from modcatalog.domain.entity_updates import RelationshipEdit
from modcatalog.domain.model import (
    UNSET,
    Catalog,
    EditAction,
    ModStatus,
    RelationshipKind,
    Stability,
    UpdateOrigin,
)
from modcatalog.domain.updating import UpdateSession

if TYPE_CHECKING:
    from pathlib import Path

NOW = datetime(2024, 5, 17, 12, 0, tzinfo=UTC)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("12 Mar, 2019 @ 6:11am", datetime(2019, 3, 12, 6, 11, tzinfo=UTC)),
        ("1 Dec, 2020 @ 12:05pm", datetime(2020, 12, 1, 12, 5, tzinfo=UTC)),
        ("24 May @ 11:27pm", datetime(2024, 5, 24, 23, 27, tzinfo=UTC)),
        ("  3   Jan,  2019 @ 9:00pm ", datetime(2019, 1, 3, 21, 0, tzinfo=UTC)),
    ],
)
def test_parse_workshop_datetime(text: str, expected: datetime) -> None:
    assert parse_workshop_datetime(text, NOW) == expected


@pytest.mark.parametrize("text", [None, "", "garbled date", "31 Feb, 2019 @ 1:00am"])
def test_parse_workshop_datetime_returns_none_for_garbage(text: str | None) -> None:
    assert parse_workshop_datetime(text, NOW) is None


def test_translate_only_given_keys() -> None:
    update = translate_mod_payload({"steam_id": 1_000_001, "name": "Traffic"})

    assert update.fields.present() == {"name": "Traffic"}
    assert update.required_mods is UNSET
    assert update.required_dlcs is UNSET
    assert update.has_description is UNSET


def test_translate_full_payload() -> None:
    update = translate_mod_payload(
        {
            "steam_id": 1_000_001,
            "published": "12 Mar, 2019 @ 6:11am",
            "author_id": None,
            "stability": "stable",
            "required_mods": [1_000_002],
            "required_dlcs": [],
            "has_description": False,
            "relationships": [{"kind": "successor", "target": 1_000_009, "action": "remove"}],
            "statuses_added": ["abandoned"],
            "change_note": "Checked by hand",
        },
        now=NOW,
    )

    assert update.fields.published == datetime(2019, 3, 12, 6, 11, tzinfo=UTC)
    assert update.fields.author_id is UNSET
    assert update.fields.stability is Stability.STABLE
    assert update.required_mods == (1_000_002,)
    assert update.required_dlcs == ()
    assert update.has_description is False
    assert update.relationships == (
        RelationshipEdit(RelationshipKind.SUCCESSOR, 1_000_009, EditAction.REMOVE),
    )
    assert update.statuses_added == ("abandoned",)
    assert update.change_note == "Checked by hand"


def test_apply_catalog_payload_runs_through_session(workshop_payload: dict[str, object]) -> None:
    payload = CatalogPayload.model_validate(workshop_payload)
    catalog = Catalog()

    with UpdateSession(catalog, origin=UpdateOrigin.CRAWLER, clock=lambda: NOW) as session:
        apply_catalog_payload(session, payload, now=NOW)
        result = session.commit()

    assert result.committed
    assert catalog.version == 1
    traffic = catalog.mods[1_000_001]
    assert traffic.updated == traffic.published == datetime(2019, 3, 12, 6, 11, tzinfo=UTC)
    assert traffic.game_version == "1.13.3.9"
    assert traffic.required_dlcs == ("after_dark",)
    anarchy = catalog.mods[1_000_002]
    assert anarchy.published == datetime(2024, 5, 24, 23, 27, tzinfo=UTC)
    assert anarchy.statuses == (ModStatus.NO_DESCRIPTION,)
    parking = catalog.mods[1_000_003]
    assert parking.published is None
    assert parking.required_mods == (10_001, 1_000_004)


def test_parse_catalog_payload_from_json(workshop_payload_path: Path) -> None:
    payload = parse_catalog_payload(workshop_payload_path.read_bytes())

    assert payload.origin is UpdateOrigin.CRAWLER
    assert len(payload.mods) == 4
