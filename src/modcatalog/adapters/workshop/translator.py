"""Translate workshop and curation payloads into domain update sets."""

from __future__ import annotations

from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING, Final

from modcatalog.domain.entity_updates import ExclusionEdit, ModUpdate, RelationshipEdit
from modcatalog.domain.model import UNSET, ModFields

from .schema import CatalogPayload, ModPayload

if TYPE_CHECKING:
    from collections.abc import Mapping

    from modcatalog.domain.updating import UpdateSession

log = getLogger(__name__)

# "12 Mar, 2019 @ 6:11am"; the year is left out for dates in the current year.
_WORKSHOP_FORMAT: Final[str] = "%d %b, %Y @ %I:%M%p"
_SEPARATOR: Final[str] = " @ "

# Payload keys copied one-to-one into ``ModFields``.
_SCALAR_FIELDS: Final[tuple[str, ...]] = (
    "name",
    "author_id",
    "author_url",
    "game_version",
    "source_url",
    "stability",
    "stability_note",
    "note",
)


def parse_workshop_datetime(
    text: str | datetime | None, now: datetime | None = None
) -> datetime | None:
    """Parse a workshop date as UTC; ``None`` when it is missing or unreadable."""

    if text is None or isinstance(text, datetime):
        return text
    cleaned = " ".join(text.split())
    day_month, separator, time_of_day = cleaned.partition(_SEPARATOR)
    if separator and "," not in day_month:
        year = (now or datetime.now(UTC)).year
        cleaned = f"{day_month}, {year}{_SEPARATOR}{time_of_day}"
    try:
        parsed = datetime.strptime(cleaned, _WORKSHOP_FORMAT)  # noqa: DTZ007
    except ValueError:
        log.debug("Could not parse workshop date %r", text)
        return None
    return parsed.replace(tzinfo=UTC)


def _ensure_mod_payload(payload: ModPayload | Mapping[str, object]) -> ModPayload:
    if isinstance(payload, ModPayload):
        return payload
    return ModPayload.model_validate(payload)


def translate_mod_payload(
    payload: ModPayload | Mapping[str, object], *, now: datetime | None = None
) -> ModUpdate:
    """Turn one payload into a ``ModUpdate``; keys absent from the payload stay ``UNSET``."""

    mod = _ensure_mod_payload(payload)
    given = mod.model_fields_set

    values: dict[str, object] = {
        name: getattr(mod, name) for name in _SCALAR_FIELDS if name in given
    }
    for name in ("published", "updated"):
        if name in given:
            values[name] = parse_workshop_datetime(getattr(mod, name), now)
    if "author_id" in values and values["author_id"] is None:
        del values["author_id"]

    return ModUpdate(
        fields=ModFields(**values),  # pyright: ignore[reportArgumentType]
        relationships=tuple(
            RelationshipEdit(edit.kind, edit.target, edit.action) for edit in mod.relationships
        ),
        required_mods=(
            tuple(mod.required_mods)
            if "required_mods" in given and mod.required_mods is not None
            else UNSET
        ),
        required_dlcs=(
            tuple(mod.required_dlcs)
            if "required_dlcs" in given and mod.required_dlcs is not None
            else UNSET
        ),
        statuses_added=tuple(mod.statuses_added),
        statuses_removed=tuple(mod.statuses_removed),
        has_description=(
            mod.has_description
            if "has_description" in given and mod.has_description is not None
            else UNSET
        ),
        exclusions=tuple(
            ExclusionEdit(edit.kind, edit.target, edit.action) for edit in mod.exclusions
        ),
        change_note=mod.change_note,
    )


def parse_catalog_payload(raw: str | bytes) -> CatalogPayload:
    return CatalogPayload.model_validate_json(raw)


def apply_catalog_payload(
    session: UpdateSession,
    payload: CatalogPayload,
    *,
    now: datetime | None = None,
) -> None:
    """Feed a whole payload into an open session.

    Groups go first so the crawler can substitute them for their members.
    """

    for group in payload.groups:
        session.upsert_group(group.group_id, group.name, group.members)
    for mod in payload.mods:
        session.upsert_mod(mod.steam_id, translate_mod_payload(mod, now=now))
    for mod_id in payload.removed_mods:
        session.remove_mod(mod_id)
    for group_id in payload.removed_groups:
        session.remove_group(group_id)
    log.info(
        "Applied %d mods and %d groups from %s payload",
        len(payload.mods),
        len(payload.groups),
        payload.origin,
    )
