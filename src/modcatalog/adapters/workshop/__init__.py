"""Public interface for the workshop payload adapter."""

from __future__ import annotations

from .schema import CatalogPayload, GroupPayload, ModPayload
from .translator import (
    apply_catalog_payload,
    parse_catalog_payload,
    parse_workshop_datetime,
    translate_mod_payload,
)

__all__ = [
    "CatalogPayload",
    "GroupPayload",
    "ModPayload",
    "apply_catalog_payload",
    "parse_catalog_payload",
    "parse_workshop_datetime",
    "translate_mod_payload",
]
