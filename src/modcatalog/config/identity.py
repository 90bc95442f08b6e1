"""Identity range configuration (fake/local/built-in/group ID boundaries)."""

from __future__ import annotations

from dataclasses import fields

from modcatalog.domain.model.identity import DEFAULT_ID_RANGES, IdRanges

from .env import ENV_PREFIX, int_from_env
from .errors import ConfigurationError


def get_id_ranges() -> IdRanges:
    """Build ID ranges from defaults plus ``MODCATALOG_*`` overrides."""

    values = {
        f.name: int_from_env(f"{ENV_PREFIX}{f.name.upper()}", getattr(DEFAULT_ID_RANGES, f.name))
        for f in fields(IdRanges)
    }
    try:
        return IdRanges(**values)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc
