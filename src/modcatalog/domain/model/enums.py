"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Stability(StrEnum):
    NOT_REVIEWED = "not_reviewed"
    NOT_ENOUGH_INFORMATION = "not_enough_information"
    STABLE = "stable"
    MINOR_ISSUES = "minor_issues"
    USERS_REPORT_ISSUES = "users_report_issues"
    REQUIRES_INCOMPATIBLE_MOD = "requires_incompatible_mod"
    INCOMPATIBLE_ACCORDING_TO_WORKSHOP = "incompatible_according_to_workshop"
    BROKEN = "broken"
    GAME_BREAKING = "game_breaking"


class ReportSeverity(IntEnum):
    """Ordered so that ``max()`` yields the most severe finding."""

    NOTHING_TO_REPORT = 0
    REMARKS = 1
    MINOR_ISSUES = 2
    MAJOR_ISSUES = 3
    UNSUBSCRIBE = 4


class ModStatus(StrEnum):
    """Well-known status flags. Statuses are stored as plain strings, so others are allowed."""

    UNLISTED_IN_WORKSHOP = "unlisted_in_workshop"
    REMOVED_FROM_WORKSHOP = "removed_from_workshop"
    NO_DESCRIPTION = "no_description"
    NO_COMMENT_SECTION = "no_comment_section"
    SOURCE_UNAVAILABLE = "source_unavailable"
    SOURCE_NOT_UPDATED = "source_not_updated"
    SOURCE_OBFUSCATED = "source_obfuscated"
    DEPRECATED = "deprecated"
    ABANDONED = "abandoned"
    BREAKS_EDITORS = "breaks_editors"
    MUSIC_COPYRIGHTED = "music_copyrighted"


class Dlc(StrEnum):
    """Well-known add-on identifiers. Required add-ons are stored as plain strings."""

    DELUXE = "deluxe"
    AFTER_DARK = "after_dark"
    SNOWFALL = "snowfall"
    NATURAL_DISASTERS = "natural_disasters"
    MASS_TRANSIT = "mass_transit"
    GREEN_CITIES = "green_cities"
    PARKLIFE = "parklife"
    INDUSTRIES = "industries"
    CAMPUS = "campus"
    SUNSET_HARBOR = "sunset_harbor"
    AIRPORTS = "airports"
    PLAZAS_AND_PROMENADES = "plazas_and_promenades"
    FINANCIAL_DISTRICTS = "financial_districts"
    HOTELS_AND_RETREATS = "hotels_and_retreats"


class RelationshipKind(StrEnum):
    REQUIRED_MOD = "required_mod"
    SUCCESSOR = "successor"
    ALTERNATIVE = "alternative"
    RECOMMENDATION = "recommendation"


class ExclusionKind(StrEnum):
    # boolean flags
    GAME_VERSION = "game_version"
    NO_DESCRIPTION = "no_description"
    SOURCE_URL = "source_url"
    # per-target sets
    REQUIRED_DLC = "required_dlc"
    REQUIRED_MOD = "required_mod"


class EditAction(StrEnum):
    ADD = "add"
    REMOVE = "remove"


class UpdateOrigin(StrEnum):
    """Which process proposed an update: manual curation or the workshop crawler."""

    CURATION = "curation"
    CRAWLER = "crawler"
