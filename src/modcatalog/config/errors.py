"""Errors raised while reading catalog settings."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """An ID range, width or retry setting cannot be used."""


class MissingConfigurationError(ConfigurationError):
    """A setting the current command needs is unset or blank."""
