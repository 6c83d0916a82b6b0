from __future__ import annotations


class GtransError(Exception):
    """Base class for errors reported to the user with exit status 1."""


class ConfigError(GtransError):
    """Missing credentials or an unresolvable target language."""


class APIError(GtransError):
    """A call to the translation API failed."""
