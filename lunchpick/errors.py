from __future__ import annotations


class LunchPickError(Exception):
    """Base class for every error raised by lunchpick."""


class NetworkError(LunchPickError):
    """The place-search API could not be reached or answered with an HTTP error."""


class DecodeError(LunchPickError):
    """The place-search API answered with a body we could not decode."""


class ConfigError(LunchPickError):
    """Required configuration (the API key) is missing."""


class PersistenceError(LunchPickError):
    """A favorites/preferences file could not be read or written.

    Never escapes the storage layer: callers get defaults instead.
    """
