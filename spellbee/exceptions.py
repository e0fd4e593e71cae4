"""Exception hierarchy for the spelling bee server."""


class SpellBeeError(Exception):
    """Base exception for server failures."""

    status_code = 500


class InvalidRequestError(SpellBeeError):
    """Raised when request input is missing or malformed."""

    status_code = 400


class CapacityExceededError(SpellBeeError):
    """Raised when a report list already holds the maximum number of words."""

    status_code = 429


class GenerationError(SpellBeeError):
    """Raised when the puzzle generator could not score any candidate."""

    status_code = 500


class DictionaryLoadError(SpellBeeError):
    """Raised when the dictionary word list cannot be read."""
