"""Error taxonomy shared by the grammar, codec, and record layers.

- FormatError: malformed human input (wrong field width, unknown keyword).
- BoundsError: well-formed input outside the valid range (hour 24).
- InvalidDataError: structural decode failure (bad date/time, duration
  overflow, identifier mismatch, truncated stream).

Filesystem failures stay in the stdlib ``OSError`` family.
"""

from __future__ import annotations


class HrtrackerError(Exception):
    """Base class for all hrtracker errors."""


class FormatError(HrtrackerError, ValueError):
    """Human-entered text does not match the expected shape."""


class BoundsError(HrtrackerError, ValueError):
    """A value parsed or computed correctly but lies outside its domain."""


class InvalidDataError(HrtrackerError):
    """Encoded bytes do not describe a valid value."""


class UnexpectedEndError(InvalidDataError):
    """The byte stream ended before a value was complete."""
