from __future__ import annotations

from .types import NoEventCode


class SunMoonError(Exception):
    """Base error."""


class NoEventError(SunMoonError):
    """Raised when the sun never crosses the requested altitude on a date."""

    def __init__(self, code: NoEventCode):
        self.code = NoEventCode(code)
        super().__init__(self.code.value)


class InvalidFlagError(SunMoonError, ValueError):
    """Raised for a rise/set selector other than RISE or SET."""


class DeltaTTableError(SunMoonError, ValueError):
    """Raised when a ΔT table cannot be read or is malformed."""


class EphemerisUnavailableError(SunMoonError, RuntimeError):
    """Raised when the optional ephemeris extras are not installed."""
