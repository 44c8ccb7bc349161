"""Ephemeris adapters (optional).

Thin wrappers around skyfield/JPL kernels, used only to validate the
analytical models. Install with:
  pip install "sunmoon[ephemeris]"
"""

from ..core.errors import EphemerisUnavailableError


def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import jplephem  # noqa: F401
        import skyfield  # noqa: F401
    except ImportError as e:
        raise EphemerisUnavailableError('Ephemeris support requires: pip install "sunmoon[ephemeris]"') from e
