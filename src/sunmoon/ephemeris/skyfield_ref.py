# ephemeris/skyfield_ref.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from pathlib import Path
from typing import List, Optional, Tuple

from . import require_ephemeris

LOGGER = logging.getLogger(__name__)

DEFAULT_KERNEL = "de421.bsp"
ENV_EPHEM_DIR = "SUNMOON_EPHEMERIS_DIR"


def default_cache_dir() -> Path:
    p = os.environ.get(ENV_EPHEM_DIR, "").strip()
    if p:
        return Path(p).expanduser()
    xdg = os.environ.get("XDG_CACHE_HOME", "").strip()
    return (Path(xdg).expanduser() if xdg else Path.home() / ".cache") / "sunmoon" / "ephemeris"


@dataclass
class SkyfieldReference:
    """
    Sunrise/sunset and lunar phase instants from a JPL kernel via skyfield.

    Requires optional deps:
      pip install "sunmoon[ephemeris]"
    The kernel is downloaded into the cache directory on first use.
    """
    eph: object
    ts: object

    @classmethod
    def load(cls, kernel: str = DEFAULT_KERNEL, cache_dir: Optional[Path] = None) -> "SkyfieldReference":
        require_ephemeris()
        from skyfield.api import Loader

        directory = cache_dir or default_cache_dir()
        directory.mkdir(parents=True, exist_ok=True)
        LOGGER.info("loading %s from %s", kernel, directory)
        load = Loader(str(directory))
        return cls(eph=load(kernel), ts=load.timescale())

    def sunrise_sunset(self, d: date, latitude: float, longitude: float) -> Tuple[Optional[datetime], Optional[datetime]]:
        """
        (sunrise, sunset) in UTC on the UTC date d, or None where the sun
        does not cross the horizon that day.
        """
        from skyfield import almanac
        from skyfield.api import wgs84

        t0 = datetime.combine(d, time(0, 0), tzinfo=timezone.utc)
        t1 = t0 + timedelta(days=1)
        f = almanac.sunrise_sunset(self.eph, wgs84.latlon(latitude, longitude))
        times, states = almanac.find_discrete(self.ts.from_datetime(t0), self.ts.from_datetime(t1), f)

        rise: Optional[datetime] = None
        set_: Optional[datetime] = None
        for t, st in zip(times, states):
            when = t.utc_datetime()
            if int(st) == 1:
                rise = when if rise is None else rise
            else:
                set_ = when if set_ is None else set_
        return rise, set_

    def moon_phases(self, start: datetime, end: datetime) -> List[Tuple[datetime, int]]:
        """(instant UTC, phase 0..3) for every principal phase in [start, end)."""
        from skyfield import almanac

        f = almanac.moon_phases(self.eph)
        times, phases = almanac.find_discrete(self.ts.from_datetime(start), self.ts.from_datetime(end), f)
        return [(t.utc_datetime(), int(p)) for t, p in zip(times, phases)]
