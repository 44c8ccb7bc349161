from __future__ import annotations

"""
sunmoon.reference.deltat

ΔT (= TT − UT) in seconds.

- By default, the Espenak–Meeus (NASA) piecewise polynomials used in eclipse work
  (valid across roughly −1999..+3000), evaluated at y = year + (month − 0.5)/12.
- Optionally, a user-supplied piecewise-linear table (e.g. derived from IERS
  UT1−UTC and the leap-second list) takes precedence inside its range.

Table search order:
  1) SUNMOON_DELTAT_TABLE environment variable (path to CSV)
  2) user cache ($XDG_CACHE_HOME/sunmoon/deltat.csv or ~/.cache/sunmoon/deltat.csv)

Expected CSV columns:
  decimal_year, ..., delta_t_seconds
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple

import csv
import datetime as _dt
import logging
import os

from ..core.errors import DeltaTTableError
from ..core.time import decimal_year_mid_month

LOGGER = logging.getLogger(__name__)

ENV_TABLE = "SUNMOON_DELTAT_TABLE"


# ---------------------------------------------------------------------------
# Table model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DeltaTTable:
    """
    Piecewise-linear ΔT table over decimal-year coordinate.
    """
    x: Tuple[float, ...]   # decimal years (strictly increasing)
    y: Tuple[float, ...]   # ΔT in seconds

    def __len__(self) -> int:
        return len(self.x)

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        return iter(zip(self.x, self.y))

    def eval(self, xq: float) -> float:
        if not (self.x[0] <= xq <= self.x[-1]):
            raise ValueError(f"x out of range [{self.x[0]}, {self.x[-1]}]: {xq}")
        # binary search
        lo, hi = 0, len(self.x) - 1
        while hi - lo > 1:
            mid = (lo + hi) // 2
            if self.x[mid] <= xq:
                lo = mid
            else:
                hi = mid
        x0, x1 = self.x[lo], self.x[hi]
        y0, y1 = self.y[lo], self.y[hi]
        if x1 == x0:
            return y0
        t = (xq - x0) / (x1 - x0)
        return y0 + t * (y1 - y0)

    @property
    def range(self) -> Tuple[float, float]:
        return (self.x[0], self.x[-1])


def _read_csv_xy(rows: Iterable[dict], *, xcol: str, ycol: str) -> DeltaTTable:
    xs: list[float] = []
    ys: list[float] = []
    try:
        for r in rows:
            xs.append(float(r[xcol]))
            ys.append(float(r[ycol]))
    except (KeyError, TypeError, ValueError) as e:
        raise DeltaTTableError(f"ΔT table needs numeric '{xcol}' and '{ycol}' columns") from e
    if len(xs) < 2:
        raise DeltaTTableError("ΔT table needs at least two rows")
    # ensure strict monotonicity
    for i in range(1, len(xs)):
        if not (xs[i] > xs[i - 1]):
            raise DeltaTTableError("ΔT table x is not strictly increasing")
    return DeltaTTable(tuple(xs), tuple(ys))


def read_table(path: Path) -> DeltaTTable:
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        return _read_csv_xy(reader, xcol="decimal_year", ycol="delta_t_seconds")


def table_candidates() -> list[Path]:
    out: list[Path] = []
    p = os.environ.get(ENV_TABLE, "").strip()
    if p:
        out.append(Path(p).expanduser())
    xdg = os.environ.get("XDG_CACHE_HOME", "").strip()
    cache_dir = (Path(xdg).expanduser() / "sunmoon") if xdg else (Path.home() / ".cache" / "sunmoon")
    out.append(cache_dir / "deltat.csv")
    return out


@lru_cache(maxsize=1)
def load_table() -> Optional[DeltaTTable]:
    """
    First readable table among table_candidates(), or None.
    Unreadable candidates are logged and skipped.
    """
    for path in table_candidates():
        if not path.is_file():
            continue
        try:
            tbl = read_table(path)
        except (OSError, DeltaTTableError) as e:
            LOGGER.warning("ignoring ΔT table %s: %s", path, e)
            continue
        LOGGER.info("using ΔT table %s covering %.3f..%.3f", path, *tbl.range)
        return tbl
    return None


# ---------------------------------------------------------------------------
# Espenak–Meeus (NASA) piecewise polynomial
# ---------------------------------------------------------------------------

def _poly(u: float, coeffs: Tuple[float, ...]) -> float:
    """Horner evaluation for Σ coeffs[k] u^k."""
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * u + c
    return acc


def delta_t_em2006(y: float) -> float:
    """
    Espenak–Meeus piecewise polynomial ΔT(y) in seconds.

    y is the decimal year (usually y = year + (month-0.5)/12).
    The branch polynomials match those published by NASA for the Five Millennium Canon.
    """
    if y < -500.0:
        u = (y - 1820.0) / 100.0
        dt = -20.0 + 32.0 * u * u
    elif y < 500.0:
        u = y / 100.0
        dt = _poly(u, (
            10583.6,
            -1014.41,
            33.78311,
            -5.952053,
            -0.1798452,
            0.022174192,
            0.0090316521,
        ))
    elif y < 1600.0:
        u = (y - 1000.0) / 100.0
        dt = _poly(u, (
            1574.2,
            -556.01,
            71.23472,
            0.319781,
            -0.8503463,
            -0.005050998,
            0.0083572073,
        ))
    elif y < 1700.0:
        t = y - 1600.0
        dt = 120.0 - 0.9808 * t - 0.01532 * t * t + (t ** 3) / 7129.0
    elif y < 1800.0:
        t = y - 1700.0
        dt = 8.83 + 0.1603 * t - 0.0059285 * t * t + 0.00013336 * (t ** 3) - (t ** 4) / 1174000.0
    elif y < 1860.0:
        t = y - 1800.0
        dt = _poly(t, (
            13.72,
            -0.332447,
            0.0068612,
            0.0041116,
            -0.00037436,
            0.0000121272,
            -0.0000001699,
            0.000000000875,
        ))
    elif y < 1900.0:
        t = y - 1860.0
        dt = 7.62 + 0.5737 * t - 0.251754 * (t ** 2) + 0.01680668 * (t ** 3) - 0.0004473624 * (t ** 4) + (t ** 5) / 233174.0
    elif y < 1920.0:
        t = y - 1900.0
        dt = -2.79 + 1.494119 * t - 0.0598939 * (t ** 2) + 0.0061966 * (t ** 3) - 0.000197 * (t ** 4)
    elif y < 1941.0:
        t = y - 1920.0
        dt = 21.20 + 0.84493 * t - 0.076100 * (t ** 2) + 0.0020936 * (t ** 3)
    elif y < 1961.0:
        t = y - 1950.0
        dt = 29.07 + 0.407 * t - (t ** 2) / 233.0 + (t ** 3) / 2547.0
    elif y < 1986.0:
        t = y - 1975.0
        dt = 45.45 + 1.067 * t - (t ** 2) / 260.0 - (t ** 3) / 718.0
    elif y < 2005.0:
        t = y - 2000.0
        dt = _poly(t, (
            63.86,
            0.3345,
            -0.060374,
            0.0017275,
            0.000651814,
            0.00002373599,
        ))
    elif y < 2050.0:
        t = y - 2000.0
        dt = 62.92 + 0.32217 * t + 0.005589 * (t ** 2)
    elif y < 2150.0:
        u = (y - 1820.0) / 100.0
        dt = -20.0 + 32.0 * u * u - 0.5628 * (2150.0 - y)
    else:
        u = (y - 1820.0) / 100.0
        dt = -20.0 + 32.0 * u * u

    return float(dt)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def delta_t_seconds(y: float, *, method: str = "best") -> float:
    """
    ΔT(y) in seconds, where y is a decimal year.

    method:
      - "best":   user table when one is installed and y is in range, else polynomial.
      - "table":  require the table and require in-range.
      - "em2006": polynomial only (Espenak–Meeus / NASA).
    """
    method = method.lower().strip()
    if method not in {"best", "table", "em2006"}:
        raise ValueError("method must be one of: best, table, em2006")

    if method == "em2006":
        return delta_t_em2006(y)

    tbl = load_table()
    if tbl is None:
        if method == "table":
            raise DeltaTTableError(f"No ΔT table installed. Set {ENV_TABLE} to a CSV file.")
        return delta_t_em2006(y)

    a, b = tbl.range
    if a <= y <= b:
        return tbl.eval(y)
    if method == "table":
        raise ValueError(f"y={y} out of ΔT table range [{a},{b}]")
    return delta_t_em2006(y)


def delta_t_for_datetime(dt: _dt.date, *, method: str = "best") -> float:
    """ΔT for the calendar month of a date or datetime (UTC calendar)."""
    return delta_t_seconds(decimal_year_mid_month(dt.year, dt.month), method=method)
