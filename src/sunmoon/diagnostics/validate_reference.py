#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional

from sunmoon import api
from sunmoon.core.types import MoonPhaseNumber
from sunmoon.ephemeris.skyfield_ref import DEFAULT_KERNEL, SkyfieldReference

LOGGER = logging.getLogger(__name__)


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "sunmoon[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "sunmoon[diagnostics]"') from e


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _summary(np, name: str, residuals) -> None:
    if len(residuals) == 0:
        print(f"{name:<10} no samples")
        return
    r = np.asarray(residuals, dtype=float)
    print(
        f"{name:<10} n={len(r):5d}  mean={r.mean():+8.2f}s  std={r.std():7.2f}s  "
        f"max|.|={np.abs(r).max():7.2f}s"
    )


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate sunrise/sunset and lunar phases against a JPL ephemeris (skyfield).")
    p.add_argument("--start", default="2000-01-01", help="YYYY-MM-DD")
    p.add_argument("--end", default="2030-01-01", help="YYYY-MM-DD")
    p.add_argument("--lat", type=float, default=51.4769, help="Observer latitude in degrees")
    p.add_argument("--lon", type=float, default=0.0, help="Observer longitude in degrees (positive East)")
    p.add_argument("--step-days", type=int, default=7)
    p.add_argument("--kernel", default=DEFAULT_KERNEL)
    p.add_argument("--out-png", default="reference_validation.png")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    start = _parse_ymd(args.start)
    end = _parse_ymd(args.end)
    if end <= start:
        raise ValueError("--end must be after --start")

    print(f"Loading {args.kernel} ...")
    ref = SkyfieldReference.load(args.kernel)

    # 1. Sunrise / sunset on a date grid
    years_rise, err_rise = [], []
    years_set, err_set = [], []
    d = start
    while d < end:
        ref_rise, ref_set = ref.sunrise_sunset(d, args.lat, args.lon)
        ours_rise = api.sunrise(d, args.lat, args.lon)
        ours_set = api.sunset(d, args.lat, args.lon)
        y = d.year + (d.timetuple().tm_yday - 0.5) / 365.25
        if ref_rise is not None and isinstance(ours_rise, datetime):
            years_rise.append(y)
            err_rise.append((ours_rise - ref_rise).total_seconds())
        if ref_set is not None and isinstance(ours_set, datetime):
            years_set.append(y)
            err_set.append((ours_set - ref_set).total_seconds())
        d += timedelta(days=args.step_days)
    LOGGER.info("compared %d sunrises and %d sunsets", len(err_rise), len(err_set))

    # 2. Lunar phases, paired by phase number and nearest instant
    t0 = datetime(start.year, start.month, start.day, tzinfo=timezone.utc)
    t1 = datetime(end.year, end.month, end.day, tzinfo=timezone.utc)
    ours = api.moon_phases(t0, t1)
    theirs = ref.moon_phases(t0, t1)
    years_phase, err_phase, phase_of = [], [], []
    for ph in ours:
        candidates = [t for t, n in theirs if n == int(ph.phase)]
        if not candidates:
            continue
        nearest = min(candidates, key=lambda t: abs((t - ph.datetime).total_seconds()))
        diff = (ph.datetime - nearest).total_seconds()
        if abs(diff) > 86400.0:
            LOGGER.warning("unmatched %s at %s", ph.phase.name, ph.datetime)
            continue
        years_phase.append(ph.datetime.year + (ph.datetime.timetuple().tm_yday - 0.5) / 365.25)
        err_phase.append(diff)
        phase_of.append(int(ph.phase))

    print("Residuals (this package - ephemeris):")
    _summary(np, "sunrise", err_rise)
    _summary(np, "sunset", err_set)
    _summary(np, "phases", err_phase)

    # 3. Plotting
    fig, axs = plt.subplots(2, 1, figsize=(12, 8), sharex=True)

    axs[0].scatter(years_rise, err_rise, s=2, alpha=0.5, color="orange", label="sunrise")
    axs[0].scatter(years_set, err_set, s=2, alpha=0.5, color="purple", label="sunset")
    axs[0].set_title(f"Sunrise/Sunset Error at ({args.lat:.3f}, {args.lon:.3f})")
    axs[0].set_ylabel("Error (s)")
    axs[0].legend(loc="upper right")
    axs[0].grid(True, alpha=0.3)

    phase_arr = np.asarray(phase_of, dtype=int)
    yrs = np.asarray(years_phase, dtype=float)
    errs = np.asarray(err_phase, dtype=float)
    for n in MoonPhaseNumber:
        mask = phase_arr == int(n)
        axs[1].scatter(yrs[mask], errs[mask], s=3, alpha=0.6, label=n.name.replace("_", " ").lower())
    axs[1].set_title("Lunar Phase Error")
    axs[1].set_ylabel("Error (s)")
    axs[1].set_xlabel("Year")
    axs[1].legend(loc="upper right")
    axs[1].grid(True, alpha=0.3)

    plt.suptitle(f"Meeus models vs {args.kernel} ({start} to {end})", fontsize=14)
    plt.tight_layout()
    plt.savefig(args.out_png, dpi=200)
    print(f"Validation complete. Plot saved to {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
