from __future__ import annotations

import argparse
from dataclasses import replace
from datetime import date, datetime, timezone, tzinfo
import importlib
import inspect
import logging
import sys
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _zone(name: Optional[str]) -> tzinfo:
    if not name or name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except ZoneInfoNotFoundError as e:
        raise SystemExit(f"unknown time zone: {name}") from e


def _settings(args: argparse.Namespace):
    from sunmoon.core.settings import Settings

    s = Settings.from_env()
    if getattr(args, "round", False):
        s = replace(s, round_to_nearest_minute=True)
    if getattr(args, "fallback", False):
        s = replace(s, return_time_for_no_event_case=True)
    return s


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_sun(argv: list[str]) -> int:
    import sunmoon
    from sunmoon.core.types import NoEventCode, NoEventTime, SunEvent

    p = argparse.ArgumentParser(prog="sunmoon sun", description="Solar events for one date and place.")
    p.add_argument("date", help="YYYY-MM-DD (local date)")
    p.add_argument("--lat", type=float, required=True, help="Latitude in degrees (positive North)")
    p.add_argument("--lon", type=float, required=True, help="Longitude in degrees (positive East)")
    p.add_argument("--tz", default="UTC", help="IANA time zone name (default: UTC)")
    p.add_argument("--round", action="store_true", help="Round to the nearest minute")
    p.add_argument("--fallback", action="store_true", help="Print a fixed time for events that do not occur")
    p.add_argument("--format", default="%H:%M:%S", help="strftime format for instants")
    args = p.parse_args(argv)

    settings = _settings(args)
    d = _parse_ymd(args.date)
    dt = datetime(d.year, d.month, d.day, 12, tzinfo=_zone(args.tz))
    events = sunmoon.day_events(dt, args.lat, args.lon, settings=settings)

    print(f"{d.isoformat()}  lat={args.lat:.4f}  lon={args.lon:.4f}  tz={args.tz}")
    for name, result in events.items():
        text = sunmoon.format_event(result, args.format, settings=settings)
        code = result.code if isinstance(result, NoEventTime) else result
        if isinstance(code, NoEventCode):
            text += f"  ({sunmoon.no_event_label(SunEvent(name), code).value})"
        print(f"  {name:<18} {text}")
    return 0


def cmd_moon_phases(argv: list[str]) -> int:
    import sunmoon

    p = argparse.ArgumentParser(prog="sunmoon moon-phases", description="True lunar phases of a year.")
    p.add_argument("year", type=int)
    p.add_argument("--tz", default="UTC", help="IANA time zone name (default: UTC)")
    p.add_argument("--round", action="store_true", help="Round to the nearest minute")
    p.add_argument("--format", default="%Y-%m-%d %H:%M:%S %Z")
    args = p.parse_args(argv)

    settings = _settings(args)
    for ph in sunmoon.year_moon_phases(args.year, _zone(args.tz), settings=settings):
        label = ph.phase.name.replace("_", " ").lower()
        print(f"{sunmoon.format_event(ph, args.format, settings=settings)}  {label}")
    return 0


def cmd_true_phase(argv: list[str]) -> int:
    from sunmoon.reference import moon_phases as mp
    from sunmoon.reference import time_scales as ts

    p = argparse.ArgumentParser(prog="sunmoon true-phase", description="JDE of a true lunar phase (AA ch. 49).")
    p.add_argument("k", type=int, help="Lunation index (0 = new moon of 2000-01-06)")
    p.add_argument("--phase", type=int, choices=[0, 1, 2, 3], default=0, help="0 new, 1 first quarter, 2 full, 3 last quarter")
    args = p.parse_args(argv)

    jde = mp.true_phase(args.k, args.phase)
    print(f"k = {args.k}  phase = {args.phase}")
    print(f"  JDE mean = {mp.mean_phase(args.k + args.phase / 4.0):.5f}")
    print(f"  JDE true = {jde:.5f}")
    print(f"  UTC      = {ts.jde_to_datetime(jde).isoformat()}")
    return 0


def cmd_solar(argv: list[str]) -> int:
    from sunmoon.reference import earth
    from sunmoon.reference import solar
    from sunmoon.reference import time_scales as ts
    from sunmoon.reference.astro_args import J2000

    p = argparse.ArgumentParser(prog="sunmoon solar", description="Apparent solar position and Earth orientation at a JD.")
    p.add_argument("--jd", type=float, default=J2000, help="Julian Date (default: J2000.0 = 2451545.0)")
    args = p.parse_args(argv)

    T = ts.T_from_jd(args.jd)
    pos = solar.solar_position(T)

    print(f"JD = {args.jd:.6f}")
    print(f"T (Julian centuries from J2000.0) = {T:.12f}")
    print()
    print("Earth orientation (degrees)")
    print(f"  eps0       = {earth.mean_obliquity_of_ecliptic(T):.10f}")
    print(f"  eps        = {pos.eps_true_deg:.10f}")
    print(f"  Delta psi  = {earth.nutation_in_longitude(T) * 3600.0:.4f} arcsec")
    print(f"  Delta eps  = {earth.nutation_in_obliquity(T) * 3600.0:.4f} arcsec")
    print(f"  theta0     = {earth.mean_sidereal_time_greenwich(T) % 360.0:.10f}")
    print(f"  theta      = {earth.apparent_sidereal_time_greenwich(T):.10f}")
    print()
    print("Sun (degrees)")
    print(f"  L0         = {pos.L0_deg:.6f}")
    print(f"  M          = {pos.M_deg:.6f}")
    print(f"  C          = {pos.C_deg:.6f}")
    print(f"  true lon   = {pos.L_true_deg:.6f}")
    print(f"  app lon    = {pos.L_app_deg:.6f}")
    print(f"  RA         = {pos.alpha_deg:.6f}")
    print(f"  Dec        = {pos.delta_deg:.6f}")
    return 0


def cmd_deltat(argv: list[str]) -> int:
    from sunmoon.core.time import decimal_year_mid_month
    from sunmoon.reference import deltat

    p = argparse.ArgumentParser(prog="sunmoon deltat", description="ΔT = TT − UT in seconds.")
    p.add_argument("year", type=int)
    p.add_argument("--month", type=int, default=1, choices=range(1, 13))
    p.add_argument("--method", choices=["best", "em2006", "table"], default="best")
    args = p.parse_args(argv)

    y = decimal_year_mid_month(args.year, args.month)
    print(f"y = {y:.4f}  ΔT = {deltat.delta_t_seconds(y, method=args.method):.2f} s")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="sunmoon", description="Sun and moon event times (Meeus).")
    p.add_argument("-v", "--verbose", action="count", default=0, help="More logging (repeatable)")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("sun", help="Sunrise, sunset, twilight and solar noon for a date")
    sub.add_parser("moon-phases", help="True lunar phases of a year")
    sub.add_parser("true-phase", help="JDE of one true lunar phase")
    sub.add_parser("solar", help="Apparent solar position and Earth orientation at a JD")
    sub.add_parser("deltat", help="ΔT for a year and month")
    sub.add_parser("validate-ref", help="Compare against a JPL ephemeris (needs extras)")

    args, rest = p.parse_known_args(argv)

    level = logging.WARNING if args.verbose == 0 else (logging.INFO if args.verbose == 1 else logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "sun":
        return cmd_sun(rest)

    if args.cmd == "moon-phases":
        return cmd_moon_phases(rest)

    if args.cmd == "true-phase":
        return cmd_true_phase(rest)

    if args.cmd == "solar":
        return cmd_solar(rest)

    if args.cmd == "deltat":
        return cmd_deltat(rest)

    if args.cmd == "validate-ref":
        return _run_module_main("sunmoon.diagnostics.validate_reference", rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
