from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    if not _DATE_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    try:
        return date(y, m, d)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


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


def _fmt_seconds(secs: float) -> str:
    sign = "-" if secs < 0 else "+"
    m, s = divmod(abs(secs), 60.0)
    return f"{sign}{int(m)}m {s:05.2f}s"


def cmd_event(argv: list[str], *, rise: bool) -> int:
    import soltime
    from soltime.core.types import Twilight

    kind = "sunrise" if rise else "sunset"
    p = argparse.ArgumentParser(prog=f"soltime {kind}", description=f"Calculate the {kind} at a location (UTC).")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    p.add_argument("--lat", type=float, required=True, help="Observer latitude in degrees (positive North)")
    p.add_argument("--lon", type=float, required=True, help="Observer longitude in degrees (positive East)")
    p.add_argument("--alt", type=int, default=0, help="Observer altitude in metres (default 0)")
    p.add_argument("--calculator", choices=soltime.list_calculators(), default="NOAA")
    p.add_argument("--twilight", choices=[t.name.lower() for t in Twilight], help="Twilight instead of sunrise/sunset")
    args = p.parse_args(argv)

    st = soltime.SolarTime.of_location(args.lat, args.lon, altitude=args.alt, calculator=args.calculator)
    twilight = Twilight[args.twilight.upper()] if args.twilight else None
    event = st.sunrise(args.date, twilight) if rise else st.sunset(args.date, twilight)

    if event is None:
        if st.is_polar_night(args.date):
            print(f"No {kind} on {args.date.isoformat()}: polar night")
        elif st.is_midnight_sun(args.date):
            print(f"No {kind} on {args.date.isoformat()}: midnight sun")
        else:
            print(f"No {kind} on {args.date.isoformat()}")
        return 0

    print(f"{event.instant.isoformat()}  (calculator={args.calculator}, precision={event.precision.name}, scale={event.scale.name})")
    return 0


def cmd_features(argv: list[str]) -> int:
    import soltime
    from soltime.core import types as t

    p = argparse.ArgumentParser(prog="soltime features", description="Print the solar features of a calculator at a given JD(TT).")
    p.add_argument("--jd-tt", type=float, default=2451545.0, help="Julian Date in TT (default: J2000.0 = 2451545.0)")
    p.add_argument("--calculator", choices=soltime.list_calculators(), default="TIME4J")
    args = p.parse_args(argv)

    calc = soltime.get_calculator(args.calculator)
    jde = float(args.jd_tt)

    print(f"JD_TT = {jde:.6f}")
    print(f"Calculator = {args.calculator}")
    print()
    print("Features (degrees, nan = not supported)")
    for name in (
        t.DECLINATION, t.RIGHT_ASCENSION, t.NUTATION, t.OBLIQUITY,
        t.MEAN_ANOMALY, t.SOLAR_LONGITUDE, t.SOLAR_LATITUDE,
    ):
        print(f"  {name:<16} = {calc.get_feature(jde, name):.10f}")
    print()
    print(f"Equation of time = {_fmt_seconds(calc.equation_of_time(jde))}")
    return 0


def cmd_eot(argv: list[str]) -> int:
    import soltime

    p = argparse.ArgumentParser(prog="soltime eot", description="Equation of time of every calculator at a given JD(TT).")
    p.add_argument("--jd-tt", type=float, default=2451545.0, help="Julian Date in TT (default: J2000.0 = 2451545.0)")
    args = p.parse_args(argv)

    jde = float(args.jd_tt)
    print(f"JD_TT = {jde:.6f}")
    print()
    print("Equation of time (apparent - mean)")
    for name in soltime.list_calculators():
        eot = soltime.get_calculator(name).equation_of_time(jde)
        print(f"  {name:<8} {eot:10.2f} s   {_fmt_seconds(eot)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="soltime", description="Sunrise, sunset and solar time toolkit CLI.")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for library diagnostics (default WARNING)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    # events
    sub.add_parser("sunrise", help="Calculate the sunrise at a location")
    sub.add_parser("sunset", help="Calculate the sunset at a location")

    # astronomy tools
    sub.add_parser("features", help="Print solar features of a calculator at a given JD(TT).")
    sub.add_parser("eot", help="Compare the equation of time across calculators at a given JD(TT).")

    # diagnostics
    p_diag = sub.add_parser("diag", help="Diagnostics tools (plots need the diagnostics extra)")
    p_diag.add_argument("tool", choices=["compare-eot"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "sunrise":
        return cmd_event(rest, rise=True)

    if args.cmd == "sunset":
        return cmd_event(rest, rise=False)

    if args.cmd == "features":
        return cmd_features(rest)

    if args.cmd == "eot":
        return cmd_eot(rest)

    if args.cmd == "diag":
        tool_map = {
            "compare-eot": "soltime.diagnostics.compare_eot",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
