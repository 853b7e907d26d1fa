import datetime
import json
import logging
import sys
from pathlib import Path

from iaukit import __version__
from iaukit.angles import decompose_days, decompose_radians, decompose_radians_hours
from iaukit.config import Config, load_config
from iaukit.errors import IaukitError
from iaukit.fundarg import evaluate_all, get_argument, julian_centuries, list_arguments
from iaukit.util.format import format_angle, format_sexagesimal

logger = logging.getLogger(__name__)


def _json_envelope(command: str, ok: bool, data=None, error=None) -> dict:
    return {
        "ok": ok,
        "command": command,
        "timestamp_utc": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        "data": data,
        "error": error,
    }


def _init_logging(level: str | None) -> None:
    if not level:
        return
    level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warn": logging.WARNING,
        "error": logging.ERROR,
    }
    logging.basicConfig(level=level_map.get(level, logging.INFO))


def _handle_error(command: str, args, exc: Exception) -> int:
    if args is not None and getattr(args, "json", False):
        payload = _json_envelope(
            command=command,
            ok=False,
            data=None,
            error={
                "code": type(exc).__name__,
                "message": str(exc),
                "details": None,
            },
        )
        print(json.dumps(payload, indent=2))
    else:
        print(str(exc), file=sys.stderr)
    return 2


def _config_path_from_args(args) -> Path | None:
    if args is None:
        return None
    path = getattr(args, "config", None)
    return Path(path) if path else None


def _setup(args) -> Config:
    config = load_config(_config_path_from_args(args))
    _init_logging(getattr(args, "log_level", None) or config.log_level)
    return config


def _parse_datetime_arg(value: str | None) -> datetime.datetime | None:
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    dt = datetime.datetime.fromisoformat(value)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=datetime.timezone.utc)
    return dt


def _centuries_from_date(dt: datetime.datetime) -> float:
    from astropy.time import Time

    tt = Time(dt.astimezone(datetime.timezone.utc).replace(tzinfo=None), scale="utc").tt
    logger.debug("UTC %s -> TT JD %.9f", dt.isoformat(), tt.jd1 + tt.jd2)
    return julian_centuries(tt.jd1, tt.jd2)


def _epochs_from_args(args) -> list[float]:
    if getattr(args, "t", None):
        return list(args.t)
    if getattr(args, "jd", None) is not None:
        return [julian_centuries(args.jd)]
    dt = _parse_datetime_arg(getattr(args, "date", None))
    if dt is not None:
        return [_centuries_from_date(dt)]
    raise ValueError("One of --t, --jd or --date is required")


def run_args(args) -> int:
    try:
        config = _setup(args)
        style = args.style or config.format_style
        ndp = args.ndp if args.ndp is not None else config.format_ndp
        sep = config.format_separator
        names = args.names or list_arguments()
        arguments = [get_argument(name) for name in names]
        epochs = _epochs_from_args(args)
    except (ValueError, IaukitError) as e:
        return _handle_error("args", args, e)

    if len(epochs) == 1:
        values = {name: [v] for name, v in evaluate_all(epochs[0], names).items()}
    else:
        values = {arg.name: arg.evaluate_array(epochs).tolist() for arg in arguments}

    if getattr(args, "json", False):
        data = {
            "t": epochs,
            "arguments": {
                arg.name: {"symbol": arg.symbol, "radians": values[arg.name]}
                for arg in arguments
            },
        }
        print(json.dumps(_json_envelope("args", True, data=data), indent=2))
        return 0

    for idx, t in enumerate(epochs):
        if idx:
            print()
        print(f"t = {t:.12f} Julian centuries (TDB) since J2000.0")
        for arg in arguments:
            text = format_angle(values[arg.name][idx], style=style, ndp=ndp, sep=sep)
            print(f"  {arg.name:24} {arg.symbol:5} {text}")
    return 0


def _run_decompose(command: str, args, decompose, labels: tuple[str, str, str]) -> int:
    try:
        config = _setup(args)
        ndp = args.ndp if args.ndp is not None else config.format_ndp
        parts = decompose(ndp, args.value)
    except (ValueError, IaukitError) as e:
        return _handle_error(command, args, e)

    if getattr(args, "json", False):
        data = {"ndp": ndp, "input": args.value, **parts._asdict()}
        print(json.dumps(_json_envelope(command, True, data=data), indent=2))
        return 0

    print(format_sexagesimal(parts, ndp=ndp, sep=config.format_separator, signed=True))
    units, minutes, seconds = labels
    print(
        f"  sign {parts.sign}  {units} {parts.units}  {minutes} {parts.minutes}  "
        f"{seconds} {parts.seconds}  fraction {parts.fraction}"
    )
    return 0


def run_days(args) -> int:
    return _run_decompose("days", args, decompose_days, ("hours", "minutes", "seconds"))


def run_hms(args) -> int:
    return _run_decompose(
        "hms", args, decompose_radians_hours, ("hours", "minutes", "seconds")
    )


def run_dms(args) -> int:
    return _run_decompose(
        "dms", args, decompose_radians, ("degrees", "arcmin", "arcsec")
    )


def run_doctor(args=None) -> int:
    _init_logging(getattr(args, "log_level", None))

    def check_config():
        try:
            load_config(_config_path_from_args(args))
            return {"ok": True, "detail": "loaded (defaults applied if missing)"}
        except Exception as e:
            return {"ok": False, "detail": f"invalid config: {e}"}

    def check_numpy():
        try:
            import numpy
        except ImportError:
            return {"ok": False, "detail": "not installed"}
        return {"ok": True, "detail": numpy.__version__}

    def check_astropy():
        try:
            import astropy
        except ImportError:
            return {"ok": False, "detail": "not installed (needed for --date)"}
        return {"ok": True, "detail": astropy.__version__}

    checks = {
        "config": check_config(),
        "numpy": check_numpy(),
        "astropy": check_astropy(),
    }

    ok = all(c["ok"] for c in checks.values())

    if args is not None and getattr(args, "json", False):
        payload = _json_envelope(
            command="doctor",
            ok=ok,
            data={"version": __version__, "checks": checks},
            error=None
            if ok
            else {
                "code": "doctor_failed",
                "message": "one or more checks failed",
                "details": None,
            },
        )
        print(json.dumps(payload, indent=2))
    else:
        print("iaukit Doctor Report")
        print("====================")

        for name, result in checks.items():
            status = "OK" if result["ok"] else "MISSING"
            print(f"{name:20} : {status} ({result['detail']})")

        if ok:
            print("\nSystem ready.")
        else:
            print("\nSome components are missing or not configured.")

    return 0 if ok else 1
