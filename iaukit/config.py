from pathlib import Path
from typing import TYPE_CHECKING

from iaukit.errors import ConfigError

if TYPE_CHECKING:
    import tomli as tomllib
else:
    try:
        import tomllib
    except ModuleNotFoundError:  # Python < 3.11
        import tomli as tomllib

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "iaukit" / "config.toml"

ANGLE_STYLES = ("rad", "deg", "arcsec", "hms", "dms")
LOG_LEVELS = ("debug", "info", "warn", "error")


class Config:
    def __init__(self, data: dict):
        self._data = data

    @property
    def format_ndp(self) -> int:
        ndp = self._data.get("format", {}).get("ndp", 2)
        if isinstance(ndp, bool) or not isinstance(ndp, int):
            raise ConfigError(f"format.ndp must be an integer, got {ndp!r}")
        return ndp

    @property
    def format_style(self) -> str:
        style = self._data.get("format", {}).get("style", "rad")
        if style not in ANGLE_STYLES:
            raise ConfigError(
                f"format.style must be one of {', '.join(ANGLE_STYLES)}, got {style!r}"
            )
        return style

    @property
    def format_separator(self) -> str:
        return str(self._data.get("format", {}).get("separator", ":"))

    @property
    def log_level(self) -> str | None:
        level = self._data.get("logging", {}).get("level", None)
        if level is not None and level not in LOG_LEVELS:
            raise ConfigError(
                f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
            )
        return level

    def validate(self) -> None:
        """Touch every property so invalid values surface at load time."""
        self.format_ndp
        self.format_style
        self.format_separator
        self.log_level


def load_config(path: Path | None = None) -> Config:
    explicit_path = path
    path = path or DEFAULT_CONFIG_PATH

    if not path.exists():
        if explicit_path is not None:
            raise FileNotFoundError(f"Config file not found: {path}")
        # Return default config if default file missing
        return Config({})

    with open(path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    config = Config(data)
    config.validate()
    return config
