class IaukitError(Exception):
    """Base exception for iaukit errors."""


class AngleError(IaukitError, ValueError):
    """Raised when an angle cannot be decomposed or composed."""


class FieldRangeError(AngleError):
    """Raised when a sexagesimal field lies outside its conventional range."""


class UnknownArgumentError(IaukitError, KeyError):
    """Raised for a fundamental argument name that is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its message; keep it readable on the CLI.
        return str(self.args[0]) if self.args else ""


class ConfigError(IaukitError):
    """Raised for invalid configuration values."""
