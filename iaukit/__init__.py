"""IERS 2003 fundamental arguments and sexagesimal angle decomposition."""

__version__ = "0.1.0"
