from .format import (
    days_to_hms,
    format_angle,
    format_sexagesimal,
    rad_to_arcsec,
    rad_to_deg,
    rad_to_dms,
    rad_to_hms,
)

__all__ = [
    "days_to_hms",
    "format_angle",
    "format_sexagesimal",
    "rad_to_arcsec",
    "rad_to_deg",
    "rad_to_dms",
    "rad_to_hms",
]
