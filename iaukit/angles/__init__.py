from .decompose import (
    Sexagesimal,
    decompose_days,
    decompose_radians,
    decompose_radians_hours,
)
from .compose import (
    compose_days,
    compose_radians,
    compose_radians_hours,
)

__all__ = [
    "Sexagesimal",
    "decompose_days",
    "decompose_radians",
    "decompose_radians_hours",
    "compose_days",
    "compose_radians",
    "compose_radians_hours",
]
