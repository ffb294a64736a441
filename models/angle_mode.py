from dataclasses import dataclass
from enum import Enum

from models.errors import UsageError


class AngleMode(Enum):
    """How the slope tokens m1/m2 are interpreted."""

    GRADIENT = "gradient"
    DEGREES = "degrees"
    RADIANS = "radians"


@dataclass(frozen=True)
class AngleSettings:
    """
    Per-run slope interpretation, selected once from the command line.

    subtract_right_angle only makes sense for angle input; combining it
    with GRADIENT is rejected here so no later stage has to re-check it.
    """

    mode: AngleMode = AngleMode.GRADIENT
    subtract_right_angle: bool = False

    def __post_init__(self):
        if self.mode is AngleMode.GRADIENT and self.subtract_right_angle:
            raise UsageError("--subtract90 requires --radians or --degrees")

    @property
    def is_angle(self) -> bool:
        return self.mode is not AngleMode.GRADIENT
