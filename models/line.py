from dataclasses import dataclass

from models.angle_mode import AngleSettings
from utils.angles import resolve_slope


@dataclass(frozen=True)
class Line:
    """
    A line in point-slope form:

        y = slope * (x - offset_x) + offset_y

    slope_input keeps the value exactly as typed (gradient, degrees or
    radians) for display; slope is the resolved gradient the solver uses.
    """

    offset_x: float
    offset_y: float
    slope_input: float
    slope: float

    # ------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------
    @classmethod
    def from_input(cls, offset_x, offset_y, slope_input, settings: AngleSettings):
        """Builds a Line, resolving slope_input under the given angle settings."""
        return cls(
            offset_x=offset_x,
            offset_y=offset_y,
            slope_input=slope_input,
            slope=resolve_slope(slope_input, settings),
        )

    # ------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------
    def y_at(self, x):
        return self.slope * (x - self.offset_x) + self.offset_y

    @property
    def is_flat(self) -> bool:
        return self.slope == 0
