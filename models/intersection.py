from dataclasses import dataclass


@dataclass(frozen=True)
class IntersectionResult:
    """Point where two lines cross."""

    x: float
    y: float

    def as_tuple(self):
        return self.x, self.y
