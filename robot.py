"""
Value types for a single robot: where it stands and what it has been told to do
"""
from dataclasses import dataclass, replace

from utils import Bearing


# A robot that has driven off the grid keeps an out-of-bounds Position; there is
# no separate alive/lost flag. The simulation steps it back one cell to report it.
@dataclass(frozen=True)
class Position:
    x: int
    y: int
    bearing: Bearing

    def with_bearing(self, bearing: Bearing) -> 'Position':
        return replace(self, bearing=bearing)

    def describe(self) -> str:
        return f"{self.x} {self.y} {self.bearing}"


@dataclass(frozen=True)
class Script:
    start: Position
    instructions: str
