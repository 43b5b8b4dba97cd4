import numpy as np
from enum import Enum
from dataclasses import dataclass
from typing import List


class Color(str, Enum):
    black = 'black'
    gray = 'gray'
    red = 'red'
    green = 'green'
    blue = 'blue'
    cyan = 'cyan'
    magenta = 'magenta'
    yellow = 'yellow'
    purple = 'purple'
    orange = 'orange'


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class PathSegment:
    start: Point
    end: Point
    color: Color


class SimpleTurtle:
    '''
    Pen that starts at the origin facing +x. Headings are in degrees and
    `turn` adds to the current heading.
    '''

    def __init__(self, x: float = 0, y: float = 0, heading: float = 0):
        self.x = x
        self.y = y
        self.heading = heading % 360
        self.pen_color = Color.black
        self.path: List[PathSegment] = []

    def forward(self, units: float):
        start = self.get_position()
        radians = np.deg2rad(self.heading)
        self.x = float(self.x + units * np.cos(radians))
        self.y = float(self.y + units * np.sin(radians))
        self.path.append(PathSegment(start=start, end=self.get_position(), color=self.pen_color))

    def turn(self, degrees: float):
        self.heading = (self.heading + degrees) % 360

    def color(self, color: Color):
        self.pen_color = Color(color)

    def get_position(self) -> Point:
        return Point(self.x, self.y)

    def get_heading(self) -> float:
        return self.heading

    def get_path(self) -> List[PathSegment]:
        return list(self.path)
