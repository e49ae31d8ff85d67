"""Core data types for the Pong simulation."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pong.geometry import Circle, Rect


@dataclass
class Vec2:
    """2D vector for position, speed and direction."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vec2":
        return self.__mul__(scalar)

    def hadamard(self, other: "Vec2") -> "Vec2":
        """Element-wise product."""
        return Vec2(self.x * other.x, self.y * other.y)

    @staticmethod
    def from_angle(radians: float) -> "Vec2":
        """Unit vector at `radians`, 0 pointing along +x."""
        return Vec2(math.cos(radians), math.sin(radians))

    def to_tuple(self) -> tuple[float, float]:
        return self.x, self.y

    def copy(self) -> "Vec2":
        return Vec2(self.x, self.y)


class Side(str, Enum):
    """Half of the field a paddle defends."""
    LEFT = "left"
    RIGHT = "right"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass
class Puck:
    """Puck state. Effective velocity is direction * speed, element-wise."""
    pos: Vec2
    speed: Vec2
    direction: Vec2
    radius: float = 10.0

    @property
    def velocity(self) -> Vec2:
        return self.direction.hadamard(self.speed)

    def to_circle(self) -> Circle:
        return Circle(self.pos.x, self.pos.y, self.radius)

    def copy(self) -> "Puck":
        return Puck(
            pos=self.pos.copy(),
            speed=self.speed.copy(),
            direction=self.direction.copy(),
            radius=self.radius,
        )


@dataclass
class Paddle:
    """Paddle state. `pos` is the top-left corner."""
    pos: Vec2
    size: Vec2
    side: Side
    score: int = 0

    def to_rect(self) -> Rect:
        return Rect(self.pos.x, self.pos.y, self.size.x, self.size.y)


@dataclass(frozen=True)
class Controls:
    """Held movement keys for one frame."""
    left_up: bool = False
    left_down: bool = False
    right_up: bool = False
    right_down: bool = False


@dataclass
class PaddleHitEvent:
    """Puck struck a paddle and was sent off at `angle` degrees."""
    side: Side
    angle: float
    t: float


@dataclass
class WallBounceEvent:
    """Puck bounced off the top or bottom wall."""
    pos: Vec2
    t: float


@dataclass
class GoalEvent:
    """`scorer` got a point; the puck left through the opposite side."""
    scorer: Side
    left_score: int
    right_score: int
    t: float


@dataclass
class WinEvent:
    """A side reached the winning score and the round ended."""
    winner: Side
    t: float


@dataclass
class Match:
    """Current match state. No updates happen while `out` is set."""
    puck: Puck
    left: Paddle
    right: Paddle
    out: bool = True
    win: Optional[Side] = None
    t: float = 0.0

    def paddle(self, side: Side) -> Paddle:
        return self.left if side is Side.LEFT else self.right


@dataclass
class MatchFrame:
    """One sampled frame of a headless run."""
    t: float
    puck_pos: Vec2
    left_score: int
    right_score: int
