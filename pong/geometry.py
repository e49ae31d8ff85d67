"""Collision shapes derived from the puck and paddles each frame."""

from dataclasses import dataclass


@dataclass
class Rect:
    """Axis-aligned rectangle, origin at the top-left corner."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass
class Circle:
    """Circle given by its centre and radius."""
    x: float
    y: float
    radius: float

    def nearest_point(self, rect: Rect) -> tuple[float, float]:
        """Closest point of `rect` to the circle centre (the centre itself if inside)."""
        px = min(max(self.x, rect.x), rect.right)
        py = min(max(self.y, rect.y), rect.bottom)
        return px, py

    def overlaps(self, rect: Rect) -> bool:
        """Circle-vs-rectangle test. Touching (distance == radius) counts."""
        px, py = self.nearest_point(rect)
        dx = self.x - px
        dy = self.y - py
        return dx * dx + dy * dy <= self.radius * self.radius
