"""Tests for the circle/rectangle overlap test."""

from pong.geometry import Circle, Rect


PADDLE = Rect(10.0, 0.0, 10.0, 50.0)


def test_circle_inside_rect():
    """Centre inside the rectangle → overlap (nearest point is the centre)."""
    circle = Circle(15.0, 25.0, 10.0)
    assert circle.nearest_point(PADDLE) == (15.0, 25.0)
    assert circle.overlaps(PADDLE)


def test_touching_edge_counts():
    """Nearest point exactly `radius` away → overlap."""
    assert Circle(30.0, 25.0, 10.0).overlaps(PADDLE)
    assert Circle(0.0, 25.0, 10.0).overlaps(PADDLE)
    assert Circle(15.0, 60.0, 10.0).overlaps(PADDLE)


def test_just_beyond_radius():
    """Nearest point at radius + ε → no overlap."""
    assert not Circle(30.0 + 1e-6, 25.0, 10.0).overlaps(PADDLE)
    assert not Circle(15.0, -10.0 - 1e-6, 10.0).overlaps(PADDLE)


def test_corner_distance():
    """Diagonal to a corner uses Euclidean distance, not per-axis checks."""
    square = Rect(0.0, 0.0, 10.0, 10.0)
    # (6, 8) from the corner → distance 10
    assert Circle(16.0, 18.0, 10.0).overlaps(square)
    assert not Circle(16.0, 18.5, 10.0).overlaps(square)


def test_far_away():
    """Circle well clear of the rectangle → no overlap."""
    assert not Circle(256.0, 160.0, 10.0).overlaps(PADDLE)


def test_rect_edges():
    """right/bottom derive from origin and size."""
    assert PADDLE.right == 20.0
    assert PADDLE.bottom == 50.0
