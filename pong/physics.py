"""Puck and paddle physics: integration, wall bounce, paddle clamping, reflection angle.

Screen dimensions are always passed in so everything here stays pure and
testable without a window.
"""

import math

from pong.geometry import Circle, Rect
from pong.types import Paddle, Puck, Side, Vec2
from pong import arena


def create_puck(width: float, height: float) -> Puck:
    """Fresh puck at the centre of the field, heading left."""
    return Puck(
        pos=Vec2(width / 2.0, height / 2.0),
        speed=Vec2(arena.PUCK_SPEED, arena.PUCK_SPEED),
        direction=Vec2.from_angle(math.radians(arena.PUCK_START_ANGLE)),
        radius=arena.PUCK_RADIUS,
    )


def reset_puck(width: float, height: float) -> Puck:
    """Replacement puck after a goal. Same as a newly created one."""
    return create_puck(width, height)


def set_reflection_angle(puck: Puck, angle: float, side: Side) -> float:
    """Point the puck away from the paddle on `side`.

    `angle` comes from `reflection_angle`. Paddles face opposite ways, so the
    left one maps it to 90 - angle and the right one to angle + 90. Returns
    the final direction angle in degrees.
    """
    if side is Side.LEFT:
        final = 90.0 - angle
    else:
        final = angle + 90.0
    puck.direction = Vec2.from_angle(math.radians(final))
    return final


def update_puck(puck: Puck, dt: float, height: float) -> bool:
    """Advance the puck by `dt` seconds and bounce it off the top/bottom walls.

    Only speed.y flips; side walls are goals. Returns True if it bounced.
    """
    puck.pos = puck.pos + puck.velocity * dt

    top = puck.radius
    bottom = height - puck.radius
    vy = puck.velocity.y

    if puck.pos.y < top:
        puck.pos.y = top
        if vy < 0:
            puck.speed.y = -puck.speed.y
            return True
    elif puck.pos.y > bottom:
        puck.pos.y = bottom
        if vy > 0:
            puck.speed.y = -puck.speed.y
            return True
    return False


def create_paddle(side: Side, offset: float, width: float, height: float) -> Paddle:
    """Paddle vertically centred, `offset` pixels in from its own side wall."""
    size = Vec2(arena.PADDLE_WIDTH, arena.PADDLE_HEIGHT)
    if side is Side.LEFT:
        x = offset
    else:
        x = width - size.x - offset
    return Paddle(
        pos=Vec2(x, height / 2.0 - size.y / 2.0),
        size=size,
        side=side,
        score=0,
    )


def move_up(paddle: Paddle, dt: float) -> None:
    # Clamping is left to update_paddle
    paddle.pos.y -= arena.PADDLE_SPEED * dt


def move_down(paddle: Paddle, dt: float) -> None:
    paddle.pos.y += arena.PADDLE_SPEED * dt


def update_paddle(paddle: Paddle, height: float) -> None:
    """Keep the paddle inside the playfield."""
    lowest = height - paddle.size.y
    paddle.pos.y = min(max(paddle.pos.y, 0.0), lowest)


def raw_reflection_angle(circle: Circle, rect: Rect) -> float:
    """Unclamped departure angle: 180 at the paddle's top edge, 0 at its bottom."""
    offset = circle.y - rect.y
    return 180.0 - (offset / rect.height) * 180.0


def reflection_angle(circle: Circle, rect: Rect) -> float:
    """Departure angle in degrees for a puck hitting a paddle.

    Depends only on where along the paddle's height the puck centre sits.
    Clamped to [20, 160] so the puck never leaves almost flat or almost
    vertical.
    """
    angle = raw_reflection_angle(circle, rect)
    return min(max(angle, arena.MIN_REFLECTION_ANGLE), arena.MAX_REFLECTION_ANGLE)
