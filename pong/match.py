"""Match lifecycle and the per-frame game step.

States:
- Idle:      out=True, win=None (before the first round)
- Playing:   out=False
- RoundOver: out=True, win=<side>

Restarting from Idle or RoundOver always builds a brand new match, so both
scores go back to 0. The frame loop swaps the new value in once it exists.
"""

import random
from typing import Callable, Optional

from pong.types import (
    Controls,
    GoalEvent,
    Match,
    MatchFrame,
    PaddleHitEvent,
    Side,
    WallBounceEvent,
    WinEvent,
)
from pong.physics import (
    create_paddle,
    create_puck,
    move_down,
    move_up,
    reflection_angle,
    reset_puck,
    set_reflection_angle,
    update_paddle,
    update_puck,
)
from pong import arena


def create_match(width: float, height: float) -> Match:
    """Idle match shown before the first round."""
    return Match(
        puck=create_puck(width, height),
        left=create_paddle(Side.LEFT, arena.PADDLE_OFFSET, width, height),
        right=create_paddle(Side.RIGHT, arena.PADDLE_OFFSET, width, height),
        out=True,
        win=None,
    )


def start_match(width: float, height: float) -> Match:
    """Fully reinitialised match, ready to play."""
    match = create_match(width, height)
    match.out = False
    return match


def restart_match(match: Match, restart: bool, width: float, height: float) -> Match:
    """Match to use after this frame's restart input.

    Only an Idle or RoundOver match is replaced, by a fresh one with both
    scores at 0. A playing match is returned as is.
    """
    if match.out and restart:
        return start_match(width, height)
    return match


def winning_side(match: Match) -> Optional[Side]:
    """Side whose score passed MAX_SCORE // 2, left checked first."""
    threshold = arena.MAX_SCORE // 2
    if match.left.score > threshold:
        return Side.LEFT
    if match.right.score > threshold:
        return Side.RIGHT
    return None


def _apply_controls(match: Match, controls: Controls, dt: float) -> None:
    if controls.right_up:
        move_up(match.right, dt)
    if controls.right_down:
        move_down(match.right, dt)
    if controls.left_up:
        move_up(match.left, dt)
    if controls.left_down:
        move_down(match.left, dt)


def _score(match: Match, scorer: Side, width: float, height: float) -> GoalEvent:
    match.paddle(scorer).score += 1
    match.puck = reset_puck(width, height)
    return GoalEvent(
        scorer=scorer,
        left_score=match.left.score,
        right_score=match.right.score,
        t=match.t,
    )


def step_match(
    match: Match,
    controls: Controls,
    dt: float,
    width: float,
    height: float,
) -> list:
    """Advance a playing match by one frame.

    Order: input, paddle collision (right paddle first) or goal check,
    integration of puck and paddles, win check. Does nothing while the match
    is out. Returns the events of this frame; the caller plays the hit sound
    on PaddleHitEvent.
    """
    events: list = []
    if match.out:
        return events

    match.t += dt
    _apply_controls(match, controls, dt)

    circle = match.puck.to_circle()
    hit_side = None
    for paddle in (match.right, match.left):
        rect = paddle.to_rect()
        if circle.overlaps(rect):
            angle = reflection_angle(circle, rect)
            set_reflection_angle(match.puck, angle, paddle.side)
            events.append(PaddleHitEvent(side=paddle.side, angle=angle, t=match.t))
            hit_side = paddle.side
            break

    if hit_side is None:
        # Goal checks only run on frames without a paddle hit
        if match.puck.pos.x > width:
            events.append(_score(match, Side.LEFT, width, height))
        if match.puck.pos.x < 0.0:
            events.append(_score(match, Side.RIGHT, width, height))

    if update_puck(match.puck, dt, height):
        events.append(WallBounceEvent(pos=match.puck.pos.copy(), t=match.t))
    update_paddle(match.left, height)
    update_paddle(match.right, height)

    winner = winning_side(match)
    if winner is not None:
        match.win = winner
        match.out = True
        events.append(WinEvent(winner=winner, t=match.t))

    return events


def result_message(match: Match) -> str:
    """Headline for the Idle / RoundOver screen."""
    if match.win is None:
        return "Lets Play"
    return f"{match.win.label} Side Won"


def idle_controls(t: float, match: Match) -> Controls:
    return Controls()


def hold_controls(**held: bool) -> Callable[[float, Match], Controls]:
    """Controls that keep the same keys down every frame, e.g. hold_controls(left_up=True)."""
    fixed = Controls(**held)
    return lambda t, match: fixed


def random_controls(
    rng: random.Random,
    hold_time: float = 0.4,
) -> Callable[[float, Match], Controls]:
    """Key mashing: each paddle picks up/down/nothing at random every `hold_time` seconds.

    Blind to the puck, so it is not an opponent, just noise to drive demo rallies.
    """
    state = {"until": -1.0, "controls": Controls()}

    def _choose(t: float, match: Match) -> Controls:
        if t >= state["until"]:
            left = rng.choice(("up", "down", None))
            right = rng.choice(("up", "down", None))
            state["controls"] = Controls(
                left_up=left == "up",
                left_down=left == "down",
                right_up=right == "up",
                right_down=right == "down",
            )
            state["until"] = t + hold_time
        return state["controls"]

    return _choose


def simulate_match(
    match: Match,
    width: float,
    height: float,
    dt: float = 1.0 / 60.0,
    max_time: float = 120.0,
    controls: Optional[Callable[[float, Match], Controls]] = None,
) -> tuple[list[MatchFrame], list]:
    """Run a match headless with a fixed frame delta.

    `controls(t, match)` supplies the held keys for each frame (nothing held
    by default). Stops when the match goes out or after `max_time` seconds.
    Returns (frames, events) where frames samples every step.
    """
    controls = controls or idle_controls
    frames = [MatchFrame(
        t=match.t,
        puck_pos=match.puck.pos.copy(),
        left_score=match.left.score,
        right_score=match.right.score,
    )]
    all_events: list = []
    steps = round(max_time / dt)

    for _ in range(steps):
        if match.out:
            break
        all_events.extend(step_match(match, controls(match.t, match), dt, width, height))
        frames.append(MatchFrame(
            t=match.t,
            puck_pos=match.puck.pos.copy(),
            left_score=match.left.score,
            right_score=match.right.score,
        ))

    return frames, all_events
