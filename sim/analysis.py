"""Matplotlib analysis charts: reflection model, puck trajectory, scoring timeline."""

import os
import random

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend
import matplotlib.pyplot as plt
import numpy as np

from pong.geometry import Circle, Rect
from pong.types import GoalEvent, PaddleHitEvent, WallBounceEvent
from pong.physics import raw_reflection_angle, reflection_angle
from pong.match import hold_controls, random_controls, simulate_match, start_match
from pong import arena

SIDE_COLORS = {"left": "#4ecdc4", "right": "#e94560"}


BACKGROUND = "#0f0f1a"
MUTED = "#888888"


def _new_chart(title, figsize=(8, 5)):
    """Figure and axes on the dark background, with only the bottom and left spines."""
    fig, ax = plt.subplots(figsize=figsize)
    fig.set_facecolor(BACKGROUND)
    ax.set_facecolor(BACKGROUND)
    ax.set_title(title, color="#e0e0e0", fontsize=13, fontweight="bold", pad=12)
    ax.tick_params(colors=MUTED, labelsize=9)
    for spine in ("top", "right"):
        ax.spines[spine].set_visible(False)
    for spine in ("bottom", "left"):
        ax.spines[spine].set_color("#333333")
    for label in (ax.xaxis.label, ax.yaxis.label):
        label.set_color("#aaaaaa")
    return fig, ax


def _legend(ax):
    ax.legend(facecolor="#1a1a2e", edgecolor="#333", labelcolor="#e0e0e0", fontsize=9)


def _finish(fig, save_path):
    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=BACKGROUND)
    return fig


def _hit_offsets(samples=181):
    """Puck centre offsets from the paddle top, including the overhang of the puck radius."""
    return np.linspace(-arena.PUCK_RADIUS, arena.PADDLE_HEIGHT + arena.PUCK_RADIUS, samples)


def chart_reflection_angle(save_path=None):
    """Chart 1: Reflection angle vs hit position, raw and clamped."""
    rect = Rect(0.0, 0.0, arena.PADDLE_WIDTH, arena.PADDLE_HEIGHT)
    offsets = _hit_offsets()
    raw = [raw_reflection_angle(Circle(0.0, float(o), arena.PUCK_RADIUS), rect) for o in offsets]
    clamped = [reflection_angle(Circle(0.0, float(o), arena.PUCK_RADIUS), rect) for o in offsets]

    fig, ax = _new_chart("Reflection Angle vs Hit Position")

    ax.plot(offsets, raw, color="#64748b", linestyle="--", linewidth=1.5, label="raw")
    ax.plot(offsets, clamped, color="#ffc107", linewidth=2.5, label="clamped")
    for bound in (arena.MIN_REFLECTION_ANGLE, arena.MAX_REFLECTION_ANGLE):
        ax.axhline(y=bound, color="#e94560", linestyle=":", linewidth=1, alpha=0.7)
    ax.axvspan(0, arena.PADDLE_HEIGHT, color="#ffffff", alpha=0.04)

    ax.set_xlabel("Puck centre below paddle top (px)")
    ax.set_ylabel("Reflection angle (deg)")
    _legend(ax)
    ax.grid(True, alpha=0.15)
    return _finish(fig, save_path)


def chart_departure_directions(save_path=None):
    """Chart 2: Direction the puck leaves each paddle, per hit position."""
    rect = Rect(0.0, 0.0, arena.PADDLE_WIDTH, arena.PADDLE_HEIGHT)
    offsets = _hit_offsets()
    angles = np.array([reflection_angle(Circle(0.0, float(o), arena.PUCK_RADIUS), rect) for o in offsets])

    fig, ax = _new_chart("Departure Direction by Paddle")

    ax.plot(offsets, 90.0 - angles, color=SIDE_COLORS["left"], linewidth=2, label="left paddle (90 - A)")
    ax.plot(offsets, angles + 90.0, color=SIDE_COLORS["right"], linewidth=2, label="right paddle (A + 90)")
    ax.axhline(y=0, color="#333333", linewidth=1)
    ax.axhline(y=180, color="#333333", linewidth=1)

    ax.set_xlabel("Puck centre below paddle top (px)")
    ax.set_ylabel("Direction angle (deg, 0 = +x)")
    _legend(ax)
    ax.grid(True, alpha=0.15)
    return _finish(fig, save_path)


def chart_serve_trajectory(save_path=None):
    """Chart 3: Path of a serve nobody returns (both paddles parked at the top)."""
    w, h = arena.WINDOW_WIDTH, arena.WINDOW_HEIGHT
    match = start_match(w, h)
    frames, events = simulate_match(
        match, w, h, max_time=10.0,
        controls=hold_controls(left_up=True, right_up=True),
    )
    # Stop at the first goal; the puck is re-served from the centre after it
    first_goal = next((e.t for e in events if isinstance(e, GoalEvent)), frames[-1].t)
    path = [f.puck_pos for f in frames if f.t < first_goal]

    fig, ax = _new_chart("Unreturned Serve")

    ax.plot([p.x for p in path], [p.y for p in path], color="#ffc107", linewidth=2, label="puck centre")
    ax.add_patch(plt.Rectangle((0, 0), w, h, fill=False, edgecolor=MUTED, linewidth=1.5))
    ax.set_xlim(-20, w + 20)
    ax.set_ylim(h + 20, -20)  # screen coordinates, y down
    ax.set_aspect("equal")
    ax.set_xlabel("x (px)")
    ax.set_ylabel("y (px)")
    _legend(ax)
    return _finish(fig, save_path)


def chart_scoring_timeline(seed=7, save_path=None):
    """Chart 4: Score over time for a match driven by random key presses."""
    w, h = arena.WINDOW_WIDTH, arena.WINDOW_HEIGHT
    match = start_match(w, h)
    frames, events = simulate_match(
        match, w, h, max_time=300.0,
        controls=random_controls(random.Random(seed)),
    )
    t = np.array([f.t for f in frames])
    left = np.array([f.left_score for f in frames])
    right = np.array([f.right_score for f in frames])
    hits = [e for e in events if isinstance(e, PaddleHitEvent)]
    bounces = [e for e in events if isinstance(e, WallBounceEvent)]

    fig, ax = _new_chart(f"Scoring Timeline (seed {seed})")

    ax.step(t, left, where="post", color=SIDE_COLORS["left"], linewidth=2, label="left")
    ax.step(t, right, where="post", color=SIDE_COLORS["right"], linewidth=2, label="right")
    for e in hits:
        ax.axvline(x=e.t, color=SIDE_COLORS[e.side.value], alpha=0.15, linewidth=1)
    ax.axhline(y=arena.MAX_SCORE // 2 + 1, color="#ffc107", linestyle="--", linewidth=1, alpha=0.7)

    ax.set_xlabel("Time (s)")
    ax.set_ylabel("Score")
    ax.text(
        0.01, 0.97, f"{len(hits)} paddle hits, {len(bounces)} wall bounces",
        transform=ax.transAxes, va="top", fontsize=9, color="#aaaaaa",
    )
    _legend(ax)
    ax.grid(True, alpha=0.15)
    return _finish(fig, save_path)


CHARTS = [
    ("chart_reflection_angle.png", chart_reflection_angle),
    ("chart_departure_directions.png", chart_departure_directions),
    ("chart_serve_trajectory.png", chart_serve_trajectory),
    ("chart_scoring_timeline.png", chart_scoring_timeline),
]


def generate_all_charts(output_dir="."):
    """Generate all analysis charts and save to output directory."""
    os.makedirs(output_dir, exist_ok=True)

    paths = []
    for filename, chart in CHARTS:
        path = os.path.join(output_dir, filename)
        chart(save_path=path)
        paths.append(path)
        print(f"  Saved: {path}")

    plt.close("all")
    return paths
