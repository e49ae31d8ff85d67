#!/usr/bin/env python3
"""CLI entry point for Pong.

Usage:
    python main.py play              Open the game window
    python main.py rally [seed]      Play a match headless with random key presses
    python main.py analyze           Generate analysis charts
    python main.py test [args]       Run the tests, passing args to pytest
"""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


def cmd_play():
    """Open the game window."""
    print("Launching Pong...")
    print("Controls: W/S=left  UP/DOWN=right  ENTER=start  ESC=quit")
    print("-" * 60)
    from sim.visualizer import run_visualizer
    run_visualizer()


def cmd_rally():
    """Play a match headless with random key presses and print every goal."""
    import random
    from pong.types import GoalEvent, PaddleHitEvent, WinEvent
    from pong.match import random_controls, simulate_match, start_match
    from pong import arena

    seed = int(sys.argv[2]) if len(sys.argv) > 2 and sys.argv[2].isdigit() else 42

    print("=" * 60)
    print(f"  HEADLESS MATCH (seed {seed})")
    print("=" * 60)

    w, h = arena.WINDOW_WIDTH, arena.WINDOW_HEIGHT
    match = start_match(w, h)
    frames, events = simulate_match(
        match, w, h, max_time=600.0, controls=random_controls(random.Random(seed)),
    )

    hits = 0
    for e in events:
        if isinstance(e, PaddleHitEvent):
            hits += 1
        elif isinstance(e, GoalEvent):
            print(f"  {e.t:7.2f}s  {e.scorer.label:5s} scores after {hits:2d} hits  "
                  f"[{e.left_score}-{e.right_score}]")
            hits = 0
        elif isinstance(e, WinEvent):
            print(f"  {e.t:7.2f}s  {e.winner.label} Side Won")

    print()
    print(f"  FINAL SCORE: {match.left.score} - {match.right.score}")
    if match.win is None:
        print(f"  No winner after {frames[-1].t:.0f}s")
    print("=" * 60)


def cmd_analyze():
    """Write the reflection, trajectory and scoring charts to output/."""
    from sim.analysis import CHARTS, generate_all_charts

    print("Charts:")
    for filename, chart in CHARTS:
        print(f"  {filename:34s} {chart.__doc__.split(': ', 1)[-1]}")
    print("-" * 60)
    output_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "output")
    paths = generate_all_charts(output_dir=output_dir)
    print(f"\n{len(paths)} charts written to {output_dir}/")


def cmd_test():
    """Run the test suite (extra arguments go to pytest)."""
    import subprocess
    args = sys.argv[2:] or ["-v"]
    print(f"pytest tests/ {' '.join(args)}")
    print("-" * 60)
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "tests/", *args],
        cwd=os.path.dirname(os.path.abspath(__file__)),
    )
    sys.exit(result.returncode)


COMMANDS = {
    "play": cmd_play,
    "rally": cmd_rally,
    "analyze": cmd_analyze,
    "test": cmd_test,
}


def main():
    command = sys.argv[1] if len(sys.argv) > 1 else None
    if command not in COMMANDS:
        if command is not None:
            print(f"Unknown command: {command}")
        print(__doc__)
        sys.exit(1)

    COMMANDS[command]()


if __name__ == "__main__":
    main()
