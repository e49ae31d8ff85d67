"""Tests for the pygame seam: key mapping, drawing and the hit sound."""

import os
from collections import defaultdict

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

pygame = pytest.importorskip("pygame")

from pong.match import create_match, start_match
from sim.audio import HitSound, load_hit_sound
from sim.visualizer import BG_COLOR, FG_COLOR, draw_match, read_controls, restart_pressed


def test_key_mapping():
    """W/S drive the left paddle, arrow keys the right one."""
    keys = defaultdict(bool, {pygame.K_w: True, pygame.K_DOWN: True})
    controls = read_controls(keys)
    assert controls.left_up and not controls.left_down
    assert controls.right_down and not controls.right_up


def test_restart_on_enter_press():
    """Enter (main or keypad) going down restarts; release or other keys do not."""
    assert restart_pressed([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN)])
    assert restart_pressed([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_KP_ENTER)])
    assert not restart_pressed([pygame.event.Event(pygame.KEYUP, key=pygame.K_RETURN)])
    assert not restart_pressed([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w)])
    assert not restart_pressed([])


def test_draw_playing_match():
    """Playing: puck and paddles drawn in the foreground colour."""
    surface = pygame.Surface((512, 320))
    match = start_match(512, 320)
    draw_match(surface, match, fonts=None)

    assert tuple(surface.get_at((256, 160)))[:3] == FG_COLOR
    assert tuple(surface.get_at((15, 160)))[:3] == FG_COLOR
    assert tuple(surface.get_at((497, 160)))[:3] == FG_COLOR
    assert tuple(surface.get_at((100, 20)))[:3] == BG_COLOR


def test_draw_idle_screen():
    """Idle: the puck is hidden and the messages are drawn."""
    pygame.font.init()
    fonts = (pygame.font.SysFont(None, 20), pygame.font.SysFont(None, 30))
    surface = pygame.Surface((512, 320))
    draw_match(surface, create_match(512, 320), fonts)

    assert tuple(surface.get_at((15, 160)))[:3] == BG_COLOR
    pixels = [
        tuple(surface.get_at((x, y)))[:3]
        for x in range(150, 362, 2)
        for y in range(90, 180, 2)
    ]
    assert any(p != BG_COLOR for p in pixels)


def test_prompt_sits_above_centre_line():
    """The prompt is lifted half its height, so nothing is drawn below y=160."""
    pygame.font.init()
    fonts = (pygame.font.SysFont(None, 20), pygame.font.SysFont(None, 30))
    surface = pygame.Surface((512, 320))
    draw_match(surface, create_match(512, 320), fonts)

    below = [
        tuple(surface.get_at((x, y)))[:3]
        for x in range(150, 362)
        for y in range(160, 200)
    ]
    assert all(p == BG_COLOR for p in below)


def test_silent_hit_sound_is_noop():
    """No loaded sound → play() does nothing."""
    sound = HitSound()
    assert not sound.enabled
    sound.play()


def test_missing_sound_file_disables_audio(tmp_path, capsys):
    """Unloadable file → warning printed, sound disabled, no exception."""
    sound = load_hit_sound(str(tmp_path / "missing.ogg"))
    assert not sound.enabled
    assert "sound disabled" in capsys.readouterr().out
    sound.play()
