"""Collision sound for the game window.

If the mixer can't start or the file can't be loaded, sound is switched off
for the session and play() becomes a no-op.
"""

import os

import pygame


class HitSound:
    """One-shot sound effect played on every puck-paddle hit."""

    def __init__(self, sound=None):
        self.sound = sound

    @property
    def enabled(self) -> bool:
        return self.sound is not None

    def play(self) -> None:
        if self.sound is None:
            return
        self.sound.play()


def load_hit_sound(path: str) -> HitSound:
    """Load `path` through pygame.mixer, falling back to a silent HitSound."""
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        sound = pygame.mixer.Sound(path)
    except (pygame.error, FileNotFoundError) as exc:
        print(f"WARNING: sound disabled ({os.path.basename(path)}: {exc})")
        return HitSound()
    return HitSound(sound)
