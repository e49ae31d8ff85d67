"""Pygame front end: window, keyboard, drawing and the frame loop."""

try:
    import pygame
except ImportError:
    pygame = None

from pong.types import Controls, Match, PaddleHitEvent
from pong.match import create_match, restart_match, result_message, step_match
from pong import arena

# Colors
BG_COLOR = (255, 255, 255)
FG_COLOR = (230, 41, 55)

PROMPT = "Press Enter To Play"
PROMPT_FONT_SIZE = 20
RESULT_FONT_SIZE = 30

FPS = 60


def read_controls(keys) -> Controls:
    """Held movement keys: W/S for the left paddle, Up/Down for the right one."""
    return Controls(
        left_up=bool(keys[pygame.K_w]),
        left_down=bool(keys[pygame.K_s]),
        right_up=bool(keys[pygame.K_UP]),
        right_down=bool(keys[pygame.K_DOWN]),
    )


def restart_pressed(events) -> bool:
    """True if Enter went down this frame. Holding it does not repeat."""
    return any(
        event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_KP_ENTER)
        for event in events
    )


def _draw_centered(surface, font, text, center_x, baseline):
    # Text is horizontally centred and sits on `baseline`
    rendered = font.render(text, True, FG_COLOR)
    w, _ = font.size(text)
    surface.blit(rendered, (int(center_x - w / 2), int(baseline - font.get_ascent())))


def draw_match(surface, match: Match, fonts) -> None:
    surface.fill(BG_COLOR)
    w, h = surface.get_size()

    if not match.out:
        puck = match.puck
        pygame.draw.circle(
            surface, FG_COLOR, (int(puck.pos.x), int(puck.pos.y)), int(puck.radius)
        )
        for paddle in (match.left, match.right):
            pygame.draw.rect(
                surface, FG_COLOR,
                (int(paddle.pos.x), int(paddle.pos.y), int(paddle.size.x), int(paddle.size.y)),
            )
        return

    prompt_font, result_font = fonts
    _, prompt_h = prompt_font.size(PROMPT)
    _draw_centered(surface, prompt_font, PROMPT, w / 2, h / 2 - prompt_h / 2)
    _draw_centered(surface, result_font, result_message(match), w / 2, h / 3)


def run_visualizer():
    """Open the game window and run until it is closed."""
    if pygame is None:
        print("ERROR: pygame is not installed. Run: pip install pygame")
        return

    pygame.init()
    screen = pygame.display.set_mode((arena.WINDOW_WIDTH, arena.WINDOW_HEIGHT))
    pygame.display.set_caption(arena.WINDOW_TITLE)
    clock = pygame.time.Clock()

    fonts = (
        pygame.font.SysFont(None, PROMPT_FONT_SIZE),
        pygame.font.SysFont(None, RESULT_FONT_SIZE),
    )

    from sim.audio import load_hit_sound
    hit_sound = load_hit_sound(arena.HIT_SOUND_PATH)

    w, h = screen.get_size()
    match = create_match(w, h)

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0
        events = pygame.event.get()
        restart = restart_pressed(events)

        for event in events:
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False

        w, h = screen.get_size()

        if not match.out:
            controls = read_controls(pygame.key.get_pressed())
            for event in step_match(match, controls, dt, w, h):
                if isinstance(event, PaddleHitEvent):
                    hit_sound.play()
        match = restart_match(match, restart, w, h)

        draw_match(screen, match, fonts)
        pygame.display.flip()

    pygame.quit()
