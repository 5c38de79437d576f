"""Manual play: a pygame window driving the simulation once per display frame."""

import argparse
from dataclasses import replace
import logging

import pygame

from space_dodger.config import DEFAULT_CONFIG
from space_dodger.engine import SimulationEngine
from space_dodger.input_state import InputState
from space_dodger.log import configure_logging
from space_dodger.render import ControlPad, Renderer

logger = logging.getLogger(__name__)

RESTART_KEYS = (pygame.K_r, pygame.K_RETURN, pygame.K_SPACE)
MOUSE = "mouse"


def build_parser():
    parser = argparse.ArgumentParser(prog="space_dodger", description="Dodge the falling asteroids.")
    parser.add_argument("--seed", type=int, default=None, help="random seed for asteroid spawning")
    parser.add_argument("--fps", type=int, default=60, help="frame rate cap (default: 60)")
    parser.add_argument("--width", type=int, default=int(DEFAULT_CONFIG.width), help="arena width in pixels")
    parser.add_argument("--height", type=int, default=int(DEFAULT_CONFIG.height), help="arena height in pixels")
    parser.add_argument(
        "--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging verbosity"
    )
    return parser


def handle_event(event, engine, inputs, pad):
    """Route one pygame event. Returns False when the player asked to quit."""
    if event.type == pygame.QUIT:
        return False

    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        if engine.terminal and event.key in RESTART_KEYS:
            logger.debug("restart requested from keyboard")
            engine.start()
        else:
            inputs.key_down(event.key)
    elif event.type == pygame.KEYUP:
        inputs.key_up(event.key)

    # Mouse events synthesized from touches are handled by the finger branch
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and not getattr(event, "touch", False):
        _pointer_down(MOUSE, event.pos, engine, inputs, pad)
    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and not getattr(event, "touch", False):
        _pointer_up(MOUSE, inputs, pad)

    elif event.type == pygame.FINGERDOWN:
        _pointer_down(("finger", event.finger_id), _finger_pos(event, pad), engine, inputs, pad)
    elif event.type == pygame.FINGERUP:
        _pointer_up(("finger", event.finger_id), inputs, pad)

    elif event.type == pygame.WINDOWFOCUSLOST:
        pad.pressed.clear()
        inputs.release_all()

    return True


def _finger_pos(event, pad):
    # Finger coordinates are normalized to [0, 1] over the whole window
    return int(event.x * pad.width), int(event.y * (pad.top + pad.HEIGHT))


def _pointer_down(pointer, pos, engine, inputs, pad):
    direction = pad.direction_at(pos)
    if direction is not None:
        pad.pressed[pointer] = direction
        inputs.press(direction)
    elif engine.terminal and pos[1] < pad.top:
        engine.start()


def _pointer_up(pointer, inputs, pad):
    # Release the button this pointer went down on, wherever it is lifted,
    # unless another pointer still holds the same button
    direction = pad.pressed.pop(pointer, None)
    if direction is not None and direction not in pad.pressed.values():
        inputs.release(direction)


def run(config=DEFAULT_CONFIG, seed=None, fps=60):
    pygame.init()
    renderer = Renderer(config, seed=seed)
    pad = ControlPad(top=renderer.height, width=renderer.width)
    screen = pygame.display.set_mode((renderer.width, renderer.height + pad.HEIGHT))
    pygame.display.set_caption("Space Dodger")
    clock = pygame.time.Clock()

    engine = SimulationEngine(config, seed=seed)
    inputs = InputState()
    state = engine.start()

    running = True
    clock.tick()
    while running:
        for event in pygame.event.get():
            if not handle_event(event, engine, inputs, pad):
                running = False

        delta_ms = clock.tick(fps)
        state = engine.tick(inputs.snapshot(), delta_ms)

        renderer.draw(state, screen)
        pad.draw(screen, inputs.snapshot())
        pygame.display.flip()

    pygame.quit()
    print("Game Over!" if state.terminal else "Quit.")
    print(f"Final Score: {int(state.score)}, Level: {state.level}")
    return state


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = replace(DEFAULT_CONFIG, width=args.width, height=args.height)
    except ValueError as e:
        parser.error(str(e))
    if args.fps <= 0:
        parser.error("--fps must be positive")

    run(config, seed=args.seed, fps=args.fps)
    return 0
