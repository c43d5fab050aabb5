"""tilt-ball: roll a ball by tilting a (virtual) phone and hear where it is.

Exercises tilt, tilt-motion, tilt-physics, and tilt-sound.

Controls:
  Arrows  Tilt the virtual device
  L       Level the device
  P       Request motion permission and start the sensor
  X / Y   Invert horizontal / vertical axis
  B       Invert both axes
  R       Rotate the virtual screen by 90 degrees
  S       Enable sound
  M       Switch sound mode (position / magnitude)
  [ / ]   Lower / raise motion sensitivity
  , / .   Darken / brighten the filter
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

import pygame

from tilt import Canvas, Engine, SimulationContext
from tilt_motion import (
    SampleChannel,
    handle_key,
    initialize_motion,
    make_motion_listener,
    make_motion_system,
    request_motion_permission,
)
from tilt_physics import SimulationConstants, make_ball_system, resize
from tilt_sound import MODES, SoundConfig, enable_sound, make_sound_system

from game.audio import ToneVoice
from game.device import VirtualDevice, make_requester
from ui.constants import (
    BALL_RADIUS,
    BG_COLOR,
    BRIGHTNESS_RANGE,
    BRIGHTNESS_STEP,
    CANVAS_FRACTION,
    FPS,
    SENSITIVITY_RANGE,
    SENSITIVITY_STEP,
    TITLE,
    WINDOW_H,
    WINDOW_W,
)
from ui.hud import draw_canvas, draw_hud, readout_lines

logger = logging.getLogger("tilt-ball")


class GameState:
    """Holds the engine, the virtual sensor, and the audio voice."""

    def __init__(self, fps: int, sound_mode: str, deny_motion: bool) -> None:
        canvas = Canvas.fit(WINDOW_W, WINDOW_H, CANVAS_FRACTION)
        self.engine = Engine(
            SimulationContext.create(canvas.width, canvas.height, BALL_RADIUS), fps=fps
        )
        self.device = VirtualDevice()
        self.engine.context.screen_angle = self.device.screen_angle

        self.channel = SampleChannel()
        self.sound_config = [SoundConfig(mode=sound_mode)]
        self.sound_mode = [sound_mode]
        self.voice = ToneVoice()
        self.requester = make_requester(deny_motion)
        self.motion_status = "press p"

        # Wire systems (order matters)
        self.engine.add_system(make_motion_system(self.channel))
        self.engine.add_system(
            make_ball_system(SimulationConstants(radius=BALL_RADIUS))
        )
        self.engine.add_system(
            make_sound_system(config_ref=self.sound_config, mode_ref=self.sound_mode)
        )

    @property
    def sim(self) -> SimulationContext:
        return self.engine.context

    def request_motion(self) -> None:
        if self.device.listening:
            return
        result = request_motion_permission(self.requester)
        listener = make_motion_listener(self.channel)
        started = initialize_motion(result, lambda: self.device.add_listener(listener))
        self.motion_status = "on" if started else "denied"

    def enable_sound(self) -> None:
        if self.sim.sound is not None:
            return
        if self.voice.start():
            enable_sound(self.sim, self.sound_config[0])

    def cycle_sound_mode(self) -> None:
        idx = MODES.index(self.sound_mode[0])
        self.sound_mode[0] = MODES[(idx + 1) % len(MODES)]
        logger.info("sound mode: %s", self.sound_mode[0])

    def adjust_sound(self, name: str, delta: float, bounds: tuple[float, float]) -> None:
        """Step one live sound setting, held inside ``bounds``."""
        low, high = bounds
        config = self.sound_config[0]
        value = round(min(high, max(low, getattr(config, name) + delta)), 3)
        self.sound_config[0] = replace(config, **{name: value})
        logger.info("%s: %g", name, value)

    def on_resize(self, width: int, height: int) -> None:
        try:
            canvas = Canvas.fit(width, height, CANVAS_FRACTION)
            resize(self.sim, canvas.width, canvas.height, BALL_RADIUS)
        except ValueError as exc:
            logger.warning("ignoring resize to %dx%d: %s", width, height, exc)

    def on_key(self, event: pygame.event.Event) -> bool:
        """Handle a key press. Returns False when the app should quit."""
        if event.key == pygame.K_ESCAPE:
            return False
        name = pygame.key.name(event.key)
        if handle_key(self.sim.flags, name):
            return True
        if name == "p":
            self.request_motion()
        elif name == "s":
            self.enable_sound()
        elif name == "m":
            self.cycle_sound_mode()
        elif name == "r":
            self.device.rotate_screen()
        elif name == "l":
            self.device.level()
        elif name == "[":
            self.adjust_sound("sensitivity", -SENSITIVITY_STEP, SENSITIVITY_RANGE)
        elif name == "]":
            self.adjust_sound("sensitivity", SENSITIVITY_STEP, SENSITIVITY_RANGE)
        elif name == ",":
            self.adjust_sound("brightness", -BRIGHTNESS_STEP, BRIGHTNESS_RANGE)
        elif name == ".":
            self.adjust_sound("brightness", BRIGHTNESS_STEP, BRIGHTNESS_RANGE)
        return True

    def update(self, frame_dt: float) -> None:
        keys = pygame.key.get_pressed()
        d_roll = keys[pygame.K_RIGHT] - keys[pygame.K_LEFT]
        d_pitch = keys[pygame.K_UP] - keys[pygame.K_DOWN]
        if d_roll or d_pitch:
            self.device.tilt(d_roll, d_pitch)

        self.device.emit()
        self.engine.step(frame_dt)
        if self.sim.sound is not None:
            self.voice.apply(self.sim.sound)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--fps", type=int, default=FPS, help="frames per second")
    parser.add_argument(
        "--sound-mode", choices=MODES, default="position", help="initial sound mapping"
    )
    parser.add_argument(
        "--deny-motion",
        action="store_true",
        help="answer the motion permission prompt with a refusal",
    )
    parser.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING, ERROR")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    window = pygame.display.set_mode((WINDOW_W, WINDOW_H), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    state = GameState(args.fps, args.sound_mode, args.deny_motion)

    running = True
    while running:
        frame_dt = pg_clock.tick(args.fps) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                window = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                state.on_resize(event.w, event.h)
            elif event.type == pygame.KEYDOWN:
                if not state.on_key(event):
                    running = False

        state.update(frame_dt)

        window.fill(BG_COLOR)
        draw_canvas(window, state.sim)
        draw_hud(
            window,
            font,
            readout_lines(
                state.sim, state.motion_status, state.sound_mode[0], state.sound_config[0]
            ),
        )
        pygame.display.flip()

    state.voice.stop()
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
