"""Canvas, ball, and the sensor readout overlay."""
from __future__ import annotations

import pygame

from tilt import SimulationContext
from tilt_sound import SoundConfig

from ui.constants import (
    BALL_COLOR,
    BALL_RADIUS,
    CANVAS_BORDER,
    TEXT_COLOR,
    TEXT_DIM,
    WARN_COLOR,
)


def canvas_origin(window: pygame.Surface, sim: SimulationContext) -> tuple[int, int]:
    """Top-left corner that centers the canvas in the window."""
    return (
        int((window.get_width() - sim.canvas.width) / 2),
        int((window.get_height() - sim.canvas.height) / 2),
    )


def draw_canvas(window: pygame.Surface, sim: SimulationContext) -> None:
    ox, oy = canvas_origin(window, sim)
    rect = pygame.Rect(ox, oy, int(sim.canvas.width), int(sim.canvas.height))
    pygame.draw.rect(window, CANVAS_BORDER, rect, 1)
    pygame.draw.circle(
        window,
        BALL_COLOR,
        (int(ox + sim.ball.x), int(oy + sim.ball.y)),
        int(BALL_RADIUS),
    )


def readout_lines(
    sim: SimulationContext,
    motion_status: str,
    sound_mode: str,
    config: SoundConfig,
) -> list[tuple[str, tuple[int, int, int]]]:
    a = sim.acceleration
    lines = [
        (f"ax: {a.x:.2f}", TEXT_COLOR),
        (f"ay: {a.y:.2f}", TEXT_COLOR),
        (f"az: {a.z:.2f}", TEXT_COLOR),
        (f"invertX: {str(sim.flags.invert_x).lower()}", TEXT_COLOR),
        (f"invertY: {str(sim.flags.invert_y).lower()}", TEXT_COLOR),
        (f"angle: {sim.screen_angle()}", TEXT_DIM),
    ]
    motion_color = WARN_COLOR if motion_status == "denied" else TEXT_DIM
    lines.append((f"motion: {motion_status}", motion_color))
    if sim.sound is None:
        lines.append(("sound: off (s)", TEXT_DIM))
    else:
        s = sim.sound
        lines.append(
            (f"sound: {sound_mode} {s.frequency:.0f} Hz vol {s.volume:.2f}", TEXT_COLOR)
        )
    lines.append(
        (f"sens: {config.sensitivity:.1f}  bright: {config.brightness:.0f} Hz", TEXT_DIM)
    )
    return lines


def draw_hud(
    window: pygame.Surface,
    font: pygame.font.Font,
    lines: list[tuple[str, tuple[int, int, int]]],
) -> None:
    y = 10
    for text, color in lines:
        window.blit(font.render(text, True, color), (10, y))
        y += 20
