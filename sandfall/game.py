"""Interactive window that drops sand where the mouse clicks."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import pygame

from sandfall.cell import Cell, Vertex
from sandfall.world import PixelPos, World

WINDOW_SIZE: Tuple[int, int] = (800, 800)
WINDOW_TITLE = "Sandbox"
FRAMERATE = 60
TICK_MS = 20
BACKGROUND = (15, 15, 15)
BRUSH_RADIUS = 10

LEFT_BUTTON = 1
RIGHT_BUTTON = 3


def ticks_due(pending: float, dt: float) -> Tuple[int, float]:
    """Add ``dt`` seconds to ``pending`` ticks; return whole ticks due and the remainder."""
    total = pending + (dt * 1000) / TICK_MS
    if total < 1.0:
        return 0, total
    ticks = math.floor(total)
    return ticks, total - ticks


@dataclass
class FrameStats:
    """Frame rate, frame time and the longest frame time seen so far."""

    fps: float = 0.0
    frame_time: float = 0.0
    highest_frame_time: float = 0.0

    def record(self, dt: float) -> None:
        """Record a frame that took ``dt`` seconds."""
        self.fps = 1.0 / dt if dt > 0 else math.inf
        self.frame_time = dt * 1000
        if self.frame_time > self.highest_frame_time:
            self.highest_frame_time = self.frame_time

    def report(self) -> str:
        """Return a one-line summary of the last recorded frame."""
        return (
            f"FPS: {self.fps:g}; frame time: {self.frame_time:g}ms; "
            f"highest frame time: {self.highest_frame_time:g}ms"
        )


def _triangles(vertices: Iterable[Vertex]) -> Iterable[Tuple[Vertex, Vertex, Vertex]]:
    corners = iter(vertices)
    return zip(corners, corners, corners)


class Game:
    """Owns the window and the world and runs the main loop."""

    def __init__(self, world: Optional[World] = None, size: Tuple[int, int] = WINDOW_SIZE) -> None:
        self.size = size
        self.world = world if world is not None else World(window_height=size[1])
        self.window: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.stats = FrameStats()
        self.running = False

    def start(self) -> None:
        """Open the window and run until it is closed."""
        pygame.init()
        try:
            self.window = pygame.display.set_mode(self.size)
            pygame.display.set_caption(WINDOW_TITLE)
            self.clock = pygame.time.Clock()
            self.clock.tick()
            self.run()
        finally:
            pygame.quit()

    def run(self) -> None:
        """Process events, advance the world at a fixed tick rate and draw."""
        if self.window is None or self.clock is None:
            raise RuntimeError("the game window has not been opened")
        pending = 0.0
        self.running = True
        while self.running:
            dt = self.clock.tick(FRAMERATE) / 1000.0
            focused = pygame.mouse.get_focused()
            for event in pygame.event.get():
                self._handle_event(event, focused)
            if not self.running:
                break

            self.stats.record(dt)
            print(self.stats.report())

            ticks, pending = ticks_due(pending, dt)
            for _ in range(ticks):
                self.world.step()

            self.window.fill(BACKGROUND)
            self._apply_held_input(
                pygame.mouse.get_pos(), pygame.mouse.get_pressed(), pygame.key.get_mods()
            )
            self._draw(self.window)
            pygame.display.flip()

    def _handle_event(self, event: pygame.event.Event, focused: bool) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.MOUSEBUTTONDOWN and focused:
            if event.button == LEFT_BUTTON:
                self.world.create_cell_from_click(event.pos)
            if event.button == RIGHT_BUTTON:
                self.world.step()

    def _apply_held_input(
        self, mouse_pos: PixelPos, buttons: Sequence[bool], mods: int
    ) -> List[Cell]:
        if not buttons or not buttons[0]:
            return []
        if mods & pygame.KMOD_LSHIFT:
            cell = self.world.create_cell_from_click(mouse_pos)
            return [cell] if cell is not None else []
        if mods & pygame.KMOD_LCTRL:
            return self.world.create_cell_circle_from_click(mouse_pos, BRUSH_RADIUS)
        return []

    def _draw(self, surface: pygame.Surface) -> None:
        for first, second, third in _triangles(self.world.vertices):
            pygame.draw.polygon(
                surface, first.color, [first.position, second.position, third.position]
            )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the sandbox window."""
    parser = argparse.ArgumentParser(prog="sandfall", description="Falling sand sandbox.")
    parser.parse_args(argv)
    Game().start()
    return 0