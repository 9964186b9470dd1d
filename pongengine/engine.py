"""The game engine: window, input, timing and presentation of frames."""

from __future__ import annotations

import sys
from array import array
from enum import Enum, auto
from typing import Protocol, Sequence

import pygame

from .components import Ball, Paddle, Score
from .config import Config
from .framebuffer import FrameBuffer
from .render import Renderer
from .timer import Timer

_UPDATE_INTERVAL_S = 0.0166


class Key(Enum):
    """Keys the game reacts to."""

    ESCAPE = auto()
    UP = auto()
    DOWN = auto()
    W = auto()
    S = auto()


class WindowError(RuntimeError):
    """The window could not be created or updated."""


class Window(Protocol):
    """What the engine needs from a window."""

    def is_open(self) -> bool: ...

    def is_key_down(self, key: Key) -> bool: ...

    def update(self, pixels: Sequence[int], width: int, height: int) -> None: ...

    def close(self) -> None: ...


class PygameWindow:
    """A window shown with pygame, limited to about 60 updates a second."""

    def __init__(self, title: str, width: int, height: int) -> None:
        try:
            pygame.display.init()
            self._surface = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            raise WindowError(f"Failed to create window: {exc}") from exc
        pygame.display.set_caption(title)
        self._clock = pygame.time.Clock()
        self._rate = 1.0 / _UPDATE_INTERVAL_S
        self._open = True
        self._keys = {
            Key.ESCAPE: pygame.K_ESCAPE,
            Key.UP: pygame.K_UP,
            Key.DOWN: pygame.K_DOWN,
            Key.W: pygame.K_w,
            Key.S: pygame.K_s,
        }

    def is_open(self) -> bool:
        if self._open:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._open = False
        return self._open

    def is_key_down(self, key: Key) -> bool:
        if not self._open:
            return False
        return bool(pygame.key.get_pressed()[self._keys[key]])

    def update(self, pixels: Sequence[int], width: int, height: int) -> None:
        if len(pixels) != width * height:
            raise WindowError(f"buffer of {len(pixels)} pixels does not fit {width}x{height}")
        data = array("I", (p | 0xFF000000 for p in pixels))
        if sys.byteorder == "little":
            data.byteswap()
        image = pygame.image.frombuffer(data.tobytes(), (width, height), "ARGB")
        self._surface.blit(image, (0, 0))
        pygame.display.flip()
        self._clock.tick(self._rate)

    def close(self) -> None:
        if self._open:
            self._open = False
            pygame.display.quit()


class Engine:
    """Owns the window, the frame timer and the renderer."""

    def __init__(
        self,
        config: Config | None = None,
        window: Window | None = None,
        timer: Timer | None = None,
    ) -> None:
        self.config = config if config is not None else Config()
        self._window = window if window is not None else PygameWindow(
            self.config.window_title, self.config.window_width, self.config.window_height
        )
        self._timer = timer if timer is not None else Timer(self.config.fps_target)
        self._renderer = Renderer(self.config)
        self.running = True

    def __enter__(self) -> Engine:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def frame(self) -> FrameBuffer:
        """The frame being drawn."""
        return self._renderer.frame

    def is_running(self) -> bool:
        return (
            self.running
            and self._window.is_open()
            and not self._window.is_key_down(Key.ESCAPE)
        )

    def get_delta_time(self) -> float:
        """Seconds since the previous frame."""
        return self._timer.get_delta_time()

    def handle_input(self, paddle: Paddle) -> None:
        """Set the player's paddle speed from the arrow and W/S keys."""
        if not paddle.is_player:
            return
        down = self._window.is_key_down
        velocity = 0.0
        if down(Key.UP) or down(Key.W):
            velocity -= self.config.paddle_speed
        if down(Key.DOWN) or down(Key.S):
            velocity += self.config.paddle_speed
        paddle.velocity_y = velocity

    def clear(self) -> None:
        self._renderer.clear()

    def render_paddle(self, paddle: Paddle) -> None:
        self._renderer.render_paddle(paddle)

    def render_ball(self, ball: Ball) -> None:
        self._renderer.render_ball(ball)

    def render_score(self, score: Score) -> None:
        self._renderer.render_score(score)

    def present(self) -> None:
        """Show the finished frame in the window."""
        frame = self._renderer.frame
        self._window.update(frame.pixels, frame.width, frame.height)

    def close(self) -> None:
        """Stop the engine and close its window."""
        self.running = False
        self._window.close()