"""Game objects: the ball, the paddles and the score."""

from __future__ import annotations

from dataclasses import dataclass

_SERVE_SPEED_X = 200.0
_SERVE_SPEED_Y = 100.0


@dataclass
class Ball:
    """A ball with a centre position and a velocity in pixels per second."""

    x: float
    y: float
    velocity_x: float = _SERVE_SPEED_X
    velocity_y: float = _SERVE_SPEED_Y

    def reset(self, x: float, y: float) -> None:
        """Put the ball at (x, y) and serve it back the way it came from."""
        self.x = x
        self.y = y
        self.velocity_x = -_SERVE_SPEED_X if self.velocity_x > 0.0 else _SERVE_SPEED_X
        self.velocity_y = _SERVE_SPEED_Y


@dataclass
class Paddle:
    """A paddle, positioned by its top-left corner."""

    x: float
    y: float
    is_player: bool = False
    velocity_y: float = 0.0


@dataclass
class Score:
    """Points of the player and of the computer."""

    player_score: int = 0
    ai_score: int = 0

    def player_scores(self) -> None:
        """Give the player a point."""
        self.player_score += 1

    def ai_scores(self) -> None:
        """Give the computer a point."""
        self.ai_score += 1

    def reset(self) -> None:
        """Set both scores back to zero."""
        self.player_score = 0
        self.ai_score = 0