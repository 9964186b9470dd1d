"""Systems that move the objects, bounce the ball and keep the score."""

from __future__ import annotations

from .components import Ball, Paddle, Score
from .config import Config

_AI_SPEED = 200.0
_AI_CENTRE_OFFSET = 50.0
_AI_DEAD_ZONE = 10.0
_SPIN_FACTOR = 100.0


def _clamp(value: float, low: float, high: float) -> float:
    if low > high:
        raise ValueError(f"invalid clamp range: {low} > {high}")
    return max(low, min(value, high))


class MovementSystem:
    """Moves the ball and both paddles; steers the computer's paddle."""

    def update(
        self,
        ball: Ball,
        player_paddle: Paddle,
        ai_paddle: Paddle,
        delta_time: float,
        config: Config,
    ) -> None:
        ball.x += ball.velocity_x * delta_time
        ball.y += ball.velocity_y * delta_time

        max_y = config.window_height - config.paddle_height

        player_paddle.y += player_paddle.velocity_y * delta_time
        player_paddle.y = _clamp(player_paddle.y, 0.0, max_y)

        paddle_centre = ai_paddle.y + _AI_CENTRE_OFFSET
        if ball.y < paddle_centre - _AI_DEAD_ZONE:
            ai_paddle.velocity_y = -_AI_SPEED
        elif ball.y > paddle_centre + _AI_DEAD_ZONE:
            ai_paddle.velocity_y = _AI_SPEED
        else:
            ai_paddle.velocity_y = 0.0

        ai_paddle.y += ai_paddle.velocity_y * delta_time
        ai_paddle.y = _clamp(ai_paddle.y, 0.0, max_y)


class CollisionSystem:
    """Bounces the ball off the top and bottom walls and off the paddles."""

    def update(self, ball: Ball, player_paddle: Paddle, ai_paddle: Paddle, config: Config) -> None:
        half = config.ball_size / 2.0
        if ball.y <= half or ball.y >= config.window_height - half:
            ball.velocity_y = -ball.velocity_y

        self.check_paddle_collision(ball, player_paddle, config)
        self.check_paddle_collision(ball, ai_paddle, config)

    def check_paddle_collision(self, ball: Ball, paddle: Paddle, config: Config) -> None:
        """Reverse the ball if it overlaps the paddle, adding spin by hit position."""
        half = config.ball_size / 2.0
        overlaps = (
            ball.x + half >= paddle.x
            and ball.x - half <= paddle.x + config.paddle_width
            and ball.y + half >= paddle.y
            and ball.y - half <= paddle.y + config.paddle_height
        )
        if not overlaps:
            return
        ball.velocity_x = -ball.velocity_x
        half_height = config.paddle_height / 2.0
        hit_pos = (ball.y - (paddle.y + half_height)) / half_height
        ball.velocity_y += hit_pos * _SPIN_FACTOR

    def constrain_paddle(self, paddle: Paddle, config: Config) -> None:
        """Keep the paddle inside the window vertically."""
        max_y = config.window_height - config.paddle_height
        if paddle.y < 0.0:
            paddle.y = 0.0
        elif paddle.y > max_y:
            paddle.y = max_y


class ScoringSystem:
    """Awards a point when the ball leaves the field and serves it again."""

    def update(self, ball: Ball, score: Score, config: Config) -> None:
        if ball.x < 0.0:
            score.ai_scores()
        elif ball.x > config.window_width:
            score.player_scores()
        else:
            return
        ball.reset(config.window_width / 2.0, config.window_height / 2.0)