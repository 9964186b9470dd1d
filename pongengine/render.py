"""Draws the game objects into a frame buffer."""

from __future__ import annotations

from .components import Ball, Paddle, Score
from .config import Config
from .framebuffer import FrameBuffer, to_pixel

OBJECT_COLOR = 0xFFFFFF
LABEL_COLOR = 0xCCCCCC
WINNER_COLOR = 0x00FF00
BACKGROUND_COLOR = 0x000000

_SCORE_Y = 80.0
_DIGIT_WIDTH = 40.0
_DIGIT_HEIGHT = 60.0
_SEGMENT_THICKNESS = 6
_WINNING_SCORE = 10


class Renderer:
    """Renders paddles, ball and score with the sizes from a ``Config``."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.frame = FrameBuffer(config.window_width, config.window_height)

    def clear(self) -> None:
        """Paint the background."""
        self.frame.clear(BACKGROUND_COLOR)

    def render_paddle(self, paddle: Paddle) -> None:
        self.frame.draw_rect(
            to_pixel(paddle.x),
            to_pixel(paddle.y),
            to_pixel(self.config.paddle_width),
            to_pixel(self.config.paddle_height),
            OBJECT_COLOR,
        )

    def render_ball(self, ball: Ball) -> None:
        half = self.config.ball_size / 2.0
        size = to_pixel(self.config.ball_size)
        self.frame.draw_rect(
            to_pixel(ball.x - half), to_pixel(ball.y - half), size, size, OBJECT_COLOR
        )

    def render_score(self, score: Score) -> None:
        """Draw the centre line, both scores, their labels and a winner banner."""
        self.frame.draw_center_line()

        width = float(self.config.window_width)
        player_x = width * 0.25 - _DIGIT_WIDTH / 2.0
        ai_x = width * 0.75 - _DIGIT_WIDTH / 2.0

        for value, x in ((score.player_score, player_x), (score.ai_score, ai_x)):
            self.frame.draw_digital_number(
                value, x, _SCORE_Y, _DIGIT_WIDTH, _DIGIT_HEIGHT, _SEGMENT_THICKNESS
            )

        self.frame.draw_text_label("PLAYER", player_x, _SCORE_Y - 40.0, LABEL_COLOR)
        self.frame.draw_text_label(
            "AI", ai_x + _DIGIT_WIDTH / 4.0, _SCORE_Y - 40.0, LABEL_COLOR
        )

        if max(score.player_score, score.ai_score) >= _WINNING_SCORE:
            if score.player_score > score.ai_score:
                winner_x = player_x
            elif score.ai_score > score.player_score:
                winner_x = ai_x
            else:
                return
            self.frame.draw_text_label(
                "WINNER!", winner_x - 10.0, _SCORE_Y + 80.0, WINNER_COLOR
            )