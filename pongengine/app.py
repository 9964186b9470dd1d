"""The game loop and its command."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .components import Ball, Paddle, Score
from .config import Config
from .engine import Engine
from .systems import CollisionSystem, MovementSystem, ScoringSystem


def run_frame(
    engine: Engine,
    ball: Ball,
    player_paddle: Paddle,
    ai_paddle: Paddle,
    score: Score,
    systems: tuple[MovementSystem, CollisionSystem, ScoringSystem],
) -> float:
    """Advance the game by one frame and show it; return the frame's delta time."""
    movement, collision, scoring = systems
    delta_time = engine.get_delta_time()

    engine.handle_input(player_paddle)

    movement.update(ball, player_paddle, ai_paddle, delta_time, engine.config)
    collision.update(ball, player_paddle, ai_paddle, engine.config)
    scoring.update(ball, score, engine.config)

    engine.clear()
    engine.render_paddle(player_paddle)
    engine.render_paddle(ai_paddle)
    engine.render_ball(ball)
    engine.render_score(score)
    engine.present()
    return delta_time


def main(argv: Sequence[str] | None = None) -> int:
    """Play Pong until the window is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(
        prog="pongengine",
        description="Play Pong: W/S or the arrow keys move your paddle, Escape quits.",
    )
    parser.parse_args(argv)

    ball = Ball(400.0, 300.0)
    player_paddle = Paddle(50.0, 250.0, True)
    ai_paddle = Paddle(750.0, 250.0, False)
    score = Score()
    systems = (MovementSystem(), CollisionSystem(), ScoringSystem())

    print("Welcome to Pong!")
    with Engine(Config()) as engine:
        while engine.is_running():
            run_frame(engine, ball, player_paddle, ai_paddle, score, systems)
    return 0