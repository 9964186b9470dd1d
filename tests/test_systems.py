import dataclasses

import pytest

from pongengine.components import Ball, Paddle, Score
from pongengine.config import Config
from pongengine.systems import CollisionSystem, MovementSystem, ScoringSystem


@pytest.fixture
def config():
    return Config()


def test_movement_with_zero_time_keeps_positions(config):
    ball = Ball(400.0, 300.0)
    player = Paddle(50.0, 250.0, True)
    ai = Paddle(750.0, 250.0)
    MovementSystem().update(ball, player, ai, 0.0, config)
    assert (ball.x, ball.y) == (400.0, 300.0)
    assert player.y == 250.0
    assert ai.y == 250.0


def test_ball_moves_by_velocity(config):
    ball = Ball(400.0, 300.0)
    MovementSystem().update(ball, Paddle(50.0, 250.0, True), Paddle(750.0, 250.0), 0.5, config)
    assert ball.x == pytest.approx(500.0)
    assert ball.y == pytest.approx(350.0)


def test_ai_holds_when_ball_is_centred(config):
    ai = Paddle(750.0, 250.0)
    MovementSystem().update(Ball(400.0, 300.0), Paddle(50.0, 250.0, True), ai, 0.0, config)
    assert ai.velocity_y == 0.0


def test_ai_moves_down_towards_ball(config):
    ai = Paddle(750.0, 0.0)
    MovementSystem().update(Ball(400.0, 300.0), Paddle(50.0, 250.0, True), ai, 0.0, config)
    assert ai.velocity_y == 200.0


def test_ai_moves_up_towards_ball(config):
    ai = Paddle(750.0, 250.0)
    ball = Ball(400.0, 20.0, velocity_x=0.0, velocity_y=0.0)
    MovementSystem().update(ball, Paddle(50.0, 250.0, True), ai, 0.1, config)
    assert ai.velocity_y == -200.0
    assert ai.y < 250.0


def test_player_paddle_clamped_at_top(config):
    player = Paddle(50.0, 10.0, True, velocity_y=-300.0)
    MovementSystem().update(Ball(400.0, 300.0), player, Paddle(750.0, 250.0), 1.0, config)
    assert player.y == 0.0


def test_player_paddle_clamped_at_bottom(config):
    player = Paddle(50.0, 490.0, True, velocity_y=300.0)
    MovementSystem().update(Ball(400.0, 300.0), player, Paddle(750.0, 250.0), 1.0, config)
    assert player.y == config.window_height - config.paddle_height


def test_movement_rejects_window_smaller_than_paddle():
    small = dataclasses.replace(Config(), window_height=50)
    with pytest.raises(ValueError):
        MovementSystem().update(
            Ball(10.0, 10.0), Paddle(0.0, 0.0, True), Paddle(40.0, 0.0), 0.0, small
        )


@pytest.mark.parametrize("y", [5.0, 595.0])
def test_wall_bounce_reverses_vertical_velocity(config, y):
    ball = Ball(400.0, y, velocity_y=-80.0)
    CollisionSystem().update(ball, Paddle(50.0, 250.0, True), Paddle(750.0, 250.0), config)
    assert ball.velocity_y == 80.0
    assert ball.velocity_x == 200.0


def test_ball_in_open_field_is_untouched(config):
    ball = Ball(400.0, 300.0)
    CollisionSystem().update(ball, Paddle(50.0, 250.0, True), Paddle(750.0, 250.0), config)
    assert (ball.velocity_x, ball.velocity_y) == (200.0, 100.0)


def test_centre_hit_reverses_without_spin(config):
    ball = Ball(60.0, 300.0, velocity_x=-200.0, velocity_y=100.0)
    CollisionSystem().check_paddle_collision(ball, Paddle(50.0, 250.0, True), config)
    assert ball.velocity_x == 200.0
    assert ball.velocity_y == 100.0


def test_edge_hit_adds_full_spin(config):
    ball = Ball(60.0, 350.0, velocity_x=-200.0, velocity_y=100.0)
    CollisionSystem().check_paddle_collision(ball, Paddle(50.0, 250.0, True), config)
    assert ball.velocity_x == 200.0
    assert ball.velocity_y == pytest.approx(200.0)


def test_top_half_hit_spins_upwards(config):
    ball = Ball(60.0, 260.0, velocity_y=0.0)
    CollisionSystem().check_paddle_collision(ball, Paddle(50.0, 250.0, True), config)
    assert ball.velocity_y < 0.0


def test_miss_leaves_ball_alone(config):
    ball = Ball(60.0, 100.0)
    CollisionSystem().check_paddle_collision(ball, Paddle(50.0, 250.0, True), config)
    assert (ball.velocity_x, ball.velocity_y) == (200.0, 100.0)


def test_constrain_paddle_limits(config):
    system = CollisionSystem()
    above = Paddle(50.0, -5.0)
    below = Paddle(50.0, 1000.0)
    inside = Paddle(50.0, 250.0)
    system.constrain_paddle(above, config)
    system.constrain_paddle(below, config)
    system.constrain_paddle(inside, config)
    assert above.y == 0.0
    assert below.y == config.window_height - config.paddle_height
    assert inside.y == 250.0


def test_ball_past_left_edge_scores_for_ai(config):
    ball = Ball(-1.0, 50.0)
    score = Score()
    ScoringSystem().update(ball, score, config)
    assert (score.player_score, score.ai_score) == (0, 1)
    assert (ball.x, ball.y) == (400.0, 300.0)
    assert ball.velocity_x == -200.0


def test_ball_past_right_edge_scores_for_player(config):
    ball = Ball(801.0, 50.0, velocity_x=-200.0)
    score = Score()
    ScoringSystem().update(ball, score, config)
    assert (score.player_score, score.ai_score) == (1, 0)
    assert (ball.x, ball.y) == (400.0, 300.0)
    assert ball.velocity_x == 200.0


@pytest.mark.parametrize("x", [0.0, 400.0, 800.0])
def test_ball_in_field_scores_nothing(config, x):
    ball = Ball(x, 123.0)
    score = Score()
    ScoringSystem().update(ball, score, config)
    assert score == Score()
    assert (ball.x, ball.y) == (x, 123.0)