# pongengine

A compact Pong game. You control the left paddle and play against a simple
computer opponent on the right. Each frame is drawn into an in-memory frame
buffer of `0xRRGGBB` pixels: the paddles, the ball, a dashed centre line,
seven-segment score digits and bitmap "PLAYER" / "AI" labels. The frame is
then shown in a window through pygame.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Playing

```
pongengine
```

The command takes no options besides `--help`. It prints `Welcome to Pong!`
and opens an 800x600 window.

Controls:

- **Up** or **W** moves your paddle up.
- **Down** or **S** moves your paddle down.
- **Escape**, or closing the window, quits.

The computer's paddle follows the ball at a fixed speed. The ball bounces off
the top and bottom walls and off the paddles; where it hits a paddle changes
its vertical speed. When the ball leaves the field on the left, the computer
scores; on the right, you score. The ball is then served again from the
centre, heading back the way it came.

Each score is shown as its last decimal digit. Once either side has 10 points
or more and is ahead, a "WINNER!" label appears under that side's score.

## Using the pieces

The game logic does not need a window:

```python
from pongengine.components import Ball, Paddle, Score
from pongengine.config import Config
from pongengine.systems import CollisionSystem, MovementSystem, ScoringSystem

config = Config()
ball = Ball(400.0, 300.0)
player = Paddle(50.0, 250.0, True)
ai = Paddle(750.0, 250.0, False)
score = Score()

MovementSystem().update(ball, player, ai, 1 / 60, config)
CollisionSystem().update(ball, player, ai, config)
ScoringSystem().update(ball, score, config)
```

- `pongengine.components` — `Ball`, `Paddle` and `Score` dataclasses.
- `pongengine.config` — `Config`, a frozen dataclass of game settings
  (window size, paddle and ball sizes, paddle speed, frame-rate target, ...).
- `pongengine.systems` — `MovementSystem`, `CollisionSystem` and
  `ScoringSystem`.
- `pongengine.timer` — `Timer`, which measures the time between frames and
  accepts a nanosecond clock function for testing.
- `pongengine.framebuffer` — `FrameBuffer`, with `clear`, `get_pixel`,
  `draw_rect`, `draw_center_line`, `draw_digital_number`, `draw_char` and
  `draw_text_label`.
- `pongengine.render` — `Renderer`, which draws paddles, the ball and the
  score onto its `frame`.
- `pongengine.engine` — `Engine`, which adds the window, keyboard input and
  frame timing. It takes an optional `window` (anything with `is_open`,
  `is_key_down`, `update` and `close`) and `timer`, so it can run without
  pygame's display. It is also a context manager that closes its window.
- `pongengine.app` — `run_frame` advances and draws one frame; `main` is the
  `pongengine` command.

## Limits

- The game never ends on its own; it runs until you quit.
- Colours are fixed in the renderer. The colour, font and score-position
  fields of `Config` are stored but not used for drawing, and text is drawn
  with a small built-in bitmap font that only knows the letters it needs.
- There is no sound, menu, pause or saved state.

## Running the tests

```
pytest
```