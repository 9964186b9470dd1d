"""Game settings."""

from __future__ import annotations

from dataclasses import dataclass

Color = tuple[float, float, float, float]
Point = tuple[float, float]

_WHITE: Color = (1.0, 1.0, 1.0, 1.0)
_BLACK: Color = (0.0, 0.0, 0.0, 1.0)
_FONT = "assets/fonts/Roboto-Regular.ttf"


@dataclass(frozen=True)
class Config:
    """Window, object and display settings; colours are RGBA."""

    window_width: int = 800
    window_height: int = 600
    window_title: str = "Ping Pong"
    paddle_speed: float = 300.0
    ball_speed: float = 200.0
    ball_radius: float = 10.0
    paddle_width: float = 20.0
    paddle_height: float = 100.0
    ball_color: Color = _WHITE
    paddle_color: Color = _WHITE
    ball_size: float = 10.0
    fps_target: int = 60
    background_color: Color = _BLACK
    font_path: str = _FONT
    font_size: int = 48
    score_color: Color = _WHITE
    score_position: Point = (400.0, 50.0)
    score_font_size: int = 48
    score_spacing: float = 10.0
    score_font_path: str = _FONT
    score_font_color: Color = _WHITE
    score_font_outline_color: Color = _BLACK
    score_font_outline_thickness: float = 2.0
    score_font_outline_offset: Point = (1.0, 1.0)