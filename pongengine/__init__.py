"""A small Pong game: components, systems, a software frame buffer and a pygame window."""

__version__ = "0.1.0"