"""visualtimer - a frame-driven countdown timer for visual displays."""

__version__ = "0.1.0"
