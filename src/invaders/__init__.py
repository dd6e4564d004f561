"""Grid Invaders - terminal arcade shooter built on a deterministic tick engine."""

__version__ = "0.1.0"
