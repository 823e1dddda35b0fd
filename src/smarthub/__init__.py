"""In-memory coordination core for a single-household smart-device hub."""

__version__ = "0.1.0"
