"""Tile-grid adventure runtime: game modes over a debounced grid walker."""

__version__ = "0.1.0"
