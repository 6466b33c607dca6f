"""Dining philosophers simulation: argument parsing, philosopher threads and a death monitor."""

__version__ = "0.1.0"
__all__ = ["parsing", "simulation"]