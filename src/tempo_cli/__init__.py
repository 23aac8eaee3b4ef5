"""tempo - an energy-aware task manager for the terminal."""

__version__ = "0.1.0"
