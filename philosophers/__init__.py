"""Threaded dining philosophers simulation with a command-line entry point."""

__version__ = "1.0.0"
__all__ = ["cli", "config", "simulation", "utils"]