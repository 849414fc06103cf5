"""Threaded dining philosophers simulation: argument parsing, the table and a command."""

__version__ = "0.1.0"
__all__ = ["args", "simulation", "cli"]