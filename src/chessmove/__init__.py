"""chessmove: piece-movement legality engine."""

__version__ = "0.1.0"
