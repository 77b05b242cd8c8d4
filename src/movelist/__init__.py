"""Movelist — click-driven chessboard move recorder."""

__version__ = "0.1.0"
