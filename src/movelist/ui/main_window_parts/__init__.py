"""Helpers split out of MainWindow to keep the window class small."""
