"""Inverted word index over text files, with search, save, reload and an interactive menu."""

__version__ = "0.1.0"
__all__ = ["index", "storage", "cli"]