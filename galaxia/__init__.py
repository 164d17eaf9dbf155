"""Galaxia Classic front end: player sign-in, saved level progress and a title menu."""

__version__ = "0.1.0"