"""Reelforge: short-form video content automation."""

__version__ = "0.1.0"
