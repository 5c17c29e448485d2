"""Trend discovery and ranking."""
