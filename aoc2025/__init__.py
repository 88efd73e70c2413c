"""Advent of Code 2025 solutions."""

__version__ = "0.1.0"
