"""Solvers for Advent of Code 2023 (days 1-5) and 2024 (days 1-19) puzzles."""

__version__ = "0.1.0"