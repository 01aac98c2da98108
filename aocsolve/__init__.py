"""Solvers for the 2025 Advent of Code puzzles, days one to six."""

__version__ = "0.1.0"

__all__ = ["day1", "day2", "day3", "day4", "day5", "day6"]