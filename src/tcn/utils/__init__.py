"""Codec building blocks: squares, moves, the TCN alphabet, configuration."""
