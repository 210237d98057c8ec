"""Filler game robot that chooses piece placements, and a pygame board visualizer."""

__version__ = "0.1.0"