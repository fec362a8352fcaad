"""Vectors, regions, input definitions, resources, sprite batching and collision rules for a 2D shooter."""

__version__ = "0.1.0"