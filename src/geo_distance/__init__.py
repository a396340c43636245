"""Geodesic vs. Euclidean distance calculator."""

__version__ = "0.1.0"
