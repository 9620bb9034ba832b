"""Algorithms and data structures for graphs, strings, number theory and more."""

__version__ = "0.1.0"