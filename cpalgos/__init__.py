"""Competitive-programming algorithms and data structures: tries, sieves, segment trees, LCA, graph and string algorithms."""

__version__ = "0.1.0"