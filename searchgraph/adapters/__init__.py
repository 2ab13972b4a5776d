"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces that
consume the graph core:
- Path solvers (breadth-first, depth-first)
"""
