"""
Core graph data structure.

This module contains the Graph container and its mutation API.
"""

from .graph import Graph

__all__ = ['Graph']
