"""
Graph analysis modules.

This module contains depth-first traversal.
"""

from .traversal import DepthFirstTraversal

__all__ = ['DepthFirstTraversal']
