"""
Graph operation modules.

This module contains text serialization of whole graphs.
"""

from .serialization import GraphSerializer, DELIMITER

__all__ = ['GraphSerializer', 'DELIMITER']
