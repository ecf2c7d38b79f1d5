"""
Core abstractions for Grid Snake.

Provides the interfaces the game loop talks to for drawing and input.
"""

from .renderer_interface import RendererInterface
from .input_interface import InputSource

__all__ = [
    'RendererInterface',
    'InputSource',
]
