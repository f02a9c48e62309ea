"""
Animation handles and render targets
"""

from .base import AnimationListener, BaseAnimation, AnimationTarget

__all__ = ['AnimationListener', 'BaseAnimation', 'AnimationTarget']
