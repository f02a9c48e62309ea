"""
Models package - Data models for the animation automata
"""

from .enums import LogLevel, LogCategory, AnimationSignal
from .transition import TransitionKey, pack_transition
from .errors import AutomataError, NoTargetError, ConfigError, AnimationNotFoundError

__all__ = [
    'LogLevel',
    'LogCategory',
    'AnimationSignal',
    'TransitionKey',
    'pack_transition',
    'AutomataError',
    'NoTargetError',
    'ConfigError',
    'AnimationNotFoundError',
]
