"""
Enums for the animation automata
"""

from enum import Enum, auto


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """
    Log categories

    CONFIG: YAML loading and validation
    STATE: State runner transitions and sublevels
    ANIMATION: Animation start / cancel on the render target
    TRANSITION: Dispatcher bookkeeping (issue ids, registry lookups)
    ACTION: Action chain callbacks and their failures
    SYSTEM: Everything else
    """
    CONFIG = auto()
    STATE = auto()
    ANIMATION = auto()
    TRANSITION = auto()
    ACTION = auto()
    SYSTEM = auto()


class AnimationSignal(Enum):
    """Lifecycle signals an animation engine reports for a started animation"""
    STARTED = auto()
    REPEATED = auto()
    ENDED = auto()
