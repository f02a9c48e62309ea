"""
Animation Automata - transition-driven animation dispatch for state runners
"""

from automata.animations.base import AnimationListener, BaseAnimation, AnimationTarget
from automata.engine.actions import AutomataAction, ListenerAction
from automata.engine.animation_automata import AnimationAutomata
from automata.models.errors import AutomataError, NoTargetError, ConfigError, AnimationNotFoundError
from automata.models.transition import TransitionKey, pack_transition
from automata.runtime.state_runner import StateIO, StateRunner

__version__ = "0.1.0"

__all__ = [
    "AnimationListener",
    "BaseAnimation",
    "AnimationTarget",
    "AutomataAction",
    "ListenerAction",
    "AnimationAutomata",
    "AutomataError",
    "NoTargetError",
    "ConfigError",
    "AnimationNotFoundError",
    "TransitionKey",
    "pack_transition",
    "StateIO",
    "StateRunner",
]
