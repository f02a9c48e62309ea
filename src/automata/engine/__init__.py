"""
Transition dispatch engine
"""

from .actions import AutomataAction, ListenerAction
from .registry import ActionChain, ActionRegistry, AnimationRegistry
from .animation_automata import AnimationAutomata

__all__ = [
    "AutomataAction",
    "ListenerAction",
    "ActionChain",
    "ActionRegistry",
    "AnimationRegistry",
    "AnimationAutomata",
]
