"""
Automata Actions

Listeners notified about a transition and about the lifecycle of the
animation it triggered. The dispatcher is passed into every hook so an
action can request further transitions from inside a callback.
"""

from typing import TYPE_CHECKING
from automata.animations.base import AnimationListener, BaseAnimation

if TYPE_CHECKING:
    from automata.engine.animation_automata import AnimationAutomata


class AutomataAction:
    """
    Base class for actions registered against a (before, after) transition

    All hooks are no-ops; override the ones you need.

    Example:
        class ShowSpinner(AutomataAction):
            def on_state_changed(self, automata, before, after):
                spinner.visible = True

            def on_animation_end(self, automata, animation):
                automata.goto_state(LOADED)
    """

    def on_state_changed(self, automata: "AnimationAutomata", before: int, after: int) -> None:
        pass

    def on_animation_start(self, automata: "AnimationAutomata", animation: BaseAnimation) -> None:
        pass

    def on_animation_repeat(self, automata: "AnimationAutomata", animation: BaseAnimation) -> None:
        pass

    def on_animation_end(self, automata: "AnimationAutomata", animation: BaseAnimation) -> None:
        pass

    def __repr__(self):
        return type(self).__name__


class ListenerAction(AutomataAction):
    """Adapts a bare AnimationListener; state changes are ignored"""

    def __init__(self, listener: AnimationListener):
        self.listener = listener

    def on_animation_start(self, automata, animation):
        self.listener.on_animation_start(animation)

    def on_animation_repeat(self, automata, animation):
        self.listener.on_animation_repeat(animation)

    def on_animation_end(self, automata, animation):
        self.listener.on_animation_end(animation)

    def __repr__(self):
        return f"ListenerAction({type(self.listener).__name__})"
