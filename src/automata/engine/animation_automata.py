"""
Animation Automata

Decorates a state runner: watches its transitions and, for the (before, after)
pairs that have an animation registered, plays that animation on the bound
render target and notifies the transition's action chain.

Guarantees:
- One dispatch per issue id, however many paths report the same transition
- At most one animation in flight on the target; a new transition always
  cancels an unfinished one before anything else happens
- Action callbacks run in registration order and a failing action never
  stops the others
"""

from typing import Optional, Sequence, Union

from automata.animations.base import AnimationListener, BaseAnimation
from automata.engine.actions import AutomataAction, ListenerAction
from automata.engine.registry import ActionChain, ActionRegistry, AnimationRegistry
from automata.models.enums import LogCategory
from automata.models.errors import NoTargetError
from automata.runtime.state_runner import StateIO, StateRunner
from automata.utils.logger import get_logger

log = get_logger().for_category(LogCategory.TRANSITION)


class _ChainRelay(AnimationListener):
    """Routes lifecycle signals of one started animation to the chain captured at dispatch"""

    def __init__(self, automata: "AnimationAutomata", actions: Sequence[AutomataAction]):
        self.automata = automata
        self.actions = actions

    def on_animation_start(self, animation):
        self.automata._invoke_chain(self.actions, "on_animation_start", animation)

    def on_animation_repeat(self, animation):
        self.automata._invoke_chain(self.actions, "on_animation_repeat", animation)

    def on_animation_end(self, animation):
        self.automata._invoke_chain(self.actions, "on_animation_end", animation)


class AnimationAutomata(StateIO):
    """
    Transition → animation dispatcher wrapping a StateIO

    Example:
        automata = (
            AnimationAutomata.refer(runner)
            .bind_target(panel)
            .register_animation(HIDDEN, VISIBLE, fade_in)
            .register_action(HIDDEN, VISIBLE, ShowContent())
        )
        runner.add_sublevel(automata)

        runner.goto_state(VISIBLE)   # fade_in starts on panel, ShowContent notified
    """

    @classmethod
    def refer(cls, sio: Optional[StateIO] = None) -> "AnimationAutomata":
        """Wrap `sio`, or a fresh StateRunner when none is given"""
        if sio is None:
            sio = StateRunner()
        return cls(sio)

    def __init__(self, sio: StateIO):
        self._runner = sio
        self._target = None
        self._last_issue: Optional[int] = None
        self._animations = AnimationRegistry()
        self._actions = ActionRegistry()
        self._current: Optional[BaseAnimation] = None

    # ============================================================
    # Setup
    # ============================================================

    @property
    def runner(self) -> StateIO:
        return self._runner

    @property
    def target(self):
        return self._target

    @property
    def current_animation(self) -> Optional[BaseAnimation]:
        return self._current

    def bind_target(self, target) -> "AnimationAutomata":
        """Attach the render target; may happen before or after registrations"""
        self._target = target
        return self

    def register_action(
        self,
        before: int,
        after: int,
        action: Union[AutomataAction, AnimationListener]
    ) -> "AnimationAutomata":
        """
        Append an action to the transition's chain

        Duplicates are allowed and run once per registration. A bare
        AnimationListener is wrapped in a ListenerAction.
        """
        if not isinstance(action, AutomataAction):
            action = ListenerAction(action)
        self._actions.add(before, after, action)
        return self

    def register_animation(self, before: int, after: int, animation: BaseAnimation) -> "AnimationAutomata":
        """
        Set the animation played for the transition, replacing any previous one

        The automata owns the handle's listener from now on; do not set your
        own, register an action instead.
        """
        self._animations.put(before, after, animation)
        return self

    def animation_for(self, before: int, after: int) -> Optional[BaseAnimation]:
        return self._animations.get(before, after)

    def actions_for(self, before: int, after: int) -> ActionChain:
        return self._actions.get(before, after)

    # ============================================================
    # Dispatch
    # ============================================================

    def on_transition(self, before: int, after: int, issue_id: int) -> None:
        if issue_id == self._last_issue:
            log.debug("Duplicate transition ignored", before=before, after=after, issue=issue_id)
            return
        self._last_issue = issue_id

        animation = self._animations.get(before, after)
        if animation is None:
            log.debug("No animation for transition", before=before, after=after)
            return

        if self._target is None:
            raise NoTargetError(before, after)

        self._cancel_current()

        actions = self._actions.get(before, after).snapshot()
        self._invoke_chain(actions, "on_state_changed", before, after)

        animation.set_animation_listener(_ChainRelay(self, actions))

        # An action may have started another transition from its callback
        if self._current is not animation:
            self._cancel_current()

        self._current = animation
        log.info(
            "Starting animation",
            category=LogCategory.ANIMATION,
            transition=f"{before} → {after}",
            animation=animation,
            actions=len(actions)
        )
        self._target.start_animation(animation)

    def _cancel_current(self) -> None:
        current = self._current
        if current is None or current.has_ended():
            return
        log.info("Cancelling unfinished animation", category=LogCategory.ANIMATION, animation=current)
        self._current = None
        current.cancel()
        self._target.clear_animation()

    def _invoke_chain(self, actions: Sequence[AutomataAction], hook: str, *args) -> None:
        for action in actions:
            try:
                getattr(action, hook)(self, *args)
            except Exception as ex:
                log.error(
                    "Action callback failed",
                    category=LogCategory.ACTION,
                    action=action,
                    hook=hook,
                    exception=ex
                )

    # ============================================================
    # StateIO passthrough
    # ============================================================

    def goto_state(self, to: int) -> "AnimationAutomata":
        self._runner.goto_state(to)
        return self

    def current_state(self) -> int:
        return self._runner.current_state()

    def add_sublevel(self, sio: StateIO) -> "AnimationAutomata":
        self._runner.add_sublevel(sio)
        return self

    def remove_sublevel(self, sio: StateIO) -> bool:
        return self._runner.remove_sublevel(sio)

    def clear_sublevels(self) -> "AnimationAutomata":
        self._runner.clear_sublevels()
        return self

    def __repr__(self):
        return (
            f"AnimationAutomata(state={self._runner.current_state()}, "
            f"animations={len(self._animations)}, target={self._target!r})"
        )
