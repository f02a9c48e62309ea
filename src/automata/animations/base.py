"""
Base Animation Classes

The automata never interpolates or renders anything itself. It only needs
an animation handle that reports lifecycle signals to one listener, and a
render target that hosts one animation at a time.

Engines adapt their own animation objects to BaseAnimation by calling
start(), repeat() and end() as the animation progresses.
"""

from typing import Optional
from automata.models.enums import AnimationSignal


class AnimationListener:
    """
    Receiver for animation lifecycle signals

    Subclasses override the hooks they care about; the rest are no-ops.
    """

    def on_animation_start(self, animation: "BaseAnimation") -> None:
        pass

    def on_animation_repeat(self, animation: "BaseAnimation") -> None:
        pass

    def on_animation_end(self, animation: "BaseAnimation") -> None:
        pass


class BaseAnimation:
    """
    Opaque animation handle

    Holds exactly one listener. Setting a new listener replaces the previous one.

    Signals:
    - start(): animation began (resets a previously ended handle)
    - repeat(): one repetition finished, another one starts
    - end(): animation finished
    - cancel(): stop early; a started animation still reports end() once

    Signals arriving after the animation ended are ignored.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name or type(self).__name__
        self._listener: Optional[AnimationListener] = None
        self._started = False
        self._ended = False
        self._cancelled = False

    def set_animation_listener(self, listener: Optional[AnimationListener]) -> None:
        self._listener = listener

    @property
    def listener(self) -> Optional[AnimationListener]:
        return self._listener

    def has_started(self) -> bool:
        return self._started

    def has_ended(self) -> bool:
        return self._ended

    def is_cancelled(self) -> bool:
        return self._cancelled

    # ------------------------------------------------------------
    # Engine-facing signals
    # ------------------------------------------------------------

    def start(self) -> None:
        self._started = True
        self._ended = False
        self._cancelled = False
        self._emit(AnimationSignal.STARTED)

    def repeat(self) -> None:
        if not self._started or self._ended:
            return
        self._emit(AnimationSignal.REPEATED)

    def end(self) -> None:
        if not self._started or self._ended:
            return
        self._ended = True
        self._emit(AnimationSignal.ENDED)

    def cancel(self) -> None:
        if self._ended:
            return
        self._cancelled = True
        if self._started:
            self.end()
        else:
            self._ended = True

    def _emit(self, signal: AnimationSignal) -> None:
        listener = self._listener
        if listener is None:
            return
        if signal is AnimationSignal.STARTED:
            listener.on_animation_start(self)
        elif signal is AnimationSignal.REPEATED:
            listener.on_animation_repeat(self)
        else:
            listener.on_animation_end(self)

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r}, started={self._started}, ended={self._ended})"


class AnimationTarget:
    """
    Render target hosting at most one animation

    start_animation() replaces whatever is attached and signals start.
    Any object exposing start_animation(animation) and clear_animation()
    can be bound to the automata instead.
    """

    def __init__(self, name: str = "target"):
        self.name = name
        self._animation: Optional[BaseAnimation] = None

    @property
    def animation(self) -> Optional[BaseAnimation]:
        return self._animation

    def start_animation(self, animation: BaseAnimation) -> None:
        self._animation = animation
        animation.start()

    def clear_animation(self) -> None:
        self._animation = None

    def __repr__(self):
        return f"AnimationTarget({self.name!r}, animation={self._animation!r})"
