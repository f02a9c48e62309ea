"""
Animation Manager - Named animation factories

Config files refer to animations by name. Each transition needs its own
handle (the automata owns the handle's listener), so the manager stores
factories and builds a fresh animation on every create().
"""

from typing import Callable, Dict, List

from automata.animations.base import BaseAnimation
from automata.models.enums import LogCategory
from automata.models.errors import AnimationNotFoundError
from automata.utils.logger import get_logger

log = get_logger().for_category(LogCategory.ANIMATION)

AnimationFactory = Callable[[], BaseAnimation]


class AnimationManager:
    """
    Registry of animation factories

    Example:
        animations = AnimationManager()
        animations.register("FADE_IN", lambda: FadeAnimation(duration_ms=300))

        fade = animations.create("FADE_IN")
    """

    def __init__(self):
        self._factories: Dict[str, AnimationFactory] = {}

    def register(self, name: str, factory: AnimationFactory) -> "AnimationManager":
        """Register a factory under `name`. Overwrites if already registered."""
        key = name.upper()
        if key in self._factories:
            log.warn(f"Animation factory '{key}' replaced")
        self._factories[key] = factory
        log.debug(f"Registered animation factory: {key}")
        return self

    def create(self, name: str) -> BaseAnimation:
        """
        Build a new animation handle

        Raises:
            AnimationNotFoundError: If no factory is registered under `name`
        """
        factory = self._factories.get(name.upper())
        if factory is None:
            raise AnimationNotFoundError(name)
        return factory()

    def has(self, name: str) -> bool:
        return name.upper() in self._factories

    def names(self) -> List[str]:
        return list(self._factories)
