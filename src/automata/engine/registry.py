"""
Transition registries

Both registries are keyed by the packed (before, after) transition and are
append/overwrite only. Nothing is ever removed automatically.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from automata.animations.base import BaseAnimation
from automata.engine.actions import AutomataAction
from automata.models.transition import TransitionKey


class ActionChain:
    """Ordered actions for one transition; registration order is invocation order"""

    def __init__(self):
        self._actions: List[AutomataAction] = []

    def append(self, action: AutomataAction) -> None:
        self._actions.append(action)

    def snapshot(self) -> Tuple[AutomataAction, ...]:
        """Freeze the current contents for routing callbacks of one dispatch"""
        return tuple(self._actions)

    def __iter__(self) -> Iterator[AutomataAction]:
        return iter(self._actions)

    def __len__(self) -> int:
        return len(self._actions)

    def __repr__(self):
        return f"ActionChain({self._actions!r})"


class ActionRegistry:
    """Transition → ActionChain"""

    def __init__(self):
        self._chains: Dict[int, ActionChain] = {}

    def add(self, before: int, after: int, action: AutomataAction) -> None:
        key = TransitionKey(before, after).packed
        chain = self._chains.get(key)
        if chain is None:
            chain = ActionChain()
            self._chains[key] = chain
        chain.append(action)

    def get(self, before: int, after: int) -> ActionChain:
        """Chain for the transition; an empty chain if nothing was registered"""
        chain = self._chains.get(TransitionKey(before, after).packed)
        return chain if chain is not None else ActionChain()

    def __len__(self) -> int:
        return len(self._chains)


class AnimationRegistry:
    """Transition → animation handle (last write wins)"""

    def __init__(self):
        self._animations: Dict[int, BaseAnimation] = {}

    def put(self, before: int, after: int, animation: BaseAnimation) -> None:
        self._animations[TransitionKey(before, after).packed] = animation

    def get(self, before: int, after: int) -> Optional[BaseAnimation]:
        return self._animations.get(TransitionKey(before, after).packed)

    def __contains__(self, transition: Tuple[int, int]) -> bool:
        return TransitionKey(*transition).packed in self._animations

    def __len__(self) -> int:
        return len(self._animations)
