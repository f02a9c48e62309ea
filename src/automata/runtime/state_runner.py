"""
State Runner

StateIO is the contract shared by anything that tracks a current state and
takes part in transition fan-out. StateRunner is the plain implementation:
it stores the state, stamps every transition with a process-wide issue id
and relays it to its sublevels.

Example:
    runner = StateRunner(initial=HIDDEN)
    automata = AnimationAutomata.refer(runner)
    runner.add_sublevel(automata)

    runner.goto_state(VISIBLE)   # automata.on_transition(HIDDEN, VISIBLE, issue_id)
"""

import itertools
from abc import ABC, abstractmethod
from typing import List, Tuple

from automata.models.enums import LogCategory
from automata.utils.logger import get_category_logger

log = get_category_logger(LogCategory.STATE)

# Shared by every runner so two distinct transitions never carry the same id
_issue_ids = itertools.count(1)


def next_issue_id() -> int:
    return next(_issue_ids)


class StateIO(ABC):
    """Capability set of a state runner"""

    @abstractmethod
    def goto_state(self, to: int) -> "StateIO":
        """Request a transition to `to`"""

    @abstractmethod
    def current_state(self) -> int:
        """Current state identifier"""

    @abstractmethod
    def add_sublevel(self, sio: "StateIO") -> "StateIO":
        """Subscribe `sio` to this runner's transitions"""

    @abstractmethod
    def remove_sublevel(self, sio: "StateIO") -> bool:
        """Unsubscribe `sio`; True if it was subscribed"""

    @abstractmethod
    def clear_sublevels(self) -> "StateIO":
        """Unsubscribe every sublevel"""

    @abstractmethod
    def on_transition(self, before: int, after: int, issue_id: int) -> None:
        """A transition happened upstream"""


class StateRunner(StateIO):
    """
    Reference state runner

    Transitions are not validated; any target state is accepted, including
    the current one. Sublevels are notified synchronously in subscription
    order and their exceptions propagate to the goto_state() caller.
    """

    def __init__(self, initial: int = 0):
        self._state = initial
        self._sublevels: List[StateIO] = []
        self._last_issue = None

    @property
    def sublevels(self) -> Tuple[StateIO, ...]:
        return tuple(self._sublevels)

    def goto_state(self, to: int) -> "StateRunner":
        before = self._state
        self._state = to
        issue_id = next_issue_id()
        self._last_issue = issue_id
        log.debug("State transferred", before=before, after=to, issue=issue_id)
        self._relay(before, to, issue_id)
        return self

    def current_state(self) -> int:
        return self._state

    def add_sublevel(self, sio: StateIO) -> "StateRunner":
        if sio is self:
            raise ValueError("A state runner cannot be its own sublevel")
        if sio not in self._sublevels:
            self._sublevels.append(sio)
        return self

    def remove_sublevel(self, sio: StateIO) -> bool:
        if sio in self._sublevels:
            self._sublevels.remove(sio)
            return True
        return False

    def clear_sublevels(self) -> "StateRunner":
        self._sublevels.clear()
        return self

    def on_transition(self, before: int, after: int, issue_id: int) -> None:
        # Re-propagate upstream events, once per issue
        if issue_id == self._last_issue:
            return
        self._last_issue = issue_id
        self._relay(before, after, issue_id)

    def _relay(self, before: int, after: int, issue_id: int) -> None:
        for sio in list(self._sublevels):
            sio.on_transition(before, after, issue_id)

    def __repr__(self):
        return f"StateRunner(state={self._state}, sublevels={len(self._sublevels)})"
