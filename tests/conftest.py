import pytest
from unittest.mock import MagicMock

from automata.animations.base import BaseAnimation
from automata.engine.actions import AutomataAction
from automata.engine.animation_automata import AnimationAutomata
from automata.runtime.state_runner import StateRunner
from automata.utils.logger import configure_logger


class RecordingAction(AutomataAction):
    """Appends (label, hook, args) to a shared journal for every callback."""

    def __init__(self, label, journal):
        self.label = label
        self.journal = journal

    def on_state_changed(self, automata, before, after):
        self.journal.append((self.label, "state_changed", before, after))

    def on_animation_start(self, automata, animation):
        self.journal.append((self.label, "start", animation))

    def on_animation_repeat(self, automata, animation):
        self.journal.append((self.label, "repeat", animation))

    def on_animation_end(self, automata, animation):
        self.journal.append((self.label, "end", animation))


@pytest.fixture(autouse=True)
def reset_logger():
    """Keep logger singleton changes from leaking between tests."""
    yield
    configure_logger()


@pytest.fixture
def journal():
    return []


@pytest.fixture
def mock_target():
    return MagicMock()


@pytest.fixture
def make_mock_animation():
    """Factory for unfinished animation doubles."""
    def _make(name="anim"):
        anim = MagicMock(spec=BaseAnimation)
        anim.has_ended.return_value = False
        anim.configure_mock(name=name)
        return anim
    return _make


@pytest.fixture
def runner():
    return StateRunner(initial=0)


@pytest.fixture
def automata(runner):
    automata = AnimationAutomata.refer(runner)
    runner.add_sublevel(automata)
    return automata


@pytest.fixture
def make_action(journal):
    """Factory for RecordingActions sharing the `journal` fixture."""
    def _make(label):
        return RecordingAction(label, journal)
    return _make
