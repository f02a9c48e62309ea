"""
Tests for StateRunner and the AnimationAutomata StateIO passthrough.
"""

import pytest
from unittest.mock import MagicMock

from automata.engine.animation_automata import AnimationAutomata
from automata.runtime.state_runner import StateIO, StateRunner, next_issue_id


class TestStateRunner:
    """Test the reference state runner."""

    def test_initial_state(self):
        assert StateRunner().current_state() == 0
        assert StateRunner(initial=4).current_state() == 4

    def test_goto_state_notifies_sublevels_in_order(self):
        runner = StateRunner()
        order = []
        first, second = MagicMock(spec=StateIO), MagicMock(spec=StateIO)
        first.on_transition.side_effect = lambda *a: order.append(("first", a))
        second.on_transition.side_effect = lambda *a: order.append(("second", a))
        runner.add_sublevel(first).add_sublevel(second)

        result = runner.goto_state(3)

        assert result is runner
        assert runner.current_state() == 3
        assert [name for name, _ in order] == ["first", "second"]
        assert order[0][1][:2] == (0, 3)
        assert order[0][1][2] == order[1][1][2]

    def test_each_transition_gets_new_issue_id(self):
        runner = StateRunner()
        sub = MagicMock(spec=StateIO)
        runner.add_sublevel(sub)

        runner.goto_state(1)
        runner.goto_state(2)

        first_issue = sub.on_transition.call_args_list[0][0][2]
        second_issue = sub.on_transition.call_args_list[1][0][2]
        assert first_issue != second_issue

    def test_issue_ids_unique_across_runners(self):
        ids = {next_issue_id() for _ in range(100)}
        assert len(ids) == 100

    def test_add_sublevel_is_idempotent(self):
        runner = StateRunner()
        sub = MagicMock(spec=StateIO)

        runner.add_sublevel(sub)
        runner.add_sublevel(sub)

        assert runner.sublevels == (sub,)

    def test_cannot_add_itself(self):
        runner = StateRunner()

        with pytest.raises(ValueError):
            runner.add_sublevel(runner)

    def test_remove_and_clear(self):
        runner = StateRunner()
        a, b = MagicMock(spec=StateIO), MagicMock(spec=StateIO)
        runner.add_sublevel(a).add_sublevel(b)

        assert runner.remove_sublevel(a) is True
        assert runner.remove_sublevel(a) is False
        assert runner.sublevels == (b,)

        runner.clear_sublevels()
        assert runner.sublevels == ()

    def test_on_transition_repropagates_once_per_issue(self):
        relay = StateRunner(initial=9)
        sub = MagicMock(spec=StateIO)
        relay.add_sublevel(sub)

        relay.on_transition(0, 1, 42)
        relay.on_transition(0, 1, 42)

        sub.on_transition.assert_called_once_with(0, 1, 42)
        assert relay.current_state() == 9

    def test_cyclic_sublevels_terminate(self):
        a, b = StateRunner(), StateRunner()
        a.add_sublevel(b)
        b.add_sublevel(a)

        a.goto_state(1)

        assert a.current_state() == 1


class TestPassthrough:
    """AnimationAutomata forwards StateIO calls to the wrapped runner unchanged."""

    def test_calls_forwarded_to_mock_runner(self):
        wrapped = MagicMock(spec=StateIO)
        wrapped.current_state.return_value = 5
        wrapped.remove_sublevel.return_value = True
        sub = MagicMock(spec=StateIO)
        automata = AnimationAutomata.refer(wrapped)

        assert automata.goto_state(2) is automata
        assert automata.current_state() == 5
        assert automata.add_sublevel(sub) is automata
        assert automata.remove_sublevel(sub) is True
        assert automata.clear_sublevels() is automata

        wrapped.goto_state.assert_called_once_with(2)
        wrapped.add_sublevel.assert_called_once_with(sub)
        wrapped.remove_sublevel.assert_called_once_with(sub)
        wrapped.clear_sublevels.assert_called_once_with()

    def test_same_effects_as_direct_runner(self):
        direct, wrapped = StateRunner(), StateRunner()
        automata = AnimationAutomata.refer(wrapped)
        direct_sub, wrapped_sub = MagicMock(spec=StateIO), MagicMock(spec=StateIO)

        direct.add_sublevel(direct_sub)
        automata.add_sublevel(wrapped_sub)
        direct.goto_state(3)
        automata.goto_state(3)

        assert automata.current_state() == direct.current_state() == 3
        assert wrapped.sublevels == (wrapped_sub,)
        assert wrapped_sub.on_transition.call_args[0][:2] == direct_sub.on_transition.call_args[0][:2]
        assert (automata.remove_sublevel(wrapped_sub), direct.remove_sublevel(direct_sub)) == (True, True)
        assert (automata.remove_sublevel(wrapped_sub), direct.remove_sublevel(direct_sub)) == (False, False)

        automata.add_sublevel(wrapped_sub).clear_sublevels()
        assert wrapped.sublevels == ()

    def test_automata_is_a_state_io(self):
        assert isinstance(AnimationAutomata.refer(), StateIO)

    def test_automata_can_nest_inside_another_automata(self):
        inner = AnimationAutomata.refer()
        outer = AnimationAutomata.refer(inner)

        outer.goto_state(7)

        assert inner.current_state() == 7
        assert outer.current_state() == 7
