"""
Tests for the state machine behind the grammar parser.
"""

import unittest
from enum import Enum, auto

from usngrid.grid import GrammarRule
from usngrid.state import Action, StateMachine


class Light(Enum):
    RED = auto()
    GREEN = auto()
    YELLOW = auto()


class TestStateMachine(unittest.TestCase):
    """Test StateMachine class."""

    def setUp(self):
        self.calls = []
        self.machine = StateMachine(
            Light.RED,
            {
                Light.RED: {Action(Light.GREEN, lambda name: self.calls.append(name) or name.upper())},
                Light.GREEN: {Action(Light.YELLOW)},
                Light.YELLOW: {Action(Light.RED)},
            },
        )

    def test_transition_runs_effect(self):
        """Test that a transition moves the state and returns the effect's result."""
        self.assertEqual(self.machine.request_transition(Light.GREEN, "go"), "GO")
        self.assertIs(self.machine.current, Light.GREEN)
        self.assertEqual(self.calls, ["go"])

    def test_transition_without_effect(self):
        """Test that an action without an effect returns None."""
        self.machine.request_transition(Light.GREEN, "go")
        self.assertIsNone(self.machine.request_transition(Light.YELLOW))
        self.assertIs(self.machine.current, Light.YELLOW)

    def test_illegal_transition(self):
        """Test that a transition outside the graph raises and keeps the state."""
        with self.assertRaises(ValueError):
            self.machine.request_transition(Light.YELLOW)
        self.assertIs(self.machine.current, Light.RED)

    def test_can_transition(self):
        """Test the reachability check."""
        self.assertTrue(self.machine.can_transition(Light.GREEN))
        self.assertFalse(self.machine.can_transition(Light.YELLOW))

    def test_state_without_successors(self):
        """Test a state with no outgoing actions."""
        machine = StateMachine(GrammarRule.DIGITS, {})
        self.assertFalse(machine.can_transition(GrammarRule.START))


if __name__ == '__main__':
    unittest.main()
