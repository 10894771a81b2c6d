"""State machine implementation for managing validated state transitions.

This module provides a finite state machine that enforces transition rules
and can execute associated actions when transitions occur. The grid
reference parser walks its grammar rules through one of these machines.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

State = TypeVar("State", bound=Enum)
"""Type variable for state enumerations that extend Enum."""

ActionFn = Callable[..., Any]
"""Type alias for action effect functions."""

StateGraph = dict[Any, set["Action"]]
"""Mapping of each state to the actions allowed from it."""


@dataclass(frozen=True)
class Action:
    """Represents a state transition action with an optional effect function.

    Attributes:
        state: The target state this action transitions to.
        effect: Optional function to execute when this action is performed.
    """

    state: Enum
    effect: ActionFn | None = None

    def __call__(self, *args, **kwargs) -> Any:
        """Execute the action's effect function if it exists.

        Returns:
            The result of the effect function, or None if no effect is defined.
        """
        if self.effect:
            return self.effect(*args, **kwargs)
        return None


class StateMachine:
    """A finite state machine that manages state transitions with validation.

    Attributes:
        _state: The current state of the state machine.
        _allowed: Dictionary mapping states to their allowed transitions.
    """

    _allowed: StateGraph
    _state: Enum

    def __init__(self, initial_state: Enum, nodes_graph: StateGraph):
        """Initialize the state machine with an initial state and transition rules.

        Args:
            initial_state: The starting state for the state machine.
            nodes_graph: Dictionary mapping each state to its set of allowed actions.
        """
        self._state = initial_state
        self._allowed = nodes_graph

    def request_transition(self, next_state: Enum, *args, **kwargs) -> Any:
        """Request a state transition to the specified next state.

        Validates that the transition is allowed, updates the current state
        and executes the associated action effect.

        Args:
            next_state: The target state to transition to.

        Returns:
            The result of executing the transition action's effect function,
            or None if the action has no effect.

        Raises:
            ValueError: If the transition from the current state to
                next_state is not allowed.
        """
        next_action = self._validate_transition(self.current, next_state)
        self._state = next_action.state
        return next_action(*args, **kwargs)

    def can_transition(self, next_state: Enum) -> bool:
        """Whether ``next_state`` is reachable from the current state."""
        return any(action.state == next_state for action in self._allowed.get(self.current, set()))

    @property
    def current(self) -> Enum:
        """The current state enumeration value."""
        return self._state

    def _validate_transition(self, frm: Enum, to: Enum) -> Action:
        """Find the action that moves the machine from ``frm`` to ``to``.

        Raises:
            ValueError: If no valid transition exists from frm to to.
        """
        allowed_actions: set[Action] = self._allowed.get(frm, set())
        for action in allowed_actions:
            if action.state == to:
                return action

        msg = f"Illegal transition {frm.name} -> {to.name}"
        raise ValueError(msg)
