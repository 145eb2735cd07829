# Area: Core
"""
fair_rps._core.state_machine - Game session state machine
=========================================================

Tracks a single round's lifecycle from commitment to resolution.
A session is played at most once; RESOLVED is terminal.
"""

import logging

from ..errors import InvalidTransitionError, SessionResolvedError
from .enums import SessionEvent, SessionState

logger = logging.getLogger("fair_rps.session.state_machine")


# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    SessionState.CREATED: {
        SessionEvent.COMMIT: SessionState.COMMITTED,
    },
    SessionState.COMMITTED: {
        SessionEvent.SHOW_MENU: SessionState.AWAITING_MOVE,
        SessionEvent.PLAY: SessionState.RESOLVED,
    },
    SessionState.AWAITING_MOVE: {
        SessionEvent.SHOW_MENU: SessionState.AWAITING_MOVE,
        SessionEvent.PLAY: SessionState.RESOLVED,
    },
    SessionState.RESOLVED: {},
}

# States in which the rule table may be inspected
HELP_STATES = frozenset({SessionState.COMMITTED, SessionState.AWAITING_MOVE})


class SessionStateMachine:
    """
    State machine for one game round.

    Attributes:
        current_state: The current state of the session
    """

    def __init__(self):
        """Initialize state machine in CREATED."""
        self.current_state = SessionState.CREATED

    @property
    def is_resolved(self) -> bool:
        return self.current_state is SessionState.RESOLVED

    def can_transition(self, event: SessionEvent) -> bool:
        """
        Check if a transition is valid from current state.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        return event in TRANSITIONS.get(self.current_state, {})

    def require(self, event: SessionEvent) -> None:
        """Raise unless ``event`` is valid now, without transitioning."""
        if not self.can_transition(event):
            self._raise_invalid(event.value)

    def require_help_allowed(self) -> None:
        """Raise unless the rule table may be shown in the current state."""
        if self.current_state not in HELP_STATES:
            self._raise_invalid("HELP")

    def transition(self, event: SessionEvent) -> SessionState:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state after transition

        Raises:
            SessionResolvedError: If the session has already been played
            InvalidTransitionError: If the transition is otherwise not valid
        """
        self.require(event)

        previous = self.current_state
        self.current_state = TRANSITIONS[previous][event]
        logger.debug(
            f"Session transition: {previous.value} -> {self.current_state.value} "
            f"({event.value})"
        )
        return self.current_state

    def _raise_invalid(self, event_name: str) -> None:
        if self.is_resolved:
            raise SessionResolvedError(event_name, self.current_state.value)
        raise InvalidTransitionError(event_name, self.current_state.value)
