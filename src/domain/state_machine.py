# src/domain/state_machine.py

from enum import Enum
from typing import Dict, Set

from src.domain.exceptions import InvalidStateTransitionError


class SeatState(str, Enum):
    AVAILABLE = "available"
    SELECTED = "selected"
    OCCUPIED = "occupied"


class SeatStateMachine:
    """
    Central controller for seat state transitions.
    OCCUPIED is absorbing: nothing enters or leaves it.
    """

    _ALLOWED_TRANSITIONS: Dict[SeatState, Set[SeatState]] = {
        SeatState.AVAILABLE: {
            SeatState.SELECTED,
        },
        SeatState.SELECTED: {
            SeatState.AVAILABLE,
        },
        SeatState.OCCUPIED: set(),
    }

    @classmethod
    def can_transition(
        cls,
        from_state: SeatState,
        to_state: SeatState,
    ) -> bool:
        """
        Returns True if transition is allowed.
        """
        cls._ensure_valid_state(from_state)
        cls._ensure_valid_state(to_state)

        return to_state in cls._ALLOWED_TRANSITIONS.get(from_state, set())

    @classmethod
    def validate_transition(
        cls,
        from_state: SeatState,
        to_state: SeatState,
    ) -> None:
        """
        Raises InvalidStateTransitionError if transition is illegal.
        """
        if not cls.can_transition(from_state, to_state):
            raise InvalidStateTransitionError(
                from_state=from_state.value,
                to_state=to_state.value,
            )

    @classmethod
    def is_terminal(cls, state: SeatState) -> bool:
        """
        Returns True if the state is absorbing (no further transitions allowed).
        """
        cls._ensure_valid_state(state)
        return len(cls._ALLOWED_TRANSITIONS.get(state, set())) == 0

    @classmethod
    def toggled(cls, state: SeatState) -> SeatState:
        """
        Returns the state a toggle gesture leads to.
        Absorbing states toggle onto themselves.
        """
        cls._ensure_valid_state(state)
        if state is SeatState.AVAILABLE:
            return SeatState.SELECTED
        if state is SeatState.SELECTED:
            return SeatState.AVAILABLE
        return state

    @staticmethod
    def _ensure_valid_state(state: SeatState) -> None:
        if not isinstance(state, SeatState):
            raise TypeError(
                f"Expected SeatState, got {type(state)}"
            )
