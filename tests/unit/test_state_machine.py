# tests/unit/test_state_machine.py

import pytest

from src.domain.state_machine import SeatStateMachine, SeatState
from src.domain.exceptions import InvalidStateTransitionError


# ---------------------
# VALID TRANSITIONS
# ---------------------

def test_select_and_release():
    assert SeatStateMachine.can_transition(
        SeatState.AVAILABLE,
        SeatState.SELECTED,
    )

    assert SeatStateMachine.can_transition(
        SeatState.SELECTED,
        SeatState.AVAILABLE,
    )


def test_toggle_flips_between_available_and_selected():
    assert SeatStateMachine.toggled(SeatState.AVAILABLE) is SeatState.SELECTED
    assert SeatStateMachine.toggled(SeatState.SELECTED) is SeatState.AVAILABLE
    assert SeatStateMachine.toggled(SeatState.OCCUPIED) is SeatState.OCCUPIED


# ---------------------
# INVALID TRANSITIONS
# ---------------------

def test_no_self_transitions():
    for state in SeatState:
        assert not SeatStateMachine.can_transition(state, state)


def test_occupied_is_absorbing():
    assert not SeatStateMachine.is_terminal(SeatState.AVAILABLE)
    assert not SeatStateMachine.is_terminal(SeatState.SELECTED)
    assert SeatStateMachine.is_terminal(SeatState.OCCUPIED)

    with pytest.raises(InvalidStateTransitionError):
        SeatStateMachine.validate_transition(
            SeatState.OCCUPIED,
            SeatState.SELECTED,
        )

    with pytest.raises(InvalidStateTransitionError):
        SeatStateMachine.validate_transition(
            SeatState.OCCUPIED,
            SeatState.AVAILABLE,
        )


def test_nothing_enters_occupied():
    with pytest.raises(InvalidStateTransitionError) as exc_info:
        SeatStateMachine.validate_transition(
            SeatState.AVAILABLE,
            SeatState.OCCUPIED,
        )

    assert exc_info.value.from_state == "available"
    assert exc_info.value.to_state == "occupied"
    assert not SeatStateMachine.can_transition(
        SeatState.SELECTED,
        SeatState.OCCUPIED,
    )


def test_invalid_type_guard():
    with pytest.raises(TypeError):
        SeatStateMachine.validate_transition(
            "available",  # invalid type
            SeatState.SELECTED,
        )
