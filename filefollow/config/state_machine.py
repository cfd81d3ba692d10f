"""Load state machine for the config loader."""

from enum import Enum, auto
from typing import ClassVar


class LoadState(Enum):
    """Config loader states.

    State transitions:
        UNLOADED -> READING: Start reading the config file
        READING -> DECODED: File read and structurally decoded
        DECODED -> VALIDATED: All rules passed, config is usable
        Any non-terminal -> FAILED: Load attempt aborted
    """

    UNLOADED = auto()
    READING = auto()
    DECODED = auto()
    VALIDATED = auto()
    FAILED = auto()


class LoadStateError(Exception):
    """Raised when an invalid state transition is attempted."""

    def __init__(self, from_state: LoadState, to_state: LoadState) -> None:
        """Initialize the error.

        Args:
            from_state: The current state.
            to_state: The attempted target state.
        """
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Invalid state transition: {from_state.name} -> {to_state.name}"
        )


class LoadStateMachine:
    """Tracks a single load attempt.

    VALIDATED and FAILED are both terminal; a loader is used once.
    """

    VALID_TRANSITIONS: ClassVar[dict[LoadState, set[LoadState]]] = {
        LoadState.UNLOADED: {LoadState.READING, LoadState.FAILED},
        LoadState.READING: {LoadState.DECODED, LoadState.FAILED},
        LoadState.DECODED: {LoadState.VALIDATED, LoadState.FAILED},
        LoadState.VALIDATED: set(),
        LoadState.FAILED: set(),
    }

    def __init__(self) -> None:
        self._state = LoadState.UNLOADED

    @property
    def state(self) -> LoadState:
        return self._state

    def can_transition(self, to_state: LoadState) -> bool:
        """Check if a transition to the given state is valid."""
        return to_state in self.VALID_TRANSITIONS.get(self._state, set())

    def transition(self, to_state: LoadState) -> None:
        """Transition to a new state.

        Args:
            to_state: The target state.

        Raises:
            LoadStateError: If the transition is invalid.
        """
        if not self.can_transition(to_state):
            raise LoadStateError(self._state, to_state)
        self._state = to_state

    def is_validated(self) -> bool:
        return self._state == LoadState.VALIDATED

    def is_failed(self) -> bool:
        return self._state == LoadState.FAILED
