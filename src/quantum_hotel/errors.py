"""Exceptions raised by the Quantum Hotel core."""


class QuantumHotelError(Exception):
    """Base class for all errors raised by the engine and companion."""


class InvalidArgumentError(QuantumHotelError, ValueError):
    """Raised for an empty id, malformed options or a duplicate decision."""


class DecisionNotFoundError(QuantumHotelError, LookupError):
    """Raised when a decision id has never been registered."""

    def __init__(self, decision_id: str):
        super().__init__(f"Superposition not found: {decision_id}")
        self.decision_id = decision_id


class StateIndexError(QuantumHotelError, IndexError):
    """Raised when a chosen index falls outside a decision's states."""

    def __init__(self, decision_id: str, index: int, count: int):
        super().__init__(
            f"Invalid state index {index} for {decision_id} "
            f"(expected 0 <= index < {count})"
        )
        self.decision_id = decision_id
        self.index = index
        self.count = count
