"""Quantum Hotel - Superposition engine and companion for branching narrative."""

from quantum_hotel.models import (
    DecisionSpec,
    DecisionStatus,
    EngineConfig,
    EngineStats,
    HistoryEntry,
    Interaction,
    RealityEvent,
    SimulationResult,
    State,
    Superposition,
)
from quantum_hotel.errors import (
    DecisionNotFoundError,
    InvalidArgumentError,
    QuantumHotelError,
    StateIndexError,
)
from quantum_hotel.hashing import BASE_REALITY, deterministic_index, reality_hash
from quantum_hotel.engine import SuperpositionEngine
from quantum_hotel.companion import CompanionAgent, RelationshipTier, ResponseCategory
from quantum_hotel.session import HotelSession

__version__ = "0.1.0"

__all__ = [
    "SuperpositionEngine",
    "CompanionAgent",
    "HotelSession",
    "EngineConfig",
    "EngineStats",
    "DecisionSpec",
    "DecisionStatus",
    "HistoryEntry",
    "Interaction",
    "RealityEvent",
    "SimulationResult",
    "State",
    "Superposition",
    "RelationshipTier",
    "ResponseCategory",
    "QuantumHotelError",
    "InvalidArgumentError",
    "DecisionNotFoundError",
    "StateIndexError",
    "BASE_REALITY",
    "reality_hash",
    "deterministic_index",
]
