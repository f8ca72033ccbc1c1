"""Data models for Quantum Hotel."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


@dataclass
class EngineConfig:
    """Configuration for SuperpositionEngine."""

    observer: str = "player"  # recorded as collapsed_by
    simulation_iterations: int = 1000
    seed: int | None = None  # seeds simulate_multiple_realities


@dataclass
class State:
    """One candidate outcome of a superposition."""

    id: str  # "<decision_id>-state-<index>"
    value: Any
    probability: float
    created_at: datetime
    collapsed: bool = False


@dataclass
class Superposition:
    """A named choice point with a fixed set of states."""

    id: str
    states: tuple[State, ...]
    created_at: datetime
    collapsed_state: State | None = None
    collapsed_at: datetime | None = None
    collapsed_by: str | None = None

    @property
    def options_count(self) -> int:
        return len(self.states)

    @property
    def is_collapsed(self) -> bool:
        return self.collapsed_state is not None


@dataclass(frozen=True)
class RealityEvent:
    """Immutable record of a single collapse."""

    decision_id: str
    collapsed_state: State  # snapshot taken at collapse time
    reality_id: str
    timestamp: datetime
    state_index: int


@dataclass(frozen=True)
class HistoryEntry:
    """Caller-facing view of a RealityEvent."""

    decision: str
    choice: Any
    reality: str
    timestamp: str  # ISO-8601


@dataclass(frozen=True)
class EngineStats:
    total_decisions: int
    collapsed_decisions: int
    active_superpositions: int
    reality_id: str
    history_length: int
    decision_points: int


@dataclass(frozen=True)
class DecisionSpec:
    """Input for the reality simulation: a decision id and its options."""

    id: str
    options: tuple[Any, ...]


@dataclass
class SimulationResult:
    total_simulations: int
    unique_realities: int
    reality_distribution: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class Interaction:
    """Something that happened between the player and a companion.

    Equal interactions collapse into a single memory entry.
    """

    kind: str
    detail: str = ""
    positive: bool = False
    negative: bool = False


class DecisionStatus(str, Enum):
    UNKNOWN = "unknown"
    PENDING = "pending"
    COLLAPSED = "collapsed"
