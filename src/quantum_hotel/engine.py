"""Superposition Engine - Core implementation."""

from __future__ import annotations

import logging
import random
from collections import Counter
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from quantum_hotel.errors import (
    DecisionNotFoundError,
    InvalidArgumentError,
    StateIndexError,
)
from quantum_hotel.hashing import BASE_REALITY, reality_id_for
from quantum_hotel.models import (
    DecisionSpec,
    DecisionStatus,
    EngineConfig,
    EngineStats,
    HistoryEntry,
    RealityEvent,
    SimulationResult,
    State,
    Superposition,
)

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _validate_decision_id(decision_id: Any) -> None:
    if not isinstance(decision_id, str) or not decision_id:
        raise InvalidArgumentError(
            f"Decision id must be a non-empty string, got {decision_id!r}"
        )


def _validate_options(decision_id: str, options: Any) -> None:
    if (
        not isinstance(options, Sequence)
        or isinstance(options, (str, bytes))
        or len(options) == 0
    ):
        raise InvalidArgumentError(
            f"Options for {decision_id} must be a non-empty sequence"
        )


class SuperpositionEngine:
    """Tracks narrative decisions and the reality their outcomes define."""

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or EngineConfig()
        self.superposed_states: dict[str, Superposition] = {}
        self.reality_history: list[RealityEvent] = []
        self.current_reality: str = BASE_REALITY
        self.decision_points: set[str] = set()
        # per-operation log level, lowered while simulating
        self._log_level = logging.INFO

    # -------------------------------------------------------------------------
    # Superposition Operations
    # -------------------------------------------------------------------------

    def create_superposition(
        self,
        decision_id: str,
        options: Sequence[Any],
    ) -> Superposition:
        """Register a decision with one state per option.

        Args:
            decision_id: Unique identifier for the decision
            options: Ordered, non-empty narrative payloads

        Returns:
            The new Superposition, with no state collapsed

        Raises:
            InvalidArgumentError: empty id, malformed options, or the id is
                already registered
        """
        _validate_decision_id(decision_id)
        _validate_options(decision_id, options)
        if decision_id in self.superposed_states:
            raise InvalidArgumentError(
                f"Superposition already exists: {decision_id}"
            )

        created_at = _now()
        probability = 1 / len(options)
        superposition = Superposition(
            id=decision_id,
            states=tuple(
                State(
                    id=f"{decision_id}-state-{idx}",
                    value=option,
                    probability=probability,
                    created_at=created_at,
                )
                for idx, option in enumerate(options)
            ),
            created_at=created_at,
        )

        self.superposed_states[decision_id] = superposition
        self.decision_points.add(decision_id)

        logger.log(
            self._log_level,
            "Superposition created: %s with %d states",
            decision_id,
            len(options),
        )
        return superposition

    def collapse_superposition(self, decision_id: str, chosen_index: int) -> State:
        """Collapse a decision onto one of its states.

        Collapsing an already collapsed decision is allowed: the new choice
        replaces the old one and another history event is recorded.

        Args:
            decision_id: Which decision
            chosen_index: Position of the chosen state

        Returns:
            The chosen State
        """
        _validate_decision_id(decision_id)
        superposition = self.superposed_states.get(decision_id)
        if superposition is None:
            raise DecisionNotFoundError(decision_id)

        if isinstance(chosen_index, bool) or not isinstance(chosen_index, int):
            raise InvalidArgumentError(
                f"State index must be an integer, got {chosen_index!r}"
            )
        if not 0 <= chosen_index < len(superposition.states):
            raise StateIndexError(
                decision_id, chosen_index, len(superposition.states)
            )

        chosen = superposition.states[chosen_index]
        # computed before any mutation so a failure leaves the engine as it was
        reality_id = reality_id_for(
            chosen.id if sup is superposition else sup.collapsed_state.id
            for sup in self.superposed_states.values()
            if sup is superposition or sup.collapsed_state is not None
        )

        for idx, state in enumerate(superposition.states):
            state.collapsed = idx == chosen_index

        collapsed_at = _now()
        superposition.collapsed_state = chosen
        superposition.collapsed_at = collapsed_at
        superposition.collapsed_by = self.config.observer

        self.current_reality = reality_id
        self.reality_history.append(
            RealityEvent(
                decision_id=decision_id,
                collapsed_state=replace(chosen),
                reality_id=self.current_reality,
                timestamp=collapsed_at,
                state_index=chosen_index,
            )
        )

        logger.log(
            self._log_level,
            "Reality collapsed: %s -> %r (reality %s)",
            decision_id,
            chosen.value,
            self.current_reality,
        )
        return chosen

    # -------------------------------------------------------------------------
    # Query Operations
    # -------------------------------------------------------------------------

    def calculate_reality_id(self) -> str:
        """Derive the reality id from every collapsed decision."""
        return reality_id_for(
            sup.collapsed_state.id
            for sup in self.superposed_states.values()
            if sup.collapsed_state is not None
        )

    def get_active_superpositions(self) -> Iterator[Superposition]:
        """Yield decisions that have not been collapsed yet."""
        return (
            sup
            for sup in self.superposed_states.values()
            if sup.collapsed_state is None
        )

    def get_decision_history(self) -> list[HistoryEntry]:
        return [
            HistoryEntry(
                decision=event.decision_id,
                choice=event.collapsed_state.value,
                reality=event.reality_id,
                timestamp=event.timestamp.isoformat(),
            )
            for event in self.reality_history
        ]

    def is_decision_collapsed(self, decision_id: str) -> bool:
        """True only for a known, collapsed decision.

        Unknown and pending decisions both return False; use
        decision_status() to tell them apart.
        """
        return self.decision_status(decision_id) is DecisionStatus.COLLAPSED

    def decision_status(self, decision_id: str) -> DecisionStatus:
        if not isinstance(decision_id, str):
            return DecisionStatus.UNKNOWN
        superposition = self.superposed_states.get(decision_id)
        if superposition is None:
            return DecisionStatus.UNKNOWN
        if superposition.collapsed_state is None:
            return DecisionStatus.PENDING
        return DecisionStatus.COLLAPSED

    def get_decision_state(self, decision_id: str) -> Superposition | None:
        if not isinstance(decision_id, str):
            return None
        return self.superposed_states.get(decision_id)

    def get_stats(self) -> EngineStats:
        total = len(self.superposed_states)
        collapsed = sum(
            1 for sup in self.superposed_states.values() if sup.is_collapsed
        )
        return EngineStats(
            total_decisions=total,
            collapsed_decisions=collapsed,
            active_superpositions=total - collapsed,
            reality_id=self.current_reality,
            history_length=len(self.reality_history),
            decision_points=len(self.decision_points),
        )

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def reset(self) -> None:
        """Forget every decision and return to the base reality."""
        self.superposed_states.clear()
        self.reality_history = []
        self.current_reality = BASE_REALITY
        self.decision_points.clear()
        logger.log(self._log_level, "Superposition engine reset")

    # -------------------------------------------------------------------------
    # Simulation
    # -------------------------------------------------------------------------

    def simulate_multiple_realities(
        self,
        decisions: Iterable[DecisionSpec | Mapping[str, Any]],
        iterations: int | None = None,
        rng: random.Random | None = None,
    ) -> SimulationResult:
        """Play the given decisions many times with uniformly random choices.

        Each run resets the engine, so its state afterwards is that of the
        last simulated run.

        Args:
            decisions: DecisionSpec objects or {"id", "options"} mappings,
                applied in order on every run
            iterations: Number of runs (defaults to config.simulation_iterations)
            rng: Random source (defaults to one seeded with config.seed)

        Returns:
            SimulationResult with the count of each reality id reached
        """
        specs = _coerce_specs(decisions)
        if iterations is None:
            iterations = self.config.simulation_iterations
        if isinstance(iterations, bool) or not isinstance(iterations, int):
            raise InvalidArgumentError(
                f"Iterations must be an integer, got {iterations!r}"
            )
        if iterations < 0:
            raise InvalidArgumentError(
                f"Iterations must not be negative, got {iterations}"
            )
        if rng is None:
            rng = random.Random(self.config.seed)

        results: Counter[str] = Counter()
        self._log_level = logging.DEBUG
        try:
            for _ in range(iterations):
                self.reset()
                for spec in specs:
                    self.create_superposition(spec.id, spec.options)
                    self.collapse_superposition(
                        spec.id, rng.randrange(len(spec.options))
                    )
                results[self.calculate_reality_id()] += 1
        finally:
            self._log_level = logging.INFO

        logger.info(
            "Simulated %d runs over %d decisions: %d unique realities",
            iterations,
            len(specs),
            len(results),
        )
        return SimulationResult(
            total_simulations=iterations,
            unique_realities=len(results),
            reality_distribution=dict(results),
        )


def _coerce_specs(
    decisions: Iterable[DecisionSpec | Mapping[str, Any]],
) -> list[DecisionSpec]:
    """Validate simulation input before any run touches the engine."""
    specs = []
    seen = set()
    for decision in decisions:
        if isinstance(decision, Mapping):
            if "id" not in decision or "options" not in decision:
                raise InvalidArgumentError(
                    f"Decision needs 'id' and 'options': {decision!r}"
                )
            decision_id, options = decision["id"], decision["options"]
        else:
            decision_id, options = decision.id, decision.options
        _validate_decision_id(decision_id)
        _validate_options(decision_id, options)
        if decision_id in seen:
            raise InvalidArgumentError(f"Duplicate decision id: {decision_id}")
        seen.add(decision_id)
        specs.append(DecisionSpec(id=decision_id, options=tuple(options)))
    return specs
