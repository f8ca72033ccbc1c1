"""Per-player wiring of an engine and a companion."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from quantum_hotel.companion import CompanionAgent, ResponseCategory
from quantum_hotel.engine import SuperpositionEngine
from quantum_hotel.models import State


@dataclass
class HotelSession:
    """Everything one player needs; sessions never share state."""

    engine: SuperpositionEngine = field(default_factory=SuperpositionEngine)
    companion: CompanionAgent = field(default_factory=CompanionAgent)

    def greet(self) -> str:
        return self.companion.get_greeting(self.engine.current_reality)

    def choose(
        self,
        decision_id: str,
        index: int,
        category: ResponseCategory | str = ResponseCategory.CONFIRMATION,
    ) -> tuple[State, str]:
        """Collapse a decision and let the companion react to the new reality.

        Returns:
            The chosen State and the companion's response
        """
        state = self.engine.collapse_superposition(decision_id, index)
        response = self.companion.get_decision_response(
            category, self.engine.current_reality
        )
        return state, response

    def snapshot(self) -> dict[str, Any]:
        """JSON-ready summary of the session."""
        return {
            "stats": asdict(self.engine.get_stats()),
            "companion": {
                "id": self.companion.id,
                "name": self.companion.name,
                "type": self.companion.type,
                "mood": self.companion.mood,
                "relationship": self.companion.relationship,
                "status": self.companion.get_relationship_status().value,
                "knowledge": list(self.companion.knowledge),
                "memories": len(self.companion.memory),
            },
        }
