"""Companion agents whose dialogue is keyed by the current reality."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from quantum_hotel.hashing import deterministic_index
from quantum_hotel.models import Interaction

logger = logging.getLogger(__name__)

RELATIONSHIP_MIN = 0
RELATIONSHIP_MAX = 100
RELATIONSHIP_STEP = 5


class ResponseCategory(str, Enum):
    CONFIRMATION = "confirmation"
    QUESTION = "question"

    @classmethod
    def parse(cls, value: ResponseCategory | str) -> ResponseCategory:
        """Map a category name to a member, defaulting to CONFIRMATION."""
        try:
            return cls(value)
        except ValueError:
            return cls.CONFIRMATION


class RelationshipTier(str, Enum):
    """Ordered from most to least trusted."""

    COSMIC_ALLY = "aliado_cosmico"
    QUANTUM_FRIEND = "amigo_quantico"
    ACQUAINTANCE = "conocido"
    STRANGER = "extrano"


# (lower bound, tier), checked top down
_TIER_THRESHOLDS = (
    (80, RelationshipTier.COSMIC_ALLY),
    (60, RelationshipTier.QUANTUM_FRIEND),
    (40, RelationshipTier.ACQUAINTANCE),
)

GREETINGS = (
    "¡Bienvenido al Hotel Hamiltoniano, donde la realidad es solo una sugerencia!",
    "Su suite de Schrödinger le espera... y no le espera simultáneamente.",
    "¿Prefiere la llave con spin arriba o abajo? Ambos, por supuesto.",
    "En este hotel, cada decisión crea un nuevo universo. Elija sabiamente... o no.",
)

RESPONSES = {
    ResponseCategory.CONFIRMATION: (
        "Interesante elección. Cada camino conduce a realidades igualmente válidas.",
        "El universo se ajusta a tu observación. ¿Qué más deseas colapsar?",
        "Tu decisión ha creado una nueva rama en el árbol cuántico.",
    ),
    ResponseCategory.QUESTION: (
        "Las preguntas son como partículas cuánticas: existen en múltiples estados hasta que se observan.",
        "Cada respuesta contiene la semilla de nuevas preguntas. Es el ciclo cósmico.",
        "La verdad, como la función de onda, se revela solo bajo observación.",
    ),
}


def responses_for(category: ResponseCategory) -> tuple[str, ...]:
    return RESPONSES[category]


def select_response(lines: Sequence[str], reality_id: str) -> str:
    """Pick the line keyed by reality_id; the same id always gets the same line."""
    return lines[deterministic_index(reality_id, len(lines))]


def _clamp(value: int) -> int:
    return max(RELATIONSHIP_MIN, min(RELATIONSHIP_MAX, value))


class CompanionAgent:
    """An NPC with a relationship score and reality-keyed dialogue.

    Defaults describe Halim, the concierge of the Hotel Hamiltoniano.
    """

    def __init__(
        self,
        id: str = "halim",
        name: str = "Halim",
        type: str = "concierge",
        relationship: int = 50,
        mood: str = "enigmatico",
        knowledge: Sequence[str] = ("fisica-cuantica", "poesia", "hospitalidad"),
    ):
        self.id = id
        self.name = name
        self.type = type
        self._relationship = _clamp(relationship)
        self.mood = mood
        self.knowledge = tuple(knowledge)
        self.memory: set[Interaction] = set()

    @property
    def relationship(self) -> int:
        return self._relationship

    # -------------------------------------------------------------------------
    # Dialogue
    # -------------------------------------------------------------------------

    def get_greeting(self, reality_id: str) -> str:
        return select_response(GREETINGS, reality_id)

    def get_decision_response(
        self,
        category: ResponseCategory | str,
        reality_id: str,
    ) -> str:
        """Comment on a decision.

        Args:
            category: Kind of response; unknown names fall back to
                confirmation lines
            reality_id: Reality the response is keyed by

        Returns:
            One line from the category's table
        """
        lines = responses_for(ResponseCategory.parse(category))
        return select_response(lines, reality_id)

    # -------------------------------------------------------------------------
    # Relationship
    # -------------------------------------------------------------------------

    def remember_interaction(self, interaction: Interaction) -> int:
        """Store an interaction and adjust the relationship score.

        Positive and negative flags each move the score by one step; an
        interaction carrying both leaves it where it was. The score is
        clamped to [0, 100] afterwards.

        Returns:
            The relationship score after the adjustment
        """
        self.memory.add(interaction)

        relationship = self._relationship
        if interaction.positive:
            relationship += RELATIONSHIP_STEP
        if interaction.negative:
            relationship -= RELATIONSHIP_STEP
        self._relationship = _clamp(relationship)

        logger.debug(
            "%s remembered %s: relationship %d",
            self.id,
            interaction.kind,
            self._relationship,
        )
        return self._relationship

    def get_relationship_status(self) -> RelationshipTier:
        for lower_bound, tier in _TIER_THRESHOLDS:
            if self._relationship >= lower_bound:
                return tier
        return RelationshipTier.STRANGER
