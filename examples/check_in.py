"""Check-in scene for the Hotel Hamiltoniano.

This example demonstrates:
- Registering decisions and resolving them
- Reality ids that do not depend on the order choices were made in
- Companion dialogue keyed by the current reality
- Relationship changes from player interactions
"""

import logging

from quantum_hotel import HotelSession, Interaction, ResponseCategory


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    session = HotelSession()
    engine = session.engine
    halim = session.companion

    print(f"[{engine.current_reality}] Halim: {session.greet()}")

    # Setup decisions
    engine.create_superposition("room", ["101", "102", "103"])
    engine.create_superposition("key", ["spin arriba", "spin abajo"])

    # Player asks about the key first, then picks a room
    state, response = session.choose("key", 0, ResponseCategory.QUESTION)
    print(f"[{engine.current_reality}] key -> {state.value}: {response}")
    state, response = session.choose("room", 1)
    print(f"[{engine.current_reality}] room -> {state.value}: {response}")

    # Tipping the concierge helps
    halim.remember_interaction(Interaction("tip", detail="5 coins", positive=True))
    print(f"Relationship: {halim.relationship} ({halim.get_relationship_status().value})")

    print("\n=== History ===")
    for entry in engine.get_decision_history():
        print(f"  {entry.timestamp} {entry.decision}: {entry.choice} -> {entry.reality}")

    print("\n=== How many realities can this scene reach? ===")
    result = engine.simulate_multiple_realities(
        [{"id": "room", "options": ["101", "102", "103"]},
         {"id": "key", "options": ["spin arriba", "spin abajo"]}],
        iterations=200,
    )
    print(f"{result.unique_realities} realities in {result.total_simulations} runs")


if __name__ == "__main__":
    main()
