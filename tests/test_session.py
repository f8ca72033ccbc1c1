"""Tests for a player's session."""

from quantum_hotel import HotelSession, ResponseCategory
from quantum_hotel.companion import GREETINGS, RESPONSES


def test_greet_in_base_reality(session):
    assert session.greet() == GREETINGS[0]


def test_choose_returns_state_and_response(session):
    session.engine.create_superposition("room", ["101", "102", "103"])

    state, response = session.choose("room", 1, ResponseCategory.QUESTION)

    assert state.value == "102"
    assert response == session.companion.get_decision_response(
        ResponseCategory.QUESTION, session.engine.current_reality
    )
    assert response in RESPONSES[ResponseCategory.QUESTION]


def test_sessions_are_isolated():
    first = HotelSession()
    second = HotelSession()

    first.engine.create_superposition("room", ["101"])
    first.engine.collapse_superposition("room", 0)

    assert first.engine is not second.engine
    assert first.companion is not second.companion
    assert second.engine.get_stats().total_decisions == 0


def test_snapshot(session):
    session.engine.create_superposition("room", ["101", "102"])

    snapshot = session.snapshot()

    assert snapshot["stats"]["total_decisions"] == 1
    assert snapshot["stats"]["reality_id"] == "0x0000"
    assert snapshot["companion"]["status"] == "conocido"
    assert snapshot["companion"]["relationship"] == 50
