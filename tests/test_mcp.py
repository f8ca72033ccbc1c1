"""Tests for MCP tool routing."""

import json

import pytest
from quantum_hotel import EngineConfig
from quantum_hotel.mcp import TOOLS, config_from_env, dispatch, new_session


@pytest.fixture
def mcp_session():
    return new_session(EngineConfig(seed=3))


def call(session, name, **arguments):
    return dispatch(session, name, arguments)[0].text


def test_every_tool_is_routed(mcp_session):
    for tool in TOOLS:
        assert not call(mcp_session, tool.name).startswith("Unknown tool")


def test_unknown_tool(mcp_session):
    assert call(mcp_session, "teleport") == "Unknown tool: teleport"


def test_create_and_collapse(mcp_session):
    assert call(
        mcp_session, "create_superposition", decision_id="room", options=["101", "102"]
    ) == "Created superposition: room"

    result = json.loads(
        call(mcp_session, "collapse_superposition", decision_id="room", chosen_index=1)
    )

    assert result["state_id"] == "room-state-1"
    assert result["value"] == "102"
    assert result["reality_id"] == call(mcp_session, "get_reality_id")

    history = json.loads(call(mcp_session, "get_decision_history"))
    assert [h["choice"] for h in history] == ["102"]


def test_errors_are_reported(mcp_session):
    assert call(
        mcp_session, "collapse_superposition", decision_id="missing", chosen_index=0
    ) == "Error: Superposition not found: missing"
    assert call(
        mcp_session, "create_superposition", decision_id="room", options=[]
    ).startswith("Error:")


def test_decision_state(mcp_session):
    call(mcp_session, "create_superposition", decision_id="key", options=["up", "down"])

    state = json.loads(call(mcp_session, "get_decision_state", decision_id="key"))

    assert state["options_count"] == 2
    assert state["collapsed_state"] is None
    assert [s["value"] for s in state["states"]] == ["up", "down"]
    assert call(mcp_session, "get_decision_state", decision_id="nope") == (
        "Superposition not found: nope"
    )


def test_simulate_and_reset(mcp_session):
    result = json.loads(
        call(
            mcp_session,
            "simulate_realities",
            decisions=[{"id": "room", "options": ["a", "b"]}],
            iterations=40,
        )
    )
    assert result["total_simulations"] == 40
    assert result["unique_realities"] == 2

    assert call(mcp_session, "reset") == "Reset to reality 0x0000"
    stats = json.loads(call(mcp_session, "get_stats"))
    assert stats["total_decisions"] == 0


def test_remember_interaction(mcp_session):
    companion = json.loads(
        call(mcp_session, "remember_interaction", kind="tip", positive=True)
    )

    assert companion["relationship"] == 55
    assert companion["memories"] == 1


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("QUANTUM_HOTEL_OBSERVER", "tester")
    monkeypatch.setenv("QUANTUM_HOTEL_SIMULATION_ITERATIONS", "25")
    monkeypatch.setenv("QUANTUM_HOTEL_SEED", "9")

    config = config_from_env()

    assert config == EngineConfig(observer="tester", simulation_iterations=25, seed=9)


def test_greeting_with_lone_surrogate(mcp_session):
    greeting = call(mcp_session, "get_greeting", reality_id=json.loads('"\\ud800"'))

    assert not greeting.startswith("Error:")


def test_collapse_with_list_id_is_an_error(mcp_session):
    assert call(
        mcp_session, "collapse_superposition", decision_id=["room"], chosen_index=0
    ).startswith("Error: Decision id must be a non-empty string")
    assert call(mcp_session, "get_decision_state", decision_id=["room"]) == (
        "Superposition not found: ['room']"
    )


def test_interaction_flags_must_be_booleans(mcp_session):
    reply = call(mcp_session, "remember_interaction", kind="tip", positive="false")

    assert reply.startswith("Error: positive must be a boolean")
    companion = json.loads(call(mcp_session, "get_companion"))
    assert companion["relationship"] == 50
    assert companion["memories"] == 0


def test_greeting_requires_string_reality(mcp_session):
    assert call(mcp_session, "get_greeting", reality_id=7).startswith("Error:")
