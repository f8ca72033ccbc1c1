"""MCP server for the Quantum Hotel engine.

Exposes one player's session through Model Context Protocol tools.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from quantum_hotel.companion import CompanionAgent, ResponseCategory
from quantum_hotel.engine import SuperpositionEngine
from quantum_hotel.errors import InvalidArgumentError, QuantumHotelError
from quantum_hotel.models import EngineConfig, Interaction, Superposition
from quantum_hotel.session import HotelSession

logger = logging.getLogger(__name__)


def config_from_env() -> EngineConfig:
    """Build engine configuration from QUANTUM_HOTEL_* variables."""
    seed = os.getenv("QUANTUM_HOTEL_SEED")
    return EngineConfig(
        observer=os.getenv("QUANTUM_HOTEL_OBSERVER", "player"),
        simulation_iterations=int(
            os.getenv("QUANTUM_HOTEL_SIMULATION_ITERATIONS", "1000")
        ),
        seed=int(seed) if seed else None,
    )


def new_session(config: EngineConfig | None = None) -> HotelSession:
    return HotelSession(
        engine=SuperpositionEngine(config or config_from_env()),
        companion=CompanionAgent(),
    )


# -------------------------------------------------------------------------
# Tool Definitions
# -------------------------------------------------------------------------

TOOLS = [
    Tool(
        name="create_superposition",
        description="Register a decision with its ordered options",
        inputSchema={
            "type": "object",
            "properties": {
                "decision_id": {
                    "type": "string",
                    "description": "Unique identifier",
                },
                "options": {
                    "type": "array",
                    "minItems": 1,
                    "description": "Narrative payload for each option",
                },
            },
            "required": ["decision_id", "options"],
        },
    ),
    Tool(
        name="collapse_superposition",
        description="Resolve a decision by choosing one of its options",
        inputSchema={
            "type": "object",
            "properties": {
                "decision_id": {"type": "string"},
                "chosen_index": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Position of the chosen option",
                },
                "category": {
                    "type": "string",
                    "enum": [c.value for c in ResponseCategory],
                    "description": "Kind of companion response to return",
                },
            },
            "required": ["decision_id", "chosen_index"],
        },
    ),
    Tool(
        name="get_reality_id",
        description="Get the identifier of the current reality",
        inputSchema={"type": "object", "properties": {}},
    ),
    Tool(
        name="list_active_superpositions",
        description="List decisions that have not been resolved",
        inputSchema={"type": "object", "properties": {}},
    ),
    Tool(
        name="get_decision_history",
        description="Get every resolution in the order it happened",
        inputSchema={"type": "object", "properties": {}},
    ),
    Tool(
        name="get_decision_state",
        description="Get a decision with its options and resolution status",
        inputSchema={
            "type": "object",
            "properties": {
                "decision_id": {"type": "string"},
            },
            "required": ["decision_id"],
        },
    ),
    Tool(
        name="get_stats",
        description="Get decision counts and the current reality",
        inputSchema={"type": "object", "properties": {}},
    ),
    Tool(
        name="reset",
        description="Forget every decision and return to the base reality",
        inputSchema={"type": "object", "properties": {}},
    ),
    Tool(
        name="simulate_realities",
        description="Play decisions repeatedly with random choices and count realities",
        inputSchema={
            "type": "object",
            "properties": {
                "decisions": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "id": {"type": "string"},
                            "options": {"type": "array", "minItems": 1},
                        },
                        "required": ["id", "options"],
                    },
                },
                "iterations": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Number of runs",
                },
            },
            "required": ["decisions"],
        },
    ),
    Tool(
        name="get_greeting",
        description="Get the companion's greeting for a reality",
        inputSchema={
            "type": "object",
            "properties": {
                "reality_id": {
                    "type": "string",
                    "description": "Defaults to the current reality",
                },
            },
        },
    ),
    Tool(
        name="get_decision_response",
        description="Get the companion's comment on a decision",
        inputSchema={
            "type": "object",
            "properties": {
                "category": {
                    "type": "string",
                    "enum": [c.value for c in ResponseCategory],
                },
                "reality_id": {
                    "type": "string",
                    "description": "Defaults to the current reality",
                },
            },
            "required": ["category"],
        },
    ),
    Tool(
        name="remember_interaction",
        description="Record an interaction and adjust the companion relationship",
        inputSchema={
            "type": "object",
            "properties": {
                "kind": {"type": "string", "description": "What happened"},
                "detail": {"type": "string"},
                "positive": {"type": "boolean", "default": False},
                "negative": {"type": "boolean", "default": False},
            },
            "required": ["kind"],
        },
    ),
    Tool(
        name="get_companion",
        description="Get the companion's relationship, status and mood",
        inputSchema={"type": "object", "properties": {}},
    ),
]


# -------------------------------------------------------------------------
# Tool Dispatch
# -------------------------------------------------------------------------


def _text(text: str) -> list[TextContent]:
    return [TextContent(type="text", text=text)]


def _json(result: Any) -> list[TextContent]:
    return _text(json.dumps(result, indent=2, default=str))


def _flag(arguments: dict[str, Any], key: str) -> bool:
    value = arguments.get(key, False)
    if not isinstance(value, bool):
        raise InvalidArgumentError(f"{key} must be a boolean, got {value!r}")
    return value


def _reality_arg(arguments: dict[str, Any], engine: SuperpositionEngine) -> str:
    reality_id = arguments.get("reality_id", engine.current_reality)
    if not isinstance(reality_id, str):
        raise InvalidArgumentError(f"reality_id must be a string, got {reality_id!r}")
    return reality_id


def _superposition_to_dict(sup: Superposition) -> dict[str, Any]:
    return {
        "id": sup.id,
        "options_count": sup.options_count,
        "created_at": sup.created_at.isoformat(),
        "collapsed_state": sup.collapsed_state.id if sup.collapsed_state else None,
        "collapsed_at": sup.collapsed_at.isoformat() if sup.collapsed_at else None,
        "collapsed_by": sup.collapsed_by,
        "states": [
            {
                "id": s.id,
                "value": s.value,
                "probability": s.probability,
                "collapsed": s.collapsed,
            }
            for s in sup.states
        ],
    }


def dispatch(
    session: HotelSession, name: str, arguments: dict[str, Any]
) -> list[TextContent]:
    """Route a tool call to the session."""
    engine = session.engine
    companion = session.companion

    try:
        if name == "create_superposition":
            sup = engine.create_superposition(
                arguments["decision_id"], arguments["options"]
            )
            return _text(f"Created superposition: {sup.id}")

        elif name == "collapse_superposition":
            state, response = session.choose(
                arguments["decision_id"],
                arguments["chosen_index"],
                arguments.get("category", ResponseCategory.CONFIRMATION),
            )
            return _json(
                {
                    "state_id": state.id,
                    "value": state.value,
                    "reality_id": engine.current_reality,
                    "response": response,
                }
            )

        elif name == "get_reality_id":
            return _text(engine.current_reality)

        elif name == "list_active_superpositions":
            return _json(
                [_superposition_to_dict(s) for s in engine.get_active_superpositions()]
            )

        elif name == "get_decision_history":
            return _json([asdict(e) for e in engine.get_decision_history()])

        elif name == "get_decision_state":
            sup = engine.get_decision_state(arguments["decision_id"])
            if sup is None:
                return _text(f"Superposition not found: {arguments['decision_id']}")
            return _json(_superposition_to_dict(sup))

        elif name == "get_stats":
            return _json(asdict(engine.get_stats()))

        elif name == "reset":
            engine.reset()
            return _text(f"Reset to reality {engine.current_reality}")

        elif name == "simulate_realities":
            result = engine.simulate_multiple_realities(
                arguments["decisions"], arguments.get("iterations")
            )
            return _json(asdict(result))

        elif name == "get_greeting":
            reality_id = _reality_arg(arguments, engine)
            return _text(companion.get_greeting(reality_id))

        elif name == "get_decision_response":
            reality_id = _reality_arg(arguments, engine)
            return _text(
                companion.get_decision_response(arguments["category"], reality_id)
            )

        elif name == "remember_interaction":
            interaction = Interaction(
                kind=arguments["kind"],
                detail=arguments.get("detail", ""),
                positive=_flag(arguments, "positive"),
                negative=_flag(arguments, "negative"),
            )
            companion.remember_interaction(interaction)
            return _json(session.snapshot()["companion"])

        elif name == "get_companion":
            return _json(session.snapshot()["companion"])

        else:
            return _text(f"Unknown tool: {name}")

    except KeyError as e:
        return _text(f"Error: missing argument {e}")
    except QuantumHotelError as e:
        logger.warning("Tool %s failed: %s", name, e)
        return _text(f"Error: {e}")


def create_server(session: HotelSession) -> Server:
    """Build an MCP server bound to a single session."""
    server = Server("quantum_hotel")

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools."""
        return TOOLS

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        """Handle tool calls."""
        return dispatch(session, name, arguments or {})

    return server


# -------------------------------------------------------------------------
# Main Entry Point
# -------------------------------------------------------------------------


async def main():
    """Run the MCP server."""
    # stdout carries the protocol, so diagnostics go to stderr
    logging.basicConfig(
        level=os.getenv("QUANTUM_HOTEL_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    server = create_server(new_session())
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def run() -> None:
    import asyncio

    asyncio.run(main())


if __name__ == "__main__":
    run()
