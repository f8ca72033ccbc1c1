"""Example of using Quantum Hotel through MCP.

This demonstrates how a game front end would drive the MCP server.
"""

import asyncio
import json
from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client


async def run_example():
    """Run example MCP interactions."""
    # Connect to the MCP server
    server_params = StdioServerParameters(
        command="quantum-hotel-mcp",
        env={
            "QUANTUM_HOTEL_OBSERVER": "player",
            "QUANTUM_HOTEL_LOG_LEVEL": "INFO",
        },
    )

    async with stdio_client(server_params) as (read, write):
        async with ClientSession(read, write) as session:
            # Initialize connection
            await session.initialize()

            # List available tools
            tools = await session.list_tools()
            print(f"Available tools: {[t.name for t in tools.tools]}")

            greeting = await session.call_tool("get_greeting", {})
            print(f"\nHalim: {greeting.content[0].text}")

            # Register decisions
            print("\n=== Creating superpositions ===")
            await session.call_tool(
                "create_superposition",
                {"decision_id": "room", "options": ["101", "102", "103"]},
            )
            await session.call_tool(
                "create_superposition",
                {"decision_id": "key", "options": ["spin arriba", "spin abajo"]},
            )

            active = await session.call_tool("list_active_superpositions", {})
            print(f"Pending: {[s['id'] for s in json.loads(active.content[0].text)]}")

            # Resolve them
            print("\n=== Collapsing ===")
            for decision_id, index in [("room", 1), ("key", 0)]:
                result = await session.call_tool(
                    "collapse_superposition",
                    {"decision_id": decision_id, "chosen_index": index},
                )
                data = json.loads(result.content[0].text)
                print(f"{decision_id} -> {data['value']} [{data['reality_id']}]")
                print(f"  Halim: {data['response']}")

            # Report how the player treated the concierge
            companion = await session.call_tool(
                "remember_interaction",
                {"kind": "tip", "detail": "5 coins", "positive": True},
            )
            print(f"\nCompanion: {companion.content[0].text}")

            stats = await session.call_tool("get_stats", {})
            print(f"\nStats: {stats.content[0].text}")


if __name__ == "__main__":
    asyncio.run(run_example())
