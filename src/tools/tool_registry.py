# src/tools/tool_registry.py

# Lookup tools (deterministic, no LLM)
from src.tools.player_lookup import player_lookup_tool

# Every tool handed to an agent
ALL_TOOLS = [
    player_lookup_tool,
]

TOOLS_BY_NAME = {t.name: t for t in ALL_TOOLS}
