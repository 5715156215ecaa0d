"""Switchboard: vertical policy and prompt-synthesis engine.

Resolves a business's industry vertical and feature toggles into the
action policy and system prompt of a multi-channel conversational agent.
"""

__version__ = "0.1.0"
