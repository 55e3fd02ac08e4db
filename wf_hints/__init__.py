"""
Workflow Hints - Workflow mention resolution and hint lifecycle.

Detects //name workflow mentions in chat messages, resolves them against
known workflow names, appends hint blocks for the agent and strips stale
or corrupted hint blocks from messages on later turns.
"""

__version__ = "0.1.0"
