"""Playable table around the poker engine: computer and terminal players."""

from .bots import AggressiveBot, PassiveBot
from .terminal import TerminalActionProvider

__all__ = ["AggressiveBot", "PassiveBot", "TerminalActionProvider"]
