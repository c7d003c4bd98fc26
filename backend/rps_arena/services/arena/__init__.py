"""Arena domain services: matchmaking, rooms, outcomes and the ledger.

This package holds the in-memory game state and the rules that act on
it. Socket handlers and HTTP routes import from here, keeping transport
concerns separated from core match mechanics.
"""

from .state import Arena
from .resolver import resolve

__all__ = ['Arena', 'resolve']
