"""Typed failures raised by the domino game engine.

Every error derives from ``DominoGameError``, which is itself a
``ValueError``: all of them describe an invalid request made against the
current game state and are recoverable by the caller.
"""

from __future__ import annotations


class DominoGameError(ValueError):
    """Base class for all domino game failures."""


class InvalidPlayerCountError(DominoGameError):
    """The roster has fewer than two or more than four players."""


class InvalidHandSizeError(DominoGameError):
    """The requested hand size is smaller than one."""


class DeckTooSmallError(DominoGameError):
    """The deck cannot supply a full hand to every player."""


class InvalidPlacementError(DominoGameError):
    """A tile cannot be placed on the board."""


class EmptyCollectionError(DominoGameError):
    """A tile was requested from an empty collection."""


class NotInHandError(DominoGameError):
    """A player was asked to give up a tile they do not hold."""


class EmptyRosterError(DominoGameError):
    """A roster query needs at least one player."""


class GameStateError(DominoGameError):
    """The game is not in the right state for the requested operation."""
