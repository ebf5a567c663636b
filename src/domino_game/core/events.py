"""Notifications published by the game engine.

The engine does not write output itself. Each observable state change is
described by a ``GameEvent`` and handed to every subscribed listener, a
plain callable. ``LoggingListener`` renders events through the standard
``logging`` module; callers that want no output simply subscribe nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from domino_game.core.tiles import Tile

if TYPE_CHECKING:
    from domino_game.core.players import Player

logger = logging.getLogger(__name__)


class GameEventType(Enum):
    """Kinds of state change a game reports."""

    RESET = "reset"
    SHUFFLED = "shuffled"
    TILE_DEALT = "tile_dealt"
    DEALT = "dealt"
    NO_MATCH = "no_match"
    TILE_DRAWN = "tile_drawn"
    TILE_PLACED = "tile_placed"
    DECK_EXHAUSTED = "deck_exhausted"
    ROUND_COMPLETED = "round_completed"
    WINNER = "winner"


@dataclass(frozen=True)
class GameEvent:
    """A single state change.

    Attributes:
        type: What happened.
        message: Human-readable description.
        player: The player concerned, if any.
        tile: The tile concerned, if any.
        summary: Extra report lines (deck contents and hands) for
            ``DEALT`` and ``ROUND_COMPLETED`` events.
    """

    type: GameEventType
    message: str
    player: Player | None = None
    tile: Tile | None = None
    summary: tuple[str, ...] = ()


GameListener = Callable[[GameEvent], None]


class LoggingListener:
    """Listener that writes every event to a ``logging.Logger``.

    Per-tile dealing is logged at DEBUG, everything else at INFO.

    Args:
        target: Logger to write to. Defaults to this module's logger.
    """

    _DEBUG_EVENTS = frozenset({GameEventType.TILE_DEALT})

    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger = target if target is not None else logger

    def __call__(self, event: GameEvent) -> None:
        level = logging.DEBUG if event.type in self._DEBUG_EVENTS else logging.INFO
        self._logger.log(level, event.message)
        for line in event.summary:
            self._logger.log(level, line)
