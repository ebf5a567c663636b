"""Core domain types for the domino game engine."""

from domino_game.core.board import Board
from domino_game.core.errors import (
    DeckTooSmallError,
    DominoGameError,
    EmptyCollectionError,
    EmptyRosterError,
    GameStateError,
    InvalidHandSizeError,
    InvalidPlacementError,
    InvalidPlayerCountError,
    NotInHandError,
)
from domino_game.core.events import GameEvent, GameEventType, GameListener, LoggingListener
from domino_game.core.game import MAX_PLAYERS, MIN_PLAYERS, DominoGame, GameStatus, create_game
from domino_game.core.players import Player, PlayerRoster
from domino_game.core.tiles import Tile
from domino_game.core.tileset import TileSet, generate_full_set

__all__ = [
    "Board",
    "DeckTooSmallError",
    "DominoGame",
    "DominoGameError",
    "EmptyCollectionError",
    "EmptyRosterError",
    "GameEvent",
    "GameEventType",
    "GameListener",
    "GameStateError",
    "GameStatus",
    "InvalidHandSizeError",
    "InvalidPlacementError",
    "InvalidPlayerCountError",
    "LoggingListener",
    "MAX_PLAYERS",
    "MIN_PLAYERS",
    "NotInHandError",
    "Player",
    "PlayerRoster",
    "Tile",
    "TileSet",
    "create_game",
    "generate_full_set",
]
