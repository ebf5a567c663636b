"""Game engine: dealing, the turn loop and winner resolution.

``DominoGame`` owns one board, one deck (the boneyard) and one roster. A
game moves through ``NOT_STARTED -> DEALT -> IN_PROGRESS -> FINISHED``;
``reset`` returns it to ``NOT_STARTED`` with a fresh deck and empty hands.
All randomness comes from a single injected ``numpy.random.Generator`` so
that a seeded game replays identically.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

import numpy as np

from domino_game.core.board import Board
from domino_game.core.errors import (
    DeckTooSmallError,
    GameStateError,
    InvalidHandSizeError,
    InvalidPlayerCountError,
)
from domino_game.core.events import GameEvent, GameEventType, GameListener
from domino_game.core.players import Player, PlayerRoster
from domino_game.core.tiles import Tile
from domino_game.core.tileset import TileSet, generate_full_set

MIN_PLAYERS = 2
MAX_PLAYERS = 4


class GameStatus(Enum):
    """Lifecycle of a single game."""

    NOT_STARTED = "not_started"
    DEALT = "dealt"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class DominoGame:
    """A game of dominoes between two to four players.

    Args:
        players: The roster, or any iterable of players.
        max_face: Highest pip value in the deck (6 for double-six).
        listeners: Callables that receive every ``GameEvent``.
        rng: Random generator for shuffling and drawing. A fresh unseeded
            generator is used when omitted.

    Raises:
        InvalidPlayerCountError: If the roster size is outside [2, 4].
    """

    def __init__(
        self,
        players: PlayerRoster | Iterable[Player],
        max_face: int = 6,
        *,
        listeners: Iterable[GameListener] = (),
        rng: np.random.Generator | None = None,
    ) -> None:
        self._listeners: list[GameListener] = list(listeners)
        self._rng = rng if rng is not None else np.random.default_rng()
        self._board = Board()
        self._deck = TileSet()
        self._players = PlayerRoster()
        self._status = GameStatus.NOT_STARTED
        self._winner: Player | None = None
        self.reset(players, max_face)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def players(self) -> PlayerRoster:
        return self._players

    @property
    def deck(self) -> TileSet:
        return self._deck

    @property
    def board(self) -> Board:
        return self._board

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def winner(self) -> Player | None:
        """The winning player once the game is finished, otherwise None."""
        return self._winner

    def subscribe(self, listener: GameListener) -> None:
        """Register a callable to receive every subsequent ``GameEvent``."""
        self._listeners.append(listener)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self, players: PlayerRoster | Iterable[Player], max_face: int) -> None:
        """Prepare a new game with a fresh deck and empty hands.

        Player identities are kept; only their hands are cleared.

        Args:
            players: The roster for the new game.
            max_face: Highest pip value in the new deck.

        Raises:
            InvalidPlayerCountError: If the roster size is outside [2, 4].
            ValueError: If ``max_face`` is negative.
        """
        roster = players if isinstance(players, PlayerRoster) else PlayerRoster(players)
        player_count = len(roster)
        if not MIN_PLAYERS <= player_count <= MAX_PLAYERS:
            raise InvalidPlayerCountError(
                f"There must be a minimum of {MIN_PLAYERS} and a maximum of "
                f"{MAX_PLAYERS} players; {player_count} provided"
            )
        deck = generate_full_set(max_face)

        for player in roster:
            player.clear_hand()
        self._players = roster
        self._deck = deck
        self._board.clear()
        self._status = GameStatus.NOT_STARTED
        self._winner = None
        self._emit(GameEventType.RESET, "Resetting game")

    def deal(self, hand_size: int) -> None:
        """Shuffle the deck and deal ``hand_size`` tiles to every player.

        Each tile, in shuffled order, goes to the player holding the fewest
        tiles among those still short of a full hand.

        Args:
            hand_size: Number of tiles each player receives.

        Raises:
            GameStateError: If the game has already been dealt.
            InvalidHandSizeError: If ``hand_size`` is smaller than 1.
            DeckTooSmallError: If the deck cannot fill every hand.
        """
        if self._status is not GameStatus.NOT_STARTED:
            raise GameStateError(
                f"Cannot deal a game that is {self._status.value}; reset it first"
            )
        if hand_size < 1:
            raise InvalidHandSizeError("Hand sizes must be a minimum of 1")

        deck_count = len(self._deck)
        player_count = len(self._players)
        if deck_count < hand_size * player_count:
            raise DeckTooSmallError(
                f"The hand size {hand_size} exceeds the maximum permissible "
                f"for current deck size of {deck_count}"
            )

        self._deck.shuffle(self._rng)
        self._emit(
            GameEventType.SHUFFLED,
            f"Deck shuffled: {self._deck}",
            summary=(
                f"Dealing a hand size of {hand_size} dominoes to {player_count} players",
            ),
        )

        for tile in self._deck:
            receiver = self._next_receiver(hand_size)
            if receiver is None:
                break
            receiver.add_to_hand(tile)
            self._deck.remove(tile)
            self._emit(
                GameEventType.TILE_DEALT,
                f"'{receiver}' was dealt domino '{tile}'",
                player=receiver,
                tile=tile,
            )

        self._status = GameStatus.DEALT
        self._emit(GameEventType.DEALT, "Deal completed", summary=self._summary())

    def run(self, hand_size: int) -> Player:
        """Deal and play the game to completion.

        Args:
            hand_size: Number of tiles dealt to each player.

        Returns:
            The winner: the first player to empty their hand, or the player
            with the lowest hand value once nobody can move and the deck is
            exhausted.

        Raises:
            DominoGameError: If the deal fails or the game was already
                started.
        """
        self.deal(hand_size)
        self._status = GameStatus.IN_PROGRESS

        winner = None
        while winner is None:
            winner = self._take_turns()

        self._winner = winner
        self._status = GameStatus.FINISHED
        return winner

    # ------------------------------------------------------------------
    # Turn handling (internal)
    # ------------------------------------------------------------------

    def _next_receiver(self, hand_size: int) -> Player | None:
        """Return the player with the fewest tiles still below ``hand_size``."""
        for player in self._players.ordered_by_lowest_hand_count():
            if player.hand_count() < hand_size:
                return player
        return None

    def _take_turns(self) -> Player | None:
        """Give every player one turn.

        The opening round is played in order of highest double; later rounds
        follow roster order.

        Returns:
            The winner if the game ended during this round, otherwise None.
        """
        order = (
            self._players.ordered_by_highest_double()
            if self._board.is_empty()
            else self._players
        )

        for player in order:
            winner = self._take_turn(player)
            if winner is not None:
                self._emit(
                    GameEventType.WINNER,
                    f"'{winner}' is the winner with the lowest hand value of "
                    f"'{winner.hand_value()}'",
                    player=winner,
                )
                return winner

            if player.hand_count() == 0:
                self._emit(
                    GameEventType.WINNER,
                    f"'{player}' is the winner with 0 dominoes left to play",
                    player=player,
                )
                return player

        self._emit(GameEventType.ROUND_COMPLETED, "Round completed", summary=self._summary())
        return None

    def _take_turn(self, player: Player) -> Player | None:
        """Play a single turn for ``player``.

        The player places their best matching tile; without one they draw
        from the deck. If the deck is already empty the game is decided by
        lowest hand value.

        Returns:
            The winner when the deck is exhausted, otherwise None.
        """
        tile = player.best_matching_tile(self._board)
        if tile is None:
            self._emit(
                GameEventType.NO_MATCH,
                f"'{player}' was unable to find a matching domino",
                player=player,
            )
            if self._deck.is_empty():
                self._emit(
                    GameEventType.DECK_EXHAUSTED,
                    f"'{player}' has no more dominoes available to pick from the deck; "
                    "determining the winner from the lowest total score of each hand",
                    player=player,
                )
                return self._players.player_with_lowest_hand_value()

            drawn = self._deck.draw_random(self._rng)
            player.add_to_hand(drawn)
            self._emit(
                GameEventType.TILE_DRAWN,
                f"'{player}' has picked domino '{drawn}' from the deck",
                player=player,
                tile=drawn,
            )
            return None

        self._board.place(tile)
        player.remove_from_hand(tile)
        self._emit(
            GameEventType.TILE_PLACED,
            f"'{player}' has placed domino '{tile}'",
            player=player,
            tile=tile,
        )
        return None

    def _summary(self) -> tuple[str, ...]:
        lines = []
        if not self._deck.is_empty():
            lines.append(f"Remaining tiles: {self._deck}")
        if not self._board.is_empty():
            lines.append(f"Board: {self._board}")
        lines.extend(f"'{player}' hand: {player.hand}" for player in self._players)
        return tuple(lines)

    def _emit(
        self,
        event_type: GameEventType,
        message: str,
        *,
        player: Player | None = None,
        tile: Tile | None = None,
        summary: tuple[str, ...] = (),
    ) -> None:
        event = GameEvent(
            type=event_type, message=message, player=player, tile=tile, summary=summary
        )
        for listener in self._listeners:
            listener(event)


def create_game(
    player_names: Iterable[str],
    max_face: int = 6,
    *,
    listeners: Iterable[GameListener] = (),
    rng: np.random.Generator | None = None,
) -> DominoGame:
    """Create a game with a new player for each name.

    Args:
        player_names: Display names, one per player, in seating order.
        max_face: Highest pip value in the deck.
        listeners: Callables that receive every ``GameEvent``.
        rng: Random generator for shuffling and drawing.

    Returns:
        A game ready to ``run``.

    Raises:
        InvalidPlayerCountError: If fewer than 2 or more than 4 names are
            given.
    """
    players = PlayerRoster(Player(name) for name in player_names)
    return DominoGame(players, max_face, listeners=listeners, rng=rng)
