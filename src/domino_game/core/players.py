"""Players and the ordered roster of players in a game."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from domino_game.core.board import Board
from domino_game.core.errors import EmptyRosterError, NotInHandError
from domino_game.core.tiles import Tile
from domino_game.core.tileset import TileSet


@dataclass(eq=False)
class Player:
    """A named player and the tiles they currently hold.

    Players compare by identity: two players may share a name and still be
    different seats at the table.

    Attributes:
        name: Display name.
        hand: Tiles owned by the player. Cleared on every reset.
    """

    name: str
    hand: TileSet = field(default_factory=TileSet)

    def __str__(self) -> str:
        return self.name

    def hand_count(self) -> int:
        """Return the number of tiles in the hand."""
        return len(self.hand)

    def hand_value(self) -> int:
        """Return the combined pip count of the hand."""
        return self.hand.sum_value()

    def add_to_hand(self, tile: Tile) -> None:
        self.hand.add(tile)

    def remove_from_hand(self, tile: Tile) -> None:
        """Remove ``tile`` from the hand.

        Raises:
            NotInHandError: If the player does not hold this tile.
        """
        if not self.hand.remove(tile):
            raise NotInHandError(f"'{self.name}' does not hold domino '{tile.name}'")

    def clear_hand(self) -> None:
        self.hand.clear()

    def highest_double(self) -> Tile | None:
        """Return the double with the highest pip count, or None.

        Only doubles are considered, so a high-valued non-double never wins
        over a low double.
        """
        return self.hand.doubles().highest_value()

    def best_matching_tile(self, board: Board) -> Tile | None:
        """Choose the tile this player would place on ``board``.

        On an empty board this is the highest double. Otherwise the player
        prefers the larger open end and plays its highest-valued match
        there; when the ends are equal or the preferred end has no match,
        the highest-valued tile matching either end is chosen.

        Args:
            board: The current board.

        Returns:
            The chosen tile, or None if the player has no legal move.
        """
        left, right = board.left_end, board.right_end
        if board.is_empty() or left is None or right is None:
            return self.highest_double()

        matches_left = self.hand.matching_face(left)
        matches_right = self.hand.matching_face(right)

        if matches_left.is_empty() and matches_right.is_empty():
            return None
        if left > right and not matches_left.is_empty():
            return matches_left.highest_value()
        if right > left and not matches_right.is_empty():
            return matches_right.highest_value()
        return matches_left.union(matches_right).highest_value()


class PlayerRoster:
    """Ordered collection of the players taking part in a game.

    Ordering queries return a new roster and never reorder this one.
    """

    def __init__(self, players: Iterable[Player] = ()) -> None:
        self._players: list[Player] = list(players)

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(list(self._players))

    def __getitem__(self, index: int) -> Player:
        return self._players[index]

    def __repr__(self) -> str:
        return f"PlayerRoster({[p.name for p in self._players]!r})"

    def get(self, name: str) -> Player | None:
        """Return the first player called ``name``, or None."""
        for player in self._players:
            if player.name == name:
                return player
        return None

    def ordered_by_lowest_hand_count(self) -> PlayerRoster:
        """Return the players sorted by ascending hand size (stable)."""
        return PlayerRoster(sorted(self._players, key=Player.hand_count))

    def ordered_by_highest_double(self) -> PlayerRoster:
        """Return the players sorted by their highest double, best first.

        Players without any double come after every player holding one.
        Ties keep roster order.
        """

        def sort_key(player: Player) -> tuple[int, int]:
            double = player.highest_double()
            if double is None:
                return (1, 0)
            return (0, -double.value())

        return PlayerRoster(sorted(self._players, key=sort_key))

    def player_with_lowest_hand_value(self) -> Player:
        """Return the player whose hand is worth the fewest pips.

        Ties go to the player earliest in roster order.

        Raises:
            EmptyRosterError: If the roster has no players.
        """
        if not self._players:
            raise EmptyRosterError("Cannot pick a lowest hand value from an empty roster")
        return sorted(self._players, key=Player.hand_value)[0]
