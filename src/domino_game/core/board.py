"""The shared board: placed tiles plus their two open ends.

The start of the placed sequence is the *left* of the chain and its end is
the *right*. Only the two exposed faces matter for matching, so they are
kept as plain integers and updated on every placement.
"""

from __future__ import annotations

from domino_game.core.errors import InvalidPlacementError
from domino_game.core.tiles import Tile
from domino_game.core.tileset import TileSet


class Board:
    """Ordered chain of placed tiles with left and right open ends.

    The board is either empty (no tiles, both ends None) or open (at least
    one tile, both ends defined). ``clear`` returns it to empty.
    """

    def __init__(self) -> None:
        self._placed = TileSet()
        self._left_end: int | None = None
        self._right_end: int | None = None

    def __len__(self) -> int:
        return len(self._placed)

    def __str__(self) -> str:
        return str(self._placed)

    def is_empty(self) -> bool:
        """Return True if no tile has been placed."""
        return self._placed.is_empty()

    @property
    def left_end(self) -> int | None:
        """The exposed face at the left of the chain, or None when empty."""
        return self._left_end

    @property
    def right_end(self) -> int | None:
        """The exposed face at the right of the chain, or None when empty."""
        return self._right_end

    @property
    def placed(self) -> tuple[Tile, ...]:
        """The placed tiles from left to right."""
        return self._placed.to_tuple()

    def leftmost(self) -> Tile | None:
        """Return the tile at the left of the chain."""
        return self._placed.first()

    def rightmost(self) -> Tile | None:
        """Return the tile at the right of the chain."""
        return self._placed.last()

    def place(self, tile: Tile) -> bool:
        """Place ``tile`` on the board.

        The first tile must be a double and sets both ends to its face.
        Afterwards the tile is tried against the larger open end first
        (left first when the ends are equal), then against the other end.
        A tile may be flipped: either of its faces can touch the open end,
        and its opposite face becomes the new open end.

        Args:
            tile: The tile to place.

        Returns:
            True once the tile has been placed.

        Raises:
            InvalidPlacementError: If the tile is already on the board, if the
                board is empty and the tile is not a double, or if the tile
                matches neither open end. The board is left unchanged.
        """
        if tile in self._placed:
            raise InvalidPlacementError(f"'{tile.name}' is already on the board")

        if self._left_end is None or self._right_end is None:
            if not tile.is_double():
                raise InvalidPlacementError(
                    f"The first domino placed must be a double; '{tile.name}' provided"
                )
            self._placed.append(tile)
            self._left_end = tile.top
            self._right_end = tile.bottom
            return True

        left, right = self._left_end, self._right_end

        if left > right:
            placed = self._place_left(tile) or self._place_right(tile)
        elif right > left:
            placed = self._place_right(tile) or self._place_left(tile)
        else:
            placed = self._place_left(tile) or self._place_right(tile)

        if not placed:
            raise InvalidPlacementError(
                f"The domino '{tile.name}' cannot be placed on the board; "
                f"tiles must match values '{left}' or '{right}'"
            )
        return True

    def _place_left(self, tile: Tile) -> bool:
        """Attach ``tile`` to the left end if either face matches it."""
        assert self._left_end is not None
        if not tile.matches(self._left_end):
            return False
        self._placed.prepend(tile)
        self._left_end = tile.other_value(self._left_end)
        return True

    def _place_right(self, tile: Tile) -> bool:
        """Attach ``tile`` to the right end if either face matches it."""
        assert self._right_end is not None
        if not tile.matches(self._right_end):
            return False
        self._placed.append(tile)
        self._right_end = tile.other_value(self._right_end)
        return True

    def clear(self) -> None:
        """Remove every placed tile and forget both open ends."""
        self._placed.clear()
        self._left_end = None
        self._right_end = None
