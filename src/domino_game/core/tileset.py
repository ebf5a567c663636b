"""Ordered tile container used for the deck, player hands and the board.

A ``TileSet`` is an ordered list of ``Tile`` instances in which no
instance appears twice. Membership is decided by identity, not by face
values: insertion order is meaningful (deal order for the deck, placement
order for the board) and two equal-valued tiles built separately are
distinct pieces.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import numpy as np

from domino_game.core.errors import EmptyCollectionError
from domino_game.core.tiles import Tile


class TileSet:
    """Ordered, identity-deduplicated collection of tiles.

    Args:
        tiles: Initial tiles, added in order. Repeated instances are
            skipped.
    """

    def __init__(self, tiles: Iterable[Tile] = ()) -> None:
        self._tiles: list[Tile] = []
        for tile in tiles:
            self.add(tile)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(list(self._tiles))

    def __contains__(self, tile: object) -> bool:
        return any(t is tile for t in self._tiles)

    def __str__(self) -> str:
        return ", ".join(tile.name for tile in self._tiles)

    def __repr__(self) -> str:
        return f"TileSet([{', '.join(repr(t) for t in self._tiles)}])"

    def is_empty(self) -> bool:
        return not self._tiles

    def has(self, tile: Tile) -> bool:
        """Return True if this exact tile instance is in the set."""
        return tile in self

    def first(self) -> Tile | None:
        return self._tiles[0] if self._tiles else None

    def last(self) -> Tile | None:
        return self._tiles[-1] if self._tiles else None

    def to_tuple(self) -> tuple[Tile, ...]:
        """Return a read-only snapshot of the tiles in order."""
        return tuple(self._tiles)

    def get(self, top: int, bottom: int) -> Tile | None:
        """Find the first tile carrying the given faces, in either orientation.

        Args:
            top: One face value.
            bottom: The other face value.

        Returns:
            The matching tile, or None if the set holds no such tile.
        """
        for tile in self._tiles:
            if tile.values() in ((top, bottom), (bottom, top)):
                return tile
        return None

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, tile: Tile) -> None:
        """Append ``tile`` unless this instance is already present."""
        self.append(tile)

    def append(self, tile: Tile) -> None:
        """Add ``tile`` to the end of the sequence (no-op if present)."""
        if tile not in self:
            self._tiles.append(tile)

    def prepend(self, tile: Tile) -> None:
        """Add ``tile`` to the start of the sequence (no-op if present)."""
        if tile not in self:
            self._tiles.insert(0, tile)

    def remove(self, tile: Tile) -> bool:
        """Remove this exact tile instance.

        Args:
            tile: The instance to remove.

        Returns:
            True if the tile was removed, False if it was not present.
        """
        for index, candidate in enumerate(self._tiles):
            if candidate is tile:
                del self._tiles[index]
                return True
        return False

    def clear(self) -> None:
        """Remove every tile."""
        self._tiles.clear()

    def shuffle(self, rng: np.random.Generator | None = None) -> None:
        """Apply a uniform random permutation in place.

        Args:
            rng: Random generator to draw the permutation from. A fresh
                unseeded generator is used when omitted.
        """
        rng = rng if rng is not None else np.random.default_rng()
        order = rng.permutation(len(self._tiles))
        self._tiles = [self._tiles[i] for i in order]

    def draw_random(self, rng: np.random.Generator | None = None) -> Tile:
        """Remove and return a uniformly chosen tile.

        Args:
            rng: Random generator used to pick the tile. A fresh unseeded
                generator is used when omitted.

        Returns:
            The drawn tile, which is no longer in the set.

        Raises:
            EmptyCollectionError: If the set is empty.
        """
        if not self._tiles:
            raise EmptyCollectionError("Cannot draw a tile from an empty collection")
        rng = rng if rng is not None else np.random.default_rng()
        return self._tiles.pop(int(rng.integers(len(self._tiles))))

    # ------------------------------------------------------------------
    # Derived queries (never mutate self)
    # ------------------------------------------------------------------

    def sum_value(self) -> int:
        """Return the combined pip count of every tile."""
        return sum(tile.value() for tile in self._tiles)

    def highest_value(self) -> Tile | None:
        """Return the tile with the largest pip count.

        Ties go to the tile that comes first in the sequence.

        Returns:
            The highest-valued tile, or None if the set is empty.
        """
        if not self._tiles:
            return None
        return max(self._tiles, key=Tile.value)

    def matching_face(self, face: int) -> TileSet:
        """Return the tiles that carry ``face`` on either side, in order."""
        return TileSet(tile for tile in self._tiles if tile.matches(face))

    def doubles(self) -> TileSet:
        """Return the double tiles, in order."""
        return TileSet(tile for tile in self._tiles if tile.is_double())

    def sorted_by_value(self) -> TileSet:
        """Return a copy ordered by descending pip count (stable on ties)."""
        return TileSet(sorted(self._tiles, key=Tile.value, reverse=True))

    def union(self, other: Iterable[Tile]) -> TileSet:
        """Return this set followed by the tiles of ``other`` not already in it."""
        merged = TileSet(self._tiles)
        for tile in other:
            merged.add(tile)
        return merged


def generate_full_set(max_face: int = 6) -> TileSet:
    """Generate the complete deck for a given highest face value.

    Contains every unordered pair ``(i, j)`` with
    ``0 <= i <= j <= max_face`` exactly once, in ascending order, for a
    total of ``(max_face + 1) * (max_face + 2) / 2`` tiles.

    Args:
        max_face: The highest pip value on any face (6 for a double-six set).

    Returns:
        A new TileSet holding the full deck.

    Raises:
        ValueError: If ``max_face`` is negative.
    """
    if max_face < 0:
        raise ValueError(f"Invalid max face value: {max_face}. Must be >= 0.")
    return TileSet(
        Tile(i, j) for i in range(max_face + 1) for j in range(i, max_face + 1)
    )
