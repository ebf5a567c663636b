"""Tile representation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tile:
    """A domino tile with a top and a bottom face.

    Tiles are immutable. Unlike a canonical pair, the two faces keep the
    order they were created with, so ``Tile(3, 2)`` has a top face of 3.
    Equality compares face values; collections that must tell two
    equal-valued tiles apart compare by identity instead.

    Attributes:
        top: Pip count on the top face.
        bottom: Pip count on the bottom face.

    Raises:
        ValueError: If either face is negative.
    """

    top: int
    bottom: int

    def __post_init__(self) -> None:
        if self.top < 0 or self.bottom < 0:
            raise ValueError(f"Invalid tile: ({self.top}, {self.bottom})")

    @property
    def name(self) -> str:
        """Human-readable name of the form ``top-bottom``."""
        return f"{self.top}-{self.bottom}"

    def value(self) -> int:
        """Return the total pip count (sum of both faces).

        Returns:
            ``top + bottom``.
        """
        return self.top + self.bottom

    def is_double(self) -> bool:
        """Return True if both faces carry the same pip count."""
        return self.top == self.bottom

    def values(self) -> tuple[int, int]:
        """Return the two faces as ``(top, bottom)``."""
        return (self.top, self.bottom)

    def matches(self, face: int) -> bool:
        """Return True if either face equals ``face``.

        Args:
            face: The open-end value to match against.

        Returns:
            True if ``top == face`` or ``bottom == face``.
        """
        return self.top == face or self.bottom == face

    def other_value(self, face: int) -> int:
        """Given one face, return the opposite face.

        The top face is checked first, so for doubles the same value is
        returned.

        Args:
            face: One of the tile's pip values.

        Returns:
            The pip value on the other face.

        Raises:
            ValueError: If ``face`` is not on this tile.
        """
        if face == self.top:
            return self.bottom
        if face == self.bottom:
            return self.top
        raise ValueError(f"Value {face} not in tile {self}")

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Tile({self.top}, {self.bottom})"

