"""Game settings that may come from the environment.

Only the tile range and hand size are configurable; player-count limits
are fixed by the rules in ``domino_game.core.game``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from domino_game.core.errors import InvalidHandSizeError

DEFAULT_MAX_FACE = 6
DEFAULT_HAND_SIZE = 7


@dataclass(frozen=True)
class GameConfig:
    """Settings for a single game.

    Attributes:
        max_face: Highest pip value in the deck.
        hand_size: Number of tiles dealt to each player.
    """

    max_face: int = DEFAULT_MAX_FACE
    hand_size: int = DEFAULT_HAND_SIZE

    @classmethod
    def from_env(cls) -> GameConfig:
        """Build settings from ``DOMINO_MAX_FACE`` and ``DOMINO_HAND_SIZE``.

        Unset variables fall back to the double-six defaults.

        Raises:
            ValueError: If a variable is set but is not an integer.
        """
        return cls(
            max_face=_int_from_env("DOMINO_MAX_FACE", DEFAULT_MAX_FACE),
            hand_size=_int_from_env("DOMINO_HAND_SIZE", DEFAULT_HAND_SIZE),
        )

    def validate(self) -> None:
        """Raise if the settings can never produce a playable game."""
        if self.max_face < 0:
            raise ValueError(f"Invalid max face value: {self.max_face}. Must be >= 0.")
        if self.hand_size < 1:
            raise InvalidHandSizeError("Hand sizes must be a minimum of 1")


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
