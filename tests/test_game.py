"""Tests for the game engine: reset, deal and the turn loop."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from domino_game.core.errors import (
    DeckTooSmallError,
    DominoGameError,
    GameStateError,
    InvalidHandSizeError,
    InvalidPlayerCountError,
)
from domino_game.core.events import GameEvent, GameEventType
from domino_game.core.game import DominoGame, GameStatus, create_game
from domino_game.core.players import Player, PlayerRoster
from domino_game.core.tiles import Tile

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

NAMES = ["Alice", "Bob", "Carol", "Dave"]


class ScriptedRng:
    """Stand-in generator with a fixed shuffle order that always draws index 0."""

    def __init__(self, order: list[int] | None = None) -> None:
        self._order = order

    def permutation(self, n: int) -> np.ndarray:
        order = self._order if self._order is not None else list(range(n))
        assert len(order) == n
        return np.array(order, dtype=np.int64)

    def integers(self, high: int) -> int:
        return 0


def _make_game(
    player_count: int = 2,
    max_face: int = 6,
    seed: int | None = 0,
    events: list[GameEvent] | None = None,
) -> DominoGame:
    listeners = [events.append] if events is not None else []
    return create_game(
        NAMES[:player_count],
        max_face,
        listeners=listeners,
        rng=np.random.default_rng(seed),
    )


def _values(tiles: Iterable[Tile]) -> list[tuple[int, int]]:
    return [t.values() for t in tiles]


# ---------------------------------------------------------------------------
# Construction and reset
# ---------------------------------------------------------------------------


class TestReset:
    """Tests for game creation and reset."""

    @pytest.mark.parametrize("player_count", [0, 1, 5, 12])
    def test_invalid_player_count(self, player_count: int) -> None:
        names = [f"Player {i}" for i in range(player_count)]
        with pytest.raises(
            InvalidPlayerCountError,
            match=f"minimum of 2 and a maximum of 4 players; {player_count} provided",
        ):
            create_game(names, 6)

    @pytest.mark.parametrize(("max_face", "expected"), [(0, 1), (1, 3), (6, 28), (9, 55)])
    def test_fresh_deck_size(self, max_face: int, expected: int) -> None:
        game = _make_game(max_face=max_face)
        assert len(game.deck) == expected

    def test_initial_state(self) -> None:
        game = _make_game(player_count=3)
        assert game.status is GameStatus.NOT_STARTED
        assert game.winner is None
        assert game.board.is_empty()
        assert [p.name for p in game.players] == NAMES[:3]
        assert all(p.hand_count() == 0 for p in game.players)

    def test_accepts_plain_player_list(self) -> None:
        players = [Player("Alice"), Player("Bob")]
        game = DominoGame(players, 6)
        assert isinstance(game.players, PlayerRoster)
        assert list(game.players) == players

    def test_reset_clears_hands_keeps_players(self) -> None:
        game = _make_game()
        game.deal(7)
        roster = game.players
        game.reset(roster, 6)
        assert list(game.players) == list(roster)
        assert all(p.hand_count() == 0 for p in game.players)
        assert len(game.deck) == 28
        assert game.status is GameStatus.NOT_STARTED

    def test_reset_clears_board_and_winner(self) -> None:
        game = _make_game()
        game.run(7)
        game.reset(game.players, 6)
        assert game.board.is_empty()
        assert game.winner is None

    def test_reset_twice_is_idempotent(self) -> None:
        game = _make_game()
        roster = game.players
        for _ in range(2):
            game.reset(roster, 6)
            assert len(game.deck) == 28
            assert all(p.hand_count() == 0 for p in game.players)

    def test_invalid_reset_leaves_game_untouched(self) -> None:
        game = _make_game()
        game.deal(7)
        with pytest.raises(InvalidPlayerCountError):
            game.reset(PlayerRoster([Player("Solo")]), 6)
        assert all(p.hand_count() == 7 for p in game.players)
        assert len(game.deck) == 14


# ---------------------------------------------------------------------------
# Dealing
# ---------------------------------------------------------------------------


class TestDeal:
    """Tests for dealing hands from the deck."""

    @pytest.mark.parametrize("hand_size", [0, -1, -100])
    def test_hand_size_below_one(self, hand_size: int) -> None:
        game = _make_game()
        with pytest.raises(InvalidHandSizeError, match="minimum of 1"):
            game.deal(hand_size)

    @pytest.mark.parametrize("hand_size", [15, 28, 100])
    def test_deck_too_small(self, hand_size: int) -> None:
        game = _make_game()
        with pytest.raises(
            DeckTooSmallError,
            match=f"hand size {hand_size} exceeds .* deck size of 28",
        ):
            game.deal(hand_size)

    def test_failed_deal_does_not_mutate(self) -> None:
        game = _make_game()
        before = _values(game.deck)
        with pytest.raises(DeckTooSmallError):
            game.deal(15)
        assert _values(game.deck) == before
        assert all(p.hand_count() == 0 for p in game.players)
        assert game.status is GameStatus.NOT_STARTED

    @pytest.mark.parametrize("player_count", [2, 3, 4])
    def test_every_player_gets_full_hand(self, player_count: int) -> None:
        game = _make_game(player_count=player_count)
        game.deal(7)
        assert len(game.deck) == 28 - player_count * 7
        for player in game.players:
            assert player.hand_count() == 7
        assert game.status is GameStatus.DEALT

    def test_dealt_tiles_are_deck_tiles(self) -> None:
        game = _make_game(player_count=4)
        deck_ids = {id(t) for t in game.deck}
        game.deal(7)
        dealt = [t for p in game.players for t in p.hand]
        assert {id(t) for t in dealt} == deck_ids
        assert len(dealt) == 28

    def test_deal_alternates_in_shuffled_order(self) -> None:
        game = create_game(["A", "B"], 2, rng=ScriptedRng())
        game.deal(2)
        a, b = game.players
        assert _values(a.hand) == [(0, 0), (0, 2)]
        assert _values(b.hand) == [(0, 1), (1, 1)]
        assert _values(game.deck) == [(1, 2), (2, 2)]

    def test_deal_twice_requires_reset(self) -> None:
        game = _make_game()
        game.deal(3)
        with pytest.raises(GameStateError, match="reset it first"):
            game.deal(3)

    def test_same_seed_same_deal(self) -> None:
        first = _make_game(seed=99)
        second = _make_game(seed=99)
        first.deal(7)
        second.deal(7)
        for p1, p2 in zip(first.players, second.players):
            assert _values(p1.hand) == _values(p2.hand)


# ---------------------------------------------------------------------------
# Scripted games
# ---------------------------------------------------------------------------


class TestScriptedGames:
    """Games with a fixed deal, traced turn by turn."""

    def test_opening_double_wins_immediately(self) -> None:
        game = create_game(["A", "B"], 1, rng=ScriptedRng())
        winner = game.run(1)
        assert winner.name == "A"
        assert winner.hand_count() == 0
        assert game.board.placed == (Tile(0, 0),)

    def test_draw_then_play_out(self) -> None:
        events: list[GameEvent] = []
        game = create_game(["A", "B"], 2, listeners=[events.append], rng=ScriptedRng())
        winner = game.run(2)

        assert winner.name == "B"
        assert game.winner is winner
        assert game.status is GameStatus.FINISHED
        assert _values(game.board.placed) == [(1, 2), (1, 1), (0, 1)]
        assert (game.board.left_end, game.board.right_end) == (2, 0)
        assert _values(game.players[0].hand) == [(0, 0), (0, 2)]
        assert _values(game.deck) == [(2, 2)]

        drawn = [e for e in events if e.type is GameEventType.TILE_DRAWN]
        assert len(drawn) == 1
        assert drawn[0].player is game.players[0]
        assert drawn[0].tile == Tile(1, 2)

    def test_deck_exhaustion_picks_lowest_hand_value(self) -> None:
        events: list[GameEvent] = []
        # Deals A: 3-3 0-0 0-1 1-1 0-2, B: 1-2 2-2 0-3 1-3 2-3.
        order = [9, 5, 0, 7, 1, 3, 4, 6, 2, 8]
        game = create_game(
            ["A", "B"], 3, listeners=[events.append], rng=ScriptedRng(order)
        )
        winner = game.run(5)

        a, b = game.players
        assert winner is a
        assert _values(a.hand) == [(0, 0)]
        assert _values(b.hand) == [(0, 3)]
        assert game.deck.is_empty()
        assert (game.board.left_end, game.board.right_end) == (1, 2)
        assert events[-2].type is GameEventType.DECK_EXHAUSTED
        assert events[-1].type is GameEventType.WINNER
        assert "lowest hand value of '0'" in events[-1].message


# ---------------------------------------------------------------------------
# Lifecycle and events
# ---------------------------------------------------------------------------


class TestRun:
    """Tests for running full games."""

    def test_run_twice_requires_reset(self) -> None:
        game = _make_game()
        game.run(7)
        with pytest.raises(GameStateError):
            game.run(7)

    def test_run_again_after_reset(self) -> None:
        game = _make_game(seed=5)
        game.run(7)
        game.reset(game.players, 6)
        winner = game.run(7)
        assert winner in list(game.players)
        assert game.status is GameStatus.FINISHED

    def test_run_propagates_deal_errors(self) -> None:
        game = _make_game()
        with pytest.raises(DominoGameError):
            game.run(0)

    def test_same_seed_same_game(self) -> None:
        first = _make_game(player_count=3, seed=2024)
        second = _make_game(player_count=3, seed=2024)
        assert first.run(5).name == second.run(5).name
        assert _values(first.board.placed) == _values(second.board.placed)

    def test_event_stream(self) -> None:
        events: list[GameEvent] = []
        game = _make_game(events=events, seed=11)
        game.run(7)

        kinds = [e.type for e in events]
        assert kinds[0] is GameEventType.RESET
        assert kinds[1] is GameEventType.SHUFFLED
        assert kinds[2:16] == [GameEventType.TILE_DEALT] * 14
        assert kinds[16] is GameEventType.DEALT
        assert events[16].summary
        assert GameEventType.ROUND_COMPLETED not in kinds[:17]
        assert kinds[-1] is GameEventType.WINNER
        assert kinds.count(GameEventType.WINNER) == 1
        assert kinds.count(GameEventType.TILE_PLACED) == len(game.board)
        assert events[-1].player is game.winner

    def test_subscribe_after_creation(self) -> None:
        events: list[GameEvent] = []
        game = _make_game()
        game.subscribe(events.append)
        game.deal(2)
        assert [e.type for e in events][-1] is GameEventType.DEALT

    @given(
        seed=st.integers(0, 2**32 - 1),
        player_count=st.integers(2, 4),
        hand_size=st.integers(1, 7),
    )
    @settings(max_examples=60, deadline=None)
    def test_hypothesis_game_terminates_with_valid_winner(
        self, seed: int, player_count: int, hand_size: int
    ) -> None:
        game = _make_game(player_count=player_count, seed=seed)
        winner = game.run(hand_size)
        players = list(game.players)

        assert winner in players
        assert game.winner is winner
        if winner.hand_count() > 0:
            assert game.deck.is_empty()
            assert winner.hand_value() == min(p.hand_value() for p in players)

        # Every tile is in exactly one place.
        in_play = sum(p.hand_count() for p in players) + len(game.deck) + len(game.board)
        assert in_play == 28
