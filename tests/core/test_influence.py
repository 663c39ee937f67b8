"""Tests for influence aggregation."""

import logging
import random
from concurrent.futures import ThreadPoolExecutor

from outpost.core.enums import Color, PieceType
from outpost.core.fen import STARTING_FEN, snapshot_from_fen
from outpost.core.influence import (
    NO_INFLUENCE,
    SquareInfluence,
    compute_influence,
    influence_at,
)
from outpost.core.piece import PieceObservation

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"


class TestSquareInfluence:
    def test_defaults_to_zero(self) -> None:
        assert NO_INFLUENCE == SquareInfluence(0, 0)
        assert NO_INFLUENCE.total == 0

    def test_with_attacker_is_a_copy(self) -> None:
        base = SquareInfluence(1, 2)
        assert base.with_attacker(Color.WHITE) == SquareInfluence(2, 2)
        assert base.with_attacker(Color.BLACK) == SquareInfluence(1, 3)
        assert base == SquareInfluence(1, 2)

    def test_count(self) -> None:
        counts = SquareInfluence(3, 1)
        assert counts.count(Color.WHITE) == 3
        assert counts.count(Color.BLACK) == 1


class TestComputeInfluence:
    def test_empty_board(self) -> None:
        assert compute_influence([]) == {}

    def test_single_knight(self) -> None:
        pieces = [PieceObservation(PieceType.KNIGHT, Color.WHITE, "a1")]
        assert compute_influence(pieces) == {
            "b3": SquareInfluence(1, 0),
            "c2": SquareInfluence(1, 0),
        }

    def test_starting_position_third_rank(self) -> None:
        influence = compute_influence(snapshot_from_fen(STARTING_FEN))
        assert influence["a3"] == SquareInfluence(3, 0)
        assert influence["c3"] == SquareInfluence(4, 0)
        assert influence["d3"] == SquareInfluence(3, 0)
        assert influence["e3"] == SquareInfluence(3, 0)
        assert influence["f3"] == SquareInfluence(4, 0)
        assert influence["e4"] == SquareInfluence(1, 0)

    def test_starting_position_is_symmetric(self) -> None:
        influence = compute_influence(snapshot_from_fen(STARTING_FEN))
        for file in "abcdefgh":
            for rank in range(1, 9):
                mirrored = f"{file}{9 - rank}"
                mine = influence_at(influence, f"{file}{rank}")
                theirs = influence_at(influence, mirrored)
                assert (mine.white, mine.black) == (theirs.black, theirs.white)

    def test_friendly_pieces_count_as_influenced(self) -> None:
        influence = compute_influence(snapshot_from_fen(STARTING_FEN))
        # Bishop c1, queen d1, king e1 and knight b1 all reach d2.
        assert influence["d2"] == SquareInfluence(4, 0)

    def test_no_entry_without_attackers(self) -> None:
        influence = compute_influence(snapshot_from_fen(STARTING_FEN))
        assert "a1" not in influence
        assert "e5" in influence and "d4" in influence
        assert all(counts.total > 0 for counts in influence.values())

    def test_contested_square(self) -> None:
        pieces = [
            PieceObservation(PieceType.KNIGHT, Color.WHITE, "c3"),
            PieceObservation(PieceType.KNIGHT, Color.BLACK, "e3"),
        ]
        influence = compute_influence(pieces)
        assert influence["b5"] == SquareInfluence(1, 0)
        assert influence["f5"] == SquareInfluence(0, 1)
        assert influence["d5"] == SquareInfluence(1, 1)
        assert influence["d1"] == SquareInfluence(1, 1)


class TestAggregationProperties:
    def test_idempotent(self) -> None:
        pieces = snapshot_from_fen(KIWIPETE)
        assert compute_influence(pieces) == compute_influence(pieces)

    def test_order_independent(self) -> None:
        pieces = snapshot_from_fen(KIWIPETE)
        shuffled = list(pieces)
        random.Random(7).shuffle(shuffled)
        assert compute_influence(reversed(pieces)) == compute_influence(pieces)
        assert compute_influence(shuffled) == compute_influence(pieces)

    def test_accepts_generators(self) -> None:
        pieces = snapshot_from_fen(KIWIPETE)
        assert compute_influence(p for p in pieces) == compute_influence(pieces)

    def test_adding_a_leaper_never_decreases_counts(self) -> None:
        base = [
            PieceObservation(PieceType.KING, Color.WHITE, "g1"),
            PieceObservation(PieceType.PAWN, Color.WHITE, "f2"),
            PieceObservation(PieceType.KNIGHT, Color.BLACK, "d4"),
            PieceObservation(PieceType.KING, Color.BLACK, "g8"),
        ]
        before = compute_influence(base)
        added = PieceObservation(PieceType.KNIGHT, Color.WHITE, "e4")
        after = compute_influence([*base, added])

        assert set(before) <= set(after)
        for sq, counts in before.items():
            assert after[sq].white >= counts.white
            assert after[sq].black == counts.black
        assert after["f6"].white == before.get("f6", NO_INFLUENCE).white + 1

    def test_adding_a_blocker_cuts_slider_rays(self) -> None:
        rook = PieceObservation(PieceType.ROOK, Color.WHITE, "a1")
        before = compute_influence([rook])
        after = compute_influence(
            [rook, PieceObservation(PieceType.KING, Color.BLACK, "a4")]
        )
        assert before["a6"] == SquareInfluence(1, 0)
        assert "a6" not in after
        assert after["a5"] == SquareInfluence(0, 1)

    def test_concurrent_calls_agree(self) -> None:
        pieces = tuple(snapshot_from_fen(KIWIPETE))
        expected = compute_influence(pieces)
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(compute_influence, [pieces] * 16))
        assert all(result == expected for result in results)


class TestSkippedObservations:
    def test_malformed_square_skipped(self, caplog) -> None:
        knight = PieceObservation(PieceType.KNIGHT, Color.WHITE, "a1")
        stale = PieceObservation(PieceType.ROOK, Color.BLACK, "z9")
        with caplog.at_level(logging.WARNING, logger="outpost.core.influence"):
            influence = compute_influence([stale, knight])
        assert influence == compute_influence([knight])
        assert "Skipping observation" in caplog.text

    def test_unknown_kind_contributes_nothing(self) -> None:
        knight = PieceObservation(PieceType.KNIGHT, Color.WHITE, "a1")
        odd = PieceObservation("archbishop", Color.BLACK, "d4")  # type: ignore[arg-type]
        assert compute_influence([knight, odd]) == compute_influence([knight])


def test_influence_at_missing_square() -> None:
    assert influence_at({}, "e4") == NO_INFLUENCE
    assert influence_at({"e4": SquareInfluence(2, 1)}, "e4") == SquareInfluence(2, 1)
