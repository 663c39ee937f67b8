"""Tests for the board-reader boundary."""

from __future__ import annotations

import logging

import pytest

from outpost.core.enums import Color, PieceType
from outpost.core.piece import PieceObservation
from outpost.reader import (
    RenderedPiece,
    observations_from_records,
    read_pieces,
    square_from_transform,
)


class TestSquareFromTransform:
    @pytest.mark.parametrize(
        "style,expected",
        [
            ("transform: translate(0px, 0px);", "a8"),
            ("transform: translate(350px, 350px);", "h1"),
            ("transform: translate(200px, 300px);", "e2"),
            ("transform: translate(224.5px,24.5px);", "e8"),
        ],
    )
    def test_white_orientation(self, style: str, expected: str) -> None:
        assert square_from_transform(style, 50) == expected

    def test_black_orientation_mirrors(self) -> None:
        style = "transform: translate(0px, 0px);"
        assert square_from_transform(style, 50, orientation=Color.BLACK) == "h1"

    @pytest.mark.parametrize(
        "style",
        [
            "",
            "left: 10px; top: 20px;",
            "transform: translate(400px, 0px);",
            "transform: translate(-10px, 0px);",
            "transform: translate(0px, 400px);",
        ],
    )
    def test_unusable_styles(self, style: str) -> None:
        assert square_from_transform(style, 50) is None

    def test_zero_square_size(self) -> None:
        assert square_from_transform("transform: translate(0px, 0px);", 0) is None


class TestReadPieces:
    def test_reads_valid_and_skips_the_rest(self) -> None:
        rendered = [
            RenderedPiece("white knight", "transform: translate(300px, 350px);"),
            RenderedPiece("black king", "transform: translate(200px, 0px);"),
            RenderedPiece("white ghost", "transform: translate(0px, 0px);"),
            RenderedPiece("black pawn", "opacity: 0.5;"),
        ]
        assert read_pieces(rendered, 50) == [
            PieceObservation(PieceType.KNIGHT, Color.WHITE, "g1"),
            PieceObservation(PieceType.KING, Color.BLACK, "e8"),
        ]

    def test_flipped_board(self) -> None:
        rendered = [RenderedPiece("white king", "transform: translate(150px, 350px);")]
        pieces = read_pieces(rendered, 50, orientation=Color.BLACK)
        assert pieces == [PieceObservation(PieceType.KING, Color.WHITE, "e8")]


class TestObservationsFromRecords:
    def test_skips_malformed(self, caplog: pytest.LogCaptureFixture) -> None:
        records = [
            ("white", "rook", "a1"),
            ("white", "rook", "a9"),
            ("purple", "rook", "b1"),
            ("black", "queen"),
        ]
        with caplog.at_level(logging.WARNING, logger="outpost.reader"):
            pieces = observations_from_records(records)  # type: ignore[arg-type]
        assert pieces == [PieceObservation(PieceType.ROOK, Color.WHITE, "a1")]
        assert caplog.text.count("Skipping malformed observation") == 3
