"""Tests for the influence classifier."""

import pytest

from outpost.core.classifier import MAX_INTENSITY, Dominance, Shade, classify, rgba
from outpost.core.influence import SquareInfluence


class TestClassify:
    def test_no_influence(self) -> None:
        shade = classify(SquareInfluence(0, 0))
        assert shade == Shade(Dominance.NONE, 0.0)
        assert not shade.visible

    def test_white_dominant(self) -> None:
        shade = classify(SquareInfluence(1, 0))
        assert shade.dominance is Dominance.WHITE
        assert shade.intensity == pytest.approx(0.2)

    def test_black_dominant_uses_larger_count(self) -> None:
        shade = classify(SquareInfluence(1, 3))
        assert shade.dominance is Dominance.BLACK
        assert shade.intensity == pytest.approx(0.6)

    def test_contested(self) -> None:
        shade = classify(SquareInfluence(2, 2))
        assert shade.dominance is Dominance.CONTESTED
        assert shade.intensity == pytest.approx(0.4)
        assert shade.visible

    @pytest.mark.parametrize("count", [4, 5, 10, 32])
    def test_intensity_saturates(self, count: int) -> None:
        assert classify(SquareInfluence(count, 0)).intensity == pytest.approx(
            MAX_INTENSITY
        )

    def test_cap_matches_between_five_and_ten(self) -> None:
        assert classify(SquareInfluence(10, 0)) == classify(SquareInfluence(5, 0))


class TestRgba:
    def test_palette(self) -> None:
        assert rgba(classify(SquareInfluence(3, 1))) == pytest.approx((0, 0, 255, 0.6))
        assert rgba(classify(SquareInfluence(0, 2))) == pytest.approx((255, 0, 0, 0.4))
        assert rgba(classify(SquareInfluence(1, 1))) == pytest.approx(
            (128, 0, 128, 0.2)
        )

    def test_transparent(self) -> None:
        assert rgba(classify(SquareInfluence())) is None
