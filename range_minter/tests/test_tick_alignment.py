"""
Tick Alignment 테스트

raw 틱과 정렬 틱을 함께 확인하여 하한/상한 정렬의 비대칭을 드러냅니다.
"""

import pytest

from ..math.tick_alignment import (
    align_ticks,
    align_lower_tick,
    align_upper_tick,
    truncated_mod,
)
from ..math.tick_math import get_sqrt_ratio_at_tick
from ..math.range_math import solve_price_range
from ..math.sqrt_price_math import encode_sqrt_ratio_x96
from ..exceptions import ArithmeticPrecondition


class TestTruncatedMod:
    """truncated_mod 테스트 (Solidity % 의미론)"""

    def test_positive(self):
        assert truncated_mod(125, 60) == 5

    def test_negative_keeps_dividend_sign(self):
        assert truncated_mod(-125, 60) == -5
        assert -125 % 60 == 55  # Python floor 나머지와 다름

    def test_exact_multiple(self):
        assert truncated_mod(-120, 60) == 0
        assert truncated_mod(0, 60) == 0


class TestAlignLowerTick:
    """하한 정렬: 항상 다음 격자선으로 올라감"""

    def test_unaligned_positive(self):
        assert align_lower_tick(81941, 60) == 81960

    def test_already_aligned_is_pushed_full_spacing(self):
        assert align_lower_tick(81960, 60) == 82020
        assert align_lower_tick(0, 60) == 60

    def test_negative(self):
        # -125는 -120이 아니라 -60으로 이동
        assert align_lower_tick(-125, 60) == -60
        assert align_lower_tick(-120, 60) == -60


class TestAlignUpperTick:
    """상한 정렬: 0 방향 절삭"""

    def test_unaligned_positive(self):
        assert align_upper_tick(83947, 60) == 83940

    def test_already_aligned_unchanged(self):
        assert align_upper_tick(83940, 60) == 83940

    def test_negative_truncates_toward_zero(self):
        # floor 정렬이면 -180, 절삭 정렬은 raw 틱보다 위인 -120
        assert align_upper_tick(-125, 60) == -120


class TestAlignTicks:
    """align_ticks 테스트"""

    def test_raw_and_aligned_exposed(self):
        alignment = align_ticks(get_sqrt_ratio_at_tick(-125), get_sqrt_ratio_at_tick(83947), 60)

        assert alignment.raw_tick_lower == -125
        assert alignment.raw_tick_upper == 83947
        assert alignment.ticks == (-60, 83940)
        assert not alignment.is_degenerate

    @pytest.mark.parametrize("spacing", [1, 10, 60, 200])
    def test_solved_range_is_grid_aligned(self, spacing):
        price_range = solve_price_range(encode_sqrt_ratio_x96(4000, 1), 10**18, 4000 * 10**18, 100)
        alignment = align_ticks(
            price_range.sqrt_price_lower_x96, price_range.sqrt_price_upper_x96, spacing
        )

        assert alignment.tick_lower % spacing == 0
        assert alignment.tick_upper % spacing == 0
        assert alignment.tick_lower < alignment.tick_upper
        assert alignment.tick_lower > alignment.raw_tick_lower
        assert alignment.tick_upper <= alignment.raw_tick_upper

    def test_negative_tick_range_is_grid_aligned(self):
        price_range = solve_price_range(encode_sqrt_ratio_x96(1, 4000), 4000 * 10**18, 10**18, 100)
        alignment = align_ticks(
            price_range.sqrt_price_lower_x96, price_range.sqrt_price_upper_x96, 60
        )

        assert alignment.raw_tick_upper < 0
        assert alignment.tick_lower % 60 == 0
        assert alignment.tick_upper % 60 == 0
        assert alignment.tick_lower < alignment.tick_upper

    def test_narrow_range_is_degenerate(self):
        """한 칸보다 좁은 범위는 정렬 후 비게 됨 (보정하지 않음)"""
        alignment = align_ticks(get_sqrt_ratio_at_tick(100), get_sqrt_ratio_at_tick(130), 60)

        assert alignment.ticks == (120, 120)
        assert alignment.is_degenerate

    def test_invalid_spacing(self):
        with pytest.raises(ValueError):
            align_ticks(get_sqrt_ratio_at_tick(0), get_sqrt_ratio_at_tick(100), 0)

    def test_sqrt_price_outside_tick_domain(self):
        with pytest.raises(ArithmeticPrecondition):
            align_ticks(1, get_sqrt_ratio_at_tick(100), 60)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
