"""
Range Math 테스트

width 기반 대칭 가격 범위 계산을 테스트합니다.
목표 비율 (1000 + w) / (1000 - w) 대비 오차 1% 이내가 회귀 조건입니다.
"""

import pytest

from ..math.range_math import (
    solve_price_range,
    sqrt_ratio_for_width,
    target_price_ratio,
    validate_width,
)
from ..math.sqrt_price_math import encode_sqrt_ratio_x96
from ..math.tick_alignment import align_ticks
from ..constants import SOLVER_PRECISION
from ..exceptions import InvalidWidth, ArithmeticPrecondition

SQRT_PRICE_4000 = encode_sqrt_ratio_x96(4000, 1)
ONE = 10 ** 18


class TestWidth:
    """width 검증 및 목표 비율"""

    @pytest.mark.parametrize("width", [1000, 1001, 5000, -1])
    def test_out_of_range_rejected(self, width):
        with pytest.raises(InvalidWidth):
            validate_width(width)

    def test_non_integer_rejected(self):
        with pytest.raises(InvalidWidth):
            validate_width(100.0)
        with pytest.raises(InvalidWidth):
            validate_width(True)

    def test_target_ratio(self):
        assert target_price_ratio(0) == 1.0
        assert abs(target_price_ratio(100) - 1100 / 900) < 1e-12

    def test_sqrt_ratio_is_floor(self):
        """k = floor(sqrt(ratio) * 10^9)"""
        assert sqrt_ratio_for_width(0) == SOLVER_PRECISION
        k = sqrt_ratio_for_width(600)  # ratio = 4, k = 2
        assert k == 2 * SOLVER_PRECISION


class TestSolvePriceRange:
    """solve_price_range 테스트"""

    def test_reference_scenario(self):
        """token1이 token0의 ~4000배, 1 : 4000 예치, width 100"""
        result = solve_price_range(SQRT_PRICE_4000, ONE, 4000 * ONE, 100)

        assert result.sqrt_price_lower_x96 < SQRT_PRICE_4000 < result.sqrt_price_upper_x96
        assert abs(result.price_ratio - 1100 / 900) / (1100 / 900) < 0.01

    def test_balanced_deposit_is_symmetric(self):
        """가격과 같은 비율로 예치하면 현재 가격이 범위의 기하 중심"""
        result = solve_price_range(SQRT_PRICE_4000, ONE, 4000 * ONE, 100)

        below = SQRT_PRICE_4000 / result.sqrt_price_lower_x96
        above = result.sqrt_price_upper_x96 / SQRT_PRICE_4000
        assert abs(below - above) < 1e-3

    @pytest.mark.parametrize("width", list(range(0, 1000, 37)) + [1, 500, 998, 999])
    def test_ratio_within_one_percent(self, width):
        target = (1000 + width) / (1000 - width)
        result = solve_price_range(SQRT_PRICE_4000, ONE, 4000 * ONE, width)
        assert abs(result.price_ratio - target) / target < 0.01

    @pytest.mark.parametrize("sqrt_price, amount0, amount1", [
        (encode_sqrt_ratio_x96(1, 1), ONE, ONE),
        (encode_sqrt_ratio_x96(1, 4000), 4000 * ONE, ONE),
        (encode_sqrt_ratio_x96(2500 * 10**6, ONE), ONE, 2500 * 10**6),  # WETH/USDC 원시 단위
        (SQRT_PRICE_4000, 3 * ONE, 1000 * ONE),  # 비대칭 예치
    ])
    def test_ratio_holds_across_prices(self, sqrt_price, amount0, amount1):
        result = solve_price_range(sqrt_price, amount0, amount1, 250)
        target = 1250 / 750
        assert abs(result.price_ratio - target) / target < 0.01
        assert result.sqrt_price_lower_x96 < sqrt_price < result.sqrt_price_upper_x96

    def test_deterministic(self):
        """같은 입력은 항상 같은 출력 (숨은 상태 없음)"""
        first = solve_price_range(SQRT_PRICE_4000, ONE, 4000 * ONE, 100)
        second = solve_price_range(SQRT_PRICE_4000, ONE, 4000 * ONE, 100)
        assert first == second
        assert align_ticks(first.sqrt_price_lower_x96, first.sqrt_price_upper_x96, 60) == \
            align_ticks(second.sqrt_price_lower_x96, second.sqrt_price_upper_x96, 60)

    def test_zero_amount1_pins_lower_bound_to_price(self):
        """amount1 == 0: 하한이 현재 가격에 붙는 token0 단일 범위"""
        result = solve_price_range(SQRT_PRICE_4000, ONE, 0, 100)
        assert result.sqrt_price_lower_x96 <= SQRT_PRICE_4000
        assert (SQRT_PRICE_4000 - result.sqrt_price_lower_x96) / SQRT_PRICE_4000 < 1e-6

    def test_zero_amount0_aborts(self):
        with pytest.raises(ArithmeticPrecondition):
            solve_price_range(SQRT_PRICE_4000, 0, 4000 * ONE, 100)

    def test_negative_amount1_aborts(self):
        with pytest.raises(ArithmeticPrecondition):
            solve_price_range(SQRT_PRICE_4000, ONE, -1, 100)

    def test_zero_price_aborts(self):
        with pytest.raises(ArithmeticPrecondition):
            solve_price_range(0, ONE, ONE, 100)

    def test_price_below_solver_precision_aborts(self):
        with pytest.raises(ArithmeticPrecondition):
            solve_price_range(4295128739, ONE, ONE, 100)

    def test_overflow_aborts(self):
        with pytest.raises(ArithmeticPrecondition):
            solve_price_range(SQRT_PRICE_4000, 2 ** 200, 2 ** 200, 100)

    def test_invalid_width(self):
        with pytest.raises(InvalidWidth):
            solve_price_range(SQRT_PRICE_4000, ONE, 4000 * ONE, 1000)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
