"""
Full Math 테스트

정수 제곱근과 uint256 범위 검사 연산을 테스트합니다.
"""

import pytest

from ..math.full_math import (
    sqrt_floor,
    checked_mul,
    checked_add,
    checked_sub,
    mul_div,
    mul_div_rounding_up,
    div_rounding_up,
)
from ..constants import UINT256_MAX
from ..exceptions import ArithmeticPrecondition


class TestSqrtFloor:
    """sqrt_floor 테스트"""

    def test_perfect_squares(self):
        assert sqrt_floor(0) == 0
        assert sqrt_floor(1) == 1
        assert sqrt_floor(10 ** 36) == 10 ** 18

    def test_floors_non_squares(self):
        assert sqrt_floor(2) == 1
        assert sqrt_floor(99) == 9
        assert sqrt_floor(10 ** 36 - 1) == 10 ** 18 - 1

    def test_beyond_uint256(self):
        """제곱근 자체는 크기 제한 없음 (판별식 검사는 호출자 책임)"""
        n = (2 ** 300) ** 2
        assert sqrt_floor(n) == 2 ** 300

    def test_negative_rejected(self):
        with pytest.raises(ArithmeticPrecondition):
            sqrt_floor(-1)


class TestCheckedArithmetic:
    """checked_mul, checked_add, checked_sub 테스트"""

    def test_mul_within_range(self):
        assert checked_mul(2 ** 128, 2 ** 127) == 2 ** 255

    def test_mul_overflow(self):
        with pytest.raises(ArithmeticPrecondition):
            checked_mul(2 ** 128, 2 ** 128)

    def test_add_overflow(self):
        assert checked_add(UINT256_MAX - 1, 1) == UINT256_MAX
        with pytest.raises(ArithmeticPrecondition):
            checked_add(UINT256_MAX, 1)

    def test_sub_underflow(self):
        assert checked_sub(5, 5) == 0
        with pytest.raises(ArithmeticPrecondition):
            checked_sub(4, 5)

    def test_negative_operand_rejected(self):
        with pytest.raises(ArithmeticPrecondition):
            checked_mul(-1, 3)


class TestMulDiv:
    """mul_div 및 올림 변형 테스트"""

    def test_truncates(self):
        assert mul_div(7, 3, 2) == 10
        assert mul_div_rounding_up(7, 3, 2) == 11

    def test_exact_division_not_rounded_up(self):
        assert mul_div_rounding_up(6, 4, 3) == 8

    def test_512_bit_intermediate(self):
        """중간값이 uint256을 넘어도 결과가 범위 안이면 허용 (FullMath)"""
        assert mul_div(2 ** 200, 2 ** 200, 2 ** 180) == 2 ** 220

    def test_result_overflow(self):
        with pytest.raises(ArithmeticPrecondition):
            mul_div(2 ** 200, 2 ** 200, 2)

    def test_zero_denominator(self):
        with pytest.raises(ArithmeticPrecondition):
            mul_div(1, 1, 0)
        with pytest.raises(ArithmeticPrecondition):
            div_rounding_up(1, 0)

    def test_div_rounding_up(self):
        assert div_rounding_up(10, 5) == 2
        assert div_rounding_up(11, 5) == 3


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
