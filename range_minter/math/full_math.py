"""
Full Math - 고정소수점 정수 연산

Solidity uint256 의미론을 Python 정수로 재현합니다.
Python 정수는 무한 정밀도이므로 래핑 대신 범위를 명시적으로 검사하고,
범위를 벗어나면 ArithmeticPrecondition으로 작업 전체를 중단합니다.

References:
- Uniswap V3 Core: contracts/libraries/FullMath.sol
- Uniswap V3 Core: contracts/libraries/UnsafeMath.sol

반올림 규칙:
    mul_div, sqrt_floor: 내림 (0 방향 절삭)
    *_rounding_up: 올림 (풀의 지불 금액 계산 전용)
"""

import math

from ..constants import UINT256_MAX
from ..exceptions import ArithmeticPrecondition


def _check_uint256(value: int, op: str) -> int:
    if value < 0:
        raise ArithmeticPrecondition(f"{op}: uint256 언더플로우 ({value})")
    if value > UINT256_MAX:
        raise ArithmeticPrecondition(f"{op}: uint256 오버플로우")
    return value


def sqrt_floor(n: int) -> int:
    """정수 제곱근 (내림)

    Args:
        n: 음이 아닌 정수 (크기 제한 없음)

    Returns:
        floor(sqrt(n))

    Raises:
        ArithmeticPrecondition: n이 음수인 경우
    """
    if n < 0:
        raise ArithmeticPrecondition(f"음수의 제곱근: {n}")
    return math.isqrt(n)


def checked_mul(a: int, b: int) -> int:
    """a * b (uint256 범위 검사)"""
    _check_uint256(a, "mul")
    _check_uint256(b, "mul")
    return _check_uint256(a * b, "mul")


def checked_add(a: int, b: int) -> int:
    """a + b (uint256 범위 검사)"""
    _check_uint256(a, "add")
    _check_uint256(b, "add")
    return _check_uint256(a + b, "add")


def checked_sub(a: int, b: int) -> int:
    """a - b (uint256 범위 검사, 음수 결과는 언더플로우)"""
    _check_uint256(a, "sub")
    _check_uint256(b, "sub")
    return _check_uint256(a - b, "sub")


def mul_div(a: int, b: int, denominator: int) -> int:
    """floor(a * b / denominator)

    FullMath.mulDiv와 동일하게 512비트 중간값을 허용하고
    결과만 uint256 범위를 검사합니다.

    Raises:
        ArithmeticPrecondition: denominator == 0 또는 결과 오버플로우
    """
    _check_uint256(a, "mul_div")
    _check_uint256(b, "mul_div")
    if denominator == 0:
        raise ArithmeticPrecondition("mul_div: 0으로 나눔")
    _check_uint256(denominator, "mul_div")
    return _check_uint256((a * b) // denominator, "mul_div")


def mul_div_rounding_up(a: int, b: int, denominator: int) -> int:
    """ceil(a * b / denominator)"""
    result = mul_div(a, b, denominator)
    if (a * b) % denominator > 0:
        result = checked_add(result, 1)
    return result


def div_rounding_up(numerator: int, denominator: int) -> int:
    """ceil(numerator / denominator)"""
    if denominator == 0:
        raise ArithmeticPrecondition("div_rounding_up: 0으로 나눔")
    result = numerator // denominator
    if numerator % denominator > 0:
        result += 1
    return result
