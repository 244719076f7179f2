"""
Liquidity Math - 유동성 계산

특정 가격 범위에서의 토큰 수량과 유동성 간의 변환.

References:
- Uniswap V3 Core: contracts/libraries/SqrtPriceMath.sol (getAmount0Delta, getAmount1Delta)
- Uniswap V3 Periphery: contracts/libraries/LiquidityAmounts.sol

핵심 공식:
    L = Δy / (√P_upper - √P_lower)  # token1 기준
    L = Δx / (1/√P_lower - 1/√P_upper)  # token0 기준
"""

from typing import Tuple

from ..constants import Q96
from .full_math import mul_div, mul_div_rounding_up, div_rounding_up


def _sorted(sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int) -> Tuple[int, int]:
    if sqrt_ratio_a_x96 > sqrt_ratio_b_x96:
        return sqrt_ratio_b_x96, sqrt_ratio_a_x96
    return sqrt_ratio_a_x96, sqrt_ratio_b_x96


def get_amount0_delta(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int,
    round_up: bool = True
) -> int:
    """유동성에서 amount0 변화량 계산

    공식: Δx = L * (√P_b - √P_a) / (√P_a * √P_b)

    Args:
        sqrt_ratio_a_x96: 하한 sqrtPriceX96
        sqrt_ratio_b_x96: 상한 sqrtPriceX96
        liquidity: 유동성
        round_up: True면 올림 (풀이 받을 금액), False면 내림

    Returns:
        amount0 (token0 수량, 최소 단위)
    """
    sqrt_ratio_a_x96, sqrt_ratio_b_x96 = _sorted(sqrt_ratio_a_x96, sqrt_ratio_b_x96)

    numerator1 = liquidity << 96
    numerator2 = sqrt_ratio_b_x96 - sqrt_ratio_a_x96

    if round_up:
        return div_rounding_up(
            mul_div_rounding_up(numerator1, numerator2, sqrt_ratio_b_x96),
            sqrt_ratio_a_x96
        )
    return mul_div(numerator1, numerator2, sqrt_ratio_b_x96) // sqrt_ratio_a_x96


def get_amount1_delta(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int,
    round_up: bool = True
) -> int:
    """유동성에서 amount1 변화량 계산

    공식: Δy = L * (√P_b - √P_a)
    """
    sqrt_ratio_a_x96, sqrt_ratio_b_x96 = _sorted(sqrt_ratio_a_x96, sqrt_ratio_b_x96)

    if round_up:
        return mul_div_rounding_up(liquidity, sqrt_ratio_b_x96 - sqrt_ratio_a_x96, Q96)
    return mul_div(liquidity, sqrt_ratio_b_x96 - sqrt_ratio_a_x96, Q96)


def get_liquidity_for_amount0(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    amount0: int
) -> int:
    """amount0에서 유동성 계산

    공식: L = Δx * √P_a * √P_b / (√P_b - √P_a)
    """
    sqrt_ratio_a_x96, sqrt_ratio_b_x96 = _sorted(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    # 동일한 가격이면 범위 폭이 0
    if sqrt_ratio_b_x96 == sqrt_ratio_a_x96:
        return 0

    intermediate = mul_div(sqrt_ratio_a_x96, sqrt_ratio_b_x96, Q96)
    return mul_div(amount0, intermediate, sqrt_ratio_b_x96 - sqrt_ratio_a_x96)


def get_liquidity_for_amount1(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    amount1: int
) -> int:
    """amount1에서 유동성 계산

    공식: L = Δy / (√P_b - √P_a)
    """
    sqrt_ratio_a_x96, sqrt_ratio_b_x96 = _sorted(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    if sqrt_ratio_b_x96 == sqrt_ratio_a_x96:
        return 0

    return mul_div(amount1, Q96, sqrt_ratio_b_x96 - sqrt_ratio_a_x96)


def get_liquidity_for_amounts(
    sqrt_ratio_x96: int,
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    amount0: int,
    amount1: int
) -> int:
    """토큰 수량에서 민트 가능한 최대 유동성 계산

    Args:
        sqrt_ratio_x96: 현재 sqrtPriceX96
        sqrt_ratio_a_x96: 하한 sqrtPriceX96
        sqrt_ratio_b_x96: 상한 sqrtPriceX96
        amount0: token0 수량
        amount1: token1 수량

    Returns:
        유동성 (두 제약 조건 중 작은 값)
    """
    sqrt_ratio_a_x96, sqrt_ratio_b_x96 = _sorted(sqrt_ratio_a_x96, sqrt_ratio_b_x96)

    if sqrt_ratio_x96 <= sqrt_ratio_a_x96:
        # 가격이 범위 아래: token0만 사용
        return get_liquidity_for_amount0(sqrt_ratio_a_x96, sqrt_ratio_b_x96, amount0)

    elif sqrt_ratio_x96 < sqrt_ratio_b_x96:
        # 가격이 범위 내: 양쪽 토큰 사용, 작은 값 반환
        liquidity0 = get_liquidity_for_amount0(sqrt_ratio_x96, sqrt_ratio_b_x96, amount0)
        liquidity1 = get_liquidity_for_amount1(sqrt_ratio_a_x96, sqrt_ratio_x96, amount1)
        return min(liquidity0, liquidity1)

    else:
        # 가격이 범위 위: token1만 사용
        return get_liquidity_for_amount1(sqrt_ratio_a_x96, sqrt_ratio_b_x96, amount1)


def get_amounts_for_liquidity(
    sqrt_ratio_x96: int,
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int,
    round_up: bool = False
) -> Tuple[int, int]:
    """유동성에서 토큰 수량 계산

    round_up=True는 풀이 민트 시 요구하는 금액 (Pool._modifyPosition),
    round_up=False는 포지션이 보유한 금액 (LiquidityAmounts)입니다.

    Returns:
        (amount0, amount1) 튜플
    """
    sqrt_ratio_a_x96, sqrt_ratio_b_x96 = _sorted(sqrt_ratio_a_x96, sqrt_ratio_b_x96)

    if sqrt_ratio_x96 <= sqrt_ratio_a_x96:
        amount0 = get_amount0_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity, round_up)
        amount1 = 0

    elif sqrt_ratio_x96 < sqrt_ratio_b_x96:
        amount0 = get_amount0_delta(sqrt_ratio_x96, sqrt_ratio_b_x96, liquidity, round_up)
        amount1 = get_amount1_delta(sqrt_ratio_a_x96, sqrt_ratio_x96, liquidity, round_up)

    else:
        amount0 = 0
        amount1 = get_amount1_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity, round_up)

    return amount0, amount1
