"""
Sqrt Price Math - sqrtPriceX96 관련 계산

Uniswap V3의 가격은 sqrtPriceX96 형식으로 저장됩니다.
sqrtPriceX96 = sqrt(price) * 2^96

References:
- Uniswap V3 SDK: encodeSqrtRatioX96
"""

from ..constants import Q192
from .full_math import sqrt_floor


def encode_sqrt_ratio_x96(amount1: int, amount0: int) -> int:
    """두 수량의 비율을 sqrtPriceX96으로 인코딩 (정수 연산)

    sqrtPriceX96 = floor(sqrt(amount1 / amount0 * 2^192))

    Args:
        amount1: 분자 (token1 수량)
        amount0: 분모 (token0 수량)

    Returns:
        sqrtPriceX96

    Example:
        >>> encode_sqrt_ratio_x96(1, 1) == 2 ** 96
        True
    """
    if amount0 <= 0 or amount1 <= 0:
        raise ValueError("수량은 양수여야 합니다")
    return sqrt_floor((amount1 << 192) // amount0)


def sqrt_ratio_to_price_ratio(sqrt_lower_x96: int, sqrt_upper_x96: int) -> float:
    """두 sqrtPriceX96의 가격 비율 (upper / lower)^2

    정수 비율을 Q192로 먼저 계산한 뒤 float로 변환하여 정밀도를 유지합니다.
    """
    if sqrt_lower_x96 <= 0:
        raise ValueError("sqrtPriceX96은 양수여야 합니다")
    ratio_x192 = (sqrt_upper_x96 * sqrt_upper_x96 * Q192) // (sqrt_lower_x96 * sqrt_lower_x96)
    return ratio_x192 / Q192
