"""
Range Math - 대칭 가격 범위 계산

현재 가격 √P_c, 두 토큰 수량 (x, y), width w가 주어졌을 때
두 수량을 모두 소진하는 가격 범위 [√P_l, √P_u]를 구합니다.

목표 비율:
    P_u / P_l = (1000 + w) / (1000 - w)
    √P_u = k * √P_l,  k = sqrt((1000 + w) / (1000 - w))

범위 내 유동성 공식 두 개를 같게 놓고 √P_u를 소거하면:
    L0 = x * √P_c * √P_u / (√P_u - √P_c)
    L1 = y / (√P_c - √P_l)

    x*k * √P_l^2 + k*(y/√P_c - x*√P_c) * √P_l - y = 0
    A = x*k,  B = k*(y/√P_c - x*√P_c)

양의 근:
    √P_l = (sqrt(B^2 + 4*A*y) - B) / (2*A)

모든 계산은 SOLVER_PRECISION(10^9) 고정소수점 정수 연산이며
제곱근은 정수 내림, 나눗셈은 절삭입니다.
"""

from dataclasses import dataclass

from ..constants import Q96, SOLVER_PRECISION, MAX_WIDTH, UINT256_MAX
from ..exceptions import InvalidWidth, ArithmeticPrecondition
from .full_math import sqrt_floor, checked_mul, checked_add, checked_sub, mul_div
from .sqrt_price_math import sqrt_ratio_to_price_ratio


@dataclass(frozen=True)
class PriceRange:
    """계산된 sqrt 가격 범위

    - sqrt_price_lower_x96: 하한 √P (Q64.96)
    - sqrt_price_upper_x96: 상한 √P (Q64.96)
    - sqrt_ratio: k (SOLVER_PRECISION 스케일)
    """
    sqrt_price_lower_x96: int
    sqrt_price_upper_x96: int
    sqrt_ratio: int

    @property
    def price_ratio(self) -> float:
        """실제 가격 비율 (√P_u / √P_l)^2"""
        return sqrt_ratio_to_price_ratio(self.sqrt_price_lower_x96, self.sqrt_price_upper_x96)


def validate_width(width: int) -> int:
    """width 파라미터 검증

    Raises:
        InvalidWidth: width가 [0, 1000) 범위를 벗어난 경우
    """
    if not isinstance(width, int) or isinstance(width, bool):
        raise InvalidWidth(f"width는 정수여야 합니다: {width!r}")
    if width < 0 or width >= MAX_WIDTH:
        raise InvalidWidth(f"width는 0 이상 {MAX_WIDTH} 미만이어야 합니다: {width}")
    return width


def target_price_ratio(width: int) -> float:
    """목표 가격 비율 (1000 + w) / (1000 - w)"""
    validate_width(width)
    return (MAX_WIDTH + width) / (MAX_WIDTH - width)


def sqrt_ratio_for_width(width: int) -> int:
    """k = floor(sqrt((1000 + w) / (1000 - w)) * SOLVER_PRECISION)"""
    validate_width(width)
    scaled = (MAX_WIDTH + width) * SOLVER_PRECISION * SOLVER_PRECISION // (MAX_WIDTH - width)
    return sqrt_floor(scaled)


def solve_price_range(
    sqrt_price_x96: int,
    amount0: int,
    amount1: int,
    width: int
) -> PriceRange:
    """현재 가격과 두 수량에서 대칭 가격 범위 계산

    Args:
        sqrt_price_x96: 현재 sqrtPriceX96
        amount0: 예치할 token0 수량 (> 0)
        amount1: 예치할 token1 수량 (>= 0, 0이면 하한이 현재 가격에 붙는 token0 단일 범위)
        width: 범위 폭 파라미터 [0, 1000)

    Returns:
        PriceRange

    Raises:
        InvalidWidth: width >= 1000 또는 음수
        ArithmeticPrecondition: amount0 == 0, 음수 입력, 0 가격,
            또는 중간값의 uint256 오버플로우
    """
    validate_width(width)
    if amount0 <= 0:
        raise ArithmeticPrecondition(f"amount0는 0보다 커야 합니다: {amount0}")
    if amount1 < 0:
        raise ArithmeticPrecondition(f"amount1은 음수일 수 없습니다: {amount1}")
    if sqrt_price_x96 <= 0 or sqrt_price_x96 > UINT256_MAX:
        raise ArithmeticPrecondition(f"유효하지 않은 sqrtPriceX96: {sqrt_price_x96}")

    s = SOLVER_PRECISION
    k = sqrt_ratio_for_width(width)

    # 현재 √P를 solver 정밀도로 재조정
    c = mul_div(sqrt_price_x96, s, Q96)
    if c == 0:
        raise ArithmeticPrecondition(
            f"현재 가격이 solver 정밀도보다 작습니다: sqrtPriceX96={sqrt_price_x96}"
        )

    a = checked_mul(amount0, k)
    y_over_c = mul_div(amount1, s, c)
    x_times_c = mul_div(amount0, c, s)
    # B는 음수일 수 있음 (y/√P_c < x*√P_c)
    if y_over_c >= x_times_c:
        b = checked_mul(k, checked_sub(y_over_c, x_times_c))
    else:
        b = -checked_mul(k, checked_sub(x_times_c, y_over_c))

    discriminant = checked_add(
        checked_mul(abs(b), abs(b)),
        checked_mul(checked_mul(4, a), checked_mul(amount1, s))
    )
    root = sqrt_floor(discriminant)

    # root >= |b| 이므로 분자는 음수가 아님
    u = mul_div(root - b, s, checked_mul(2, a))
    if u == 0:
        raise ArithmeticPrecondition("하한 가격이 0으로 수렴했습니다")

    sqrt_lower_x96 = mul_div(u, Q96, s)
    sqrt_upper_x96 = mul_div(sqrt_lower_x96, k, s)

    return PriceRange(
        sqrt_price_lower_x96=sqrt_lower_x96,
        sqrt_price_upper_x96=sqrt_upper_x96,
        sqrt_ratio=k,
    )
