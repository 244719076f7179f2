"""
Math layer for Range Minter

온체인 수준 정밀도의 수학 함수들:
- full_math: 정수 제곱근, 범위 검사 곱셈/나눗셈
- tick_math: Tick ↔ sqrtPrice 변환
- sqrt_price_math: sqrtPriceX96 인코딩
- liquidity_math: 유동성 계산
- range_math: width 기반 대칭 가격 범위 계산
- tick_alignment: 틱 간격 정렬
"""

from .full_math import (
    sqrt_floor,
    mul_div,
    checked_mul,
    checked_add,
    checked_sub,
)
from .tick_math import (
    get_tick_at_sqrt_ratio,
    get_sqrt_ratio_at_tick,
    tick_to_price,
    get_tick_spacing_for_fee,
)
from .sqrt_price_math import (
    encode_sqrt_ratio_x96,
)
from .liquidity_math import (
    get_amount0_delta,
    get_amount1_delta,
    get_liquidity_for_amounts,
    get_amounts_for_liquidity,
)
from .range_math import (
    PriceRange,
    solve_price_range,
    validate_width,
    target_price_ratio,
)
from .tick_alignment import (
    TickAlignment,
    align_ticks,
)
