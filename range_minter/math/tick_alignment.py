"""
Tick Alignment - sqrt 가격 범위 → 틱 간격 정렬

연속적인 sqrt 가격 경계를 풀의 tick_spacing 격자에 맞춘 틱으로 변환합니다.

정렬 규칙 (Solidity int24 % 의미론, 0 방향 절삭 나머지):
    tick_lower = raw_lower + (spacing - (raw_lower % spacing))
    tick_upper = raw_upper - (raw_upper % spacing)

- 하한은 항상 다음 격자선으로 올라갑니다. 이미 격자 위에 있어도 한 칸 이동합니다.
- 상한은 0 방향으로 절삭됩니다. 음수 틱은 -∞가 아니라 0 쪽 격자선으로 이동합니다.

raw 틱을 함께 노출하므로 정렬로 생긴 차이를
호출자가 확인할 수 있습니다.
"""

from dataclasses import dataclass
from typing import Tuple

from ..exceptions import ArithmeticPrecondition
from .tick_math import get_tick_at_sqrt_ratio


@dataclass(frozen=True)
class TickAlignment:
    """정렬 전후의 틱 경계"""
    raw_tick_lower: int
    raw_tick_upper: int
    tick_lower: int
    tick_upper: int

    @property
    def ticks(self) -> Tuple[int, int]:
        return self.tick_lower, self.tick_upper

    @property
    def is_degenerate(self) -> bool:
        """정렬 결과 범위가 비었는지 (tick_lower >= tick_upper)"""
        return self.tick_lower >= self.tick_upper


def truncated_mod(a: int, b: int) -> int:
    """부호가 피제수를 따르는 나머지 (Solidity/C의 %)

    Python의 %는 floor 나머지이므로 음수에서 결과가 다릅니다.
        truncated_mod(-125, 60) == -5   # Python: -125 % 60 == 55
    """
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def align_lower_tick(raw_tick: int, tick_spacing: int) -> int:
    return raw_tick + (tick_spacing - truncated_mod(raw_tick, tick_spacing))


def align_upper_tick(raw_tick: int, tick_spacing: int) -> int:
    return raw_tick - truncated_mod(raw_tick, tick_spacing)


def align_ticks(
    sqrt_price_lower_x96: int,
    sqrt_price_upper_x96: int,
    tick_spacing: int
) -> TickAlignment:
    """sqrt 가격 경계를 격자 정렬된 틱으로 변환

    Args:
        sqrt_price_lower_x96: 하한 sqrtPriceX96
        sqrt_price_upper_x96: 상한 sqrtPriceX96
        tick_spacing: 풀의 틱 간격 (> 0)

    Returns:
        TickAlignment (raw/정렬 틱). 범위가 한 칸보다 좁으면
        is_degenerate가 True이며 호출자가 처리해야 합니다.

    Raises:
        ValueError: tick_spacing <= 0
        ArithmeticPrecondition: sqrt 가격이 TickMath 정의역을 벗어난 경우
    """
    if tick_spacing <= 0:
        raise ValueError(f"tick_spacing은 양수여야 합니다: {tick_spacing}")

    try:
        raw_lower = get_tick_at_sqrt_ratio(sqrt_price_lower_x96)
        raw_upper = get_tick_at_sqrt_ratio(sqrt_price_upper_x96)
    except ValueError as e:
        raise ArithmeticPrecondition(str(e)) from e

    return TickAlignment(
        raw_tick_lower=raw_lower,
        raw_tick_upper=raw_upper,
        tick_lower=align_lower_tick(raw_lower, tick_spacing),
        tick_upper=align_upper_tick(raw_upper, tick_spacing),
    )
