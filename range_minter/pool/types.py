"""
풀 연동 데이터 타입

범위 생성 작업 한 번 동안만 존재하는 값 객체들.
주소 필드는 모두 checksum 주소 문자열입니다.
"""

from dataclasses import dataclass
from typing import NamedTuple


class Slot0(NamedTuple):
    """풀의 현재 가격 상태 (UniswapV3Pool.slot0 일부)"""
    sqrt_price_x96: int
    tick: int


@dataclass(frozen=True)
class PoolKey:
    """풀 식별자 (PoolAddress.PoolKey)

    token0 < token1 (주소 바이트 순서)
    """
    token0: str
    token1: str
    fee: int


@dataclass(frozen=True)
class MintCallbackData:
    """mint 콜백에 전달되는 불투명 컨텍스트"""
    pool_key: PoolKey
    payer: str


@dataclass(frozen=True)
class PositionResult:
    """포지션 생성 결과

    amount0/amount1은 유동성 단위 반올림 때문에 요청 수량보다 작을 수 있습니다.
    """
    tick_lower: int
    tick_upper: int
    liquidity: int
    amount0: int
    amount1: int


@dataclass(frozen=True)
class RangeOpened:
    """포지션 생성 완료 알림"""
    sender: str
    pool: str
    liquidity: int
    amount0: int
    amount1: int
    tick_lower: int
    tick_upper: int
