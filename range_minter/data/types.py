"""
Subgraph 데이터 타입 정의

The Graph API에서 반환되는 풀 상태를 Python dataclass로 정의.
모든 숫자 필드는 온체인 정밀도를 위해 int 타입 사용.
"""

from dataclasses import dataclass
from typing import Optional

from ..math.tick_math import get_tick_spacing_for_fee


@dataclass
class Token:
    """ERC20 토큰 정보"""
    id: str  # 컨트랙트 주소
    symbol: str
    name: str
    decimals: int

    @classmethod
    def from_dict(cls, data: dict) -> "Token":
        return cls(
            id=data["id"],
            symbol=data["symbol"],
            name=data["name"],
            decimals=int(data["decimals"])
        )


@dataclass
class Pool:
    """Uniswap V3 Pool 스냅샷

    범위 계산에 필요한 상태:
    - sqrt_price: 현재 √가격 (Q96 인코딩)
    - tick: 현재 틱 인덱스
    - fee_tier: 틱 간격을 결정하는 수수료 티어
    """
    id: str  # Pool 컨트랙트 주소
    fee_tier: int
    tick: int
    sqrt_price: int  # sqrtPriceX96
    liquidity: int
    token0: Token
    token1: Token
    total_value_locked_usd: Optional[float] = None

    @property
    def tick_spacing(self) -> int:
        return get_tick_spacing_for_fee(self.fee_tier)

    @classmethod
    def from_dict(cls, data: dict) -> "Pool":
        return cls(
            id=data["id"],
            fee_tier=int(data["feeTier"]),
            tick=int(data["tick"]),
            sqrt_price=int(data["sqrtPrice"]),
            liquidity=int(data["liquidity"]),
            token0=Token.from_dict(data["token0"]),
            token1=Token.from_dict(data["token1"]),
            total_value_locked_usd=float(data["totalValueLockedUSD"]) if data.get("totalValueLockedUSD") else None,
        )
