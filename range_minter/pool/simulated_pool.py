"""
Simulated Pool - 메모리 내 Uniswap V3 풀

RangePositionService가 필요로 하는 풀 인터페이스를 구현합니다:
    slot0(), tick_spacing, token0, token1, fee, address,
    mint(recipient, tick_lower, tick_upper, amount, data, minter)

mint는 UniswapV3Pool.mint와 같은 순서로 동작합니다:
    1. 틱/수량 검증 (TLU, TLM, TUM, 간격)
    2. 지불 금액 계산 (올림)
    3. minter.uniswap_v3_mint_callback(amount0, amount1, data, caller=self.address)
    4. 잔고 증가 확인 (M0, M1)
    5. 포지션 유동성 반영

풀은 생성 시 장부에 등록되어 ledger.atomic() 블록이 실패하면
포지션, 활성 유동성, mint 횟수도 함께 되돌아갑니다.
"""

import logging
from typing import Dict, Optional, Tuple

from ..constants import MIN_TICK, MAX_TICK, UINT128_MAX, POOL_INIT_CODE_HASH
from ..exceptions import SimulatedPoolError
from ..math.liquidity_math import get_amounts_for_liquidity
from ..math.tick_math import get_sqrt_ratio_at_tick, get_tick_at_sqrt_ratio, get_tick_spacing_for_fee
from .address import compute_pool_address, get_pool_key, normalize_address
from .ledger import TokenLedger
from .types import PoolKey, Slot0

logger = logging.getLogger(__name__)


class SimulatedPool:
    """Uniswap V3 풀 시뮬레이터 (mint 경로만)

    사용법:
        pool = SimulatedPool(factory, weth, usdc, 3000, sqrt_price_x96, ledger)
        amount0, amount1 = pool.mint(user, -600, 600, 10**18, data, minter)
    """

    def __init__(
        self,
        factory: str,
        token_a: str,
        token_b: str,
        fee: int,
        sqrt_price_x96: int,
        ledger: TokenLedger,
        tick_spacing: Optional[int] = None,
        address: Optional[str] = None,
        init_code_hash: str = POOL_INIT_CODE_HASH
    ):
        """
        Args:
            factory: 풀을 배포한 factory 주소
            token_a, token_b: 토큰 주소 (정렬은 내부에서 처리)
            fee: 수수료 티어
            sqrt_price_x96: 초기 sqrtPriceX96
            ledger: 토큰 장부
            tick_spacing: None이면 fee 티어 기본값
            address: None이면 CREATE2 주소. 다른 값을 주면 사칭 풀이 됩니다.
        """
        self.pool_key: PoolKey = get_pool_key(token_a, token_b, fee)
        self.factory = normalize_address(factory)
        self.address = normalize_address(address) if address is not None \
            else compute_pool_address(self.factory, self.pool_key, init_code_hash)
        self.tick_spacing = tick_spacing if tick_spacing is not None else get_tick_spacing_for_fee(fee)
        self.ledger = ledger

        self._sqrt_price_x96 = sqrt_price_x96
        self._tick = get_tick_at_sqrt_ratio(sqrt_price_x96)
        self.liquidity = 0
        self.positions: Dict[Tuple[str, int, int], int] = {}
        self.mint_count = 0
        ledger.register(self)

    @property
    def token0(self) -> str:
        return self.pool_key.token0

    @property
    def token1(self) -> str:
        return self.pool_key.token1

    @property
    def fee(self) -> int:
        return self.pool_key.fee

    def slot0(self) -> Slot0:
        return Slot0(sqrt_price_x96=self._sqrt_price_x96, tick=self._tick)

    def snapshot(self) -> Tuple[Dict[Tuple[str, int, int], int], int, int]:
        """ledger.atomic() 진입 시점의 포지션 상태"""
        return dict(self.positions), self.liquidity, self.mint_count

    def restore(self, state: Tuple[Dict[Tuple[str, int, int], int], int, int]):
        self.positions, self.liquidity, self.mint_count = dict(state[0]), state[1], state[2]

    def _check_ticks(self, tick_lower: int, tick_upper: int):
        if tick_lower >= tick_upper:
            raise SimulatedPoolError(f"TLU: tick_lower {tick_lower} >= tick_upper {tick_upper}")
        if tick_lower < MIN_TICK:
            raise SimulatedPoolError(f"TLM: tick_lower {tick_lower} < {MIN_TICK}")
        if tick_upper > MAX_TICK:
            raise SimulatedPoolError(f"TUM: tick_upper {tick_upper} > {MAX_TICK}")
        if tick_lower % self.tick_spacing or tick_upper % self.tick_spacing:
            raise SimulatedPoolError(
                f"틱이 간격 {self.tick_spacing}의 배수가 아닙니다: [{tick_lower}, {tick_upper}]"
            )

    def mint(
        self,
        recipient: str,
        tick_lower: int,
        tick_upper: int,
        amount: int,
        data: bytes,
        minter
    ) -> Tuple[int, int]:
        """포지션에 유동성 추가

        Args:
            recipient: 포지션 소유자
            tick_lower, tick_upper: 포지션 경계 틱
            amount: 추가할 유동성
            data: 콜백에 그대로 전달할 컨텍스트
            minter: uniswap_v3_mint_callback을 구현한 호출자

        Returns:
            (amount0, amount1) 실제 지불된 수량

        Raises:
            SimulatedPoolError: 검증 실패 (상태 변경 없음)
        """
        self._check_ticks(tick_lower, tick_upper)
        if amount <= 0 or amount > UINT128_MAX:
            raise SimulatedPoolError(f"유동성은 0보다 크고 uint128 이하여야 합니다: {amount}")

        amount0, amount1 = get_amounts_for_liquidity(
            self._sqrt_price_x96,
            get_sqrt_ratio_at_tick(tick_lower),
            get_sqrt_ratio_at_tick(tick_upper),
            amount,
            round_up=True,
        )

        balance0_before = self.ledger.balance_of(self.token0, self.address) if amount0 > 0 else 0
        balance1_before = self.ledger.balance_of(self.token1, self.address) if amount1 > 0 else 0

        minter.uniswap_v3_mint_callback(amount0, amount1, data, self.address)

        if amount0 > 0 and balance0_before + amount0 > self.ledger.balance_of(self.token0, self.address):
            raise SimulatedPoolError("M0: token0 지불이 부족합니다")
        if amount1 > 0 and balance1_before + amount1 > self.ledger.balance_of(self.token1, self.address):
            raise SimulatedPoolError("M1: token1 지불이 부족합니다")

        key = (normalize_address(recipient), tick_lower, tick_upper)
        self.positions[key] = self.positions.get(key, 0) + amount
        if tick_lower <= self._tick < tick_upper:
            self.liquidity += amount
        self.mint_count += 1

        logger.debug(
            "Pool %s minted %d liquidity in [%d, %d] for %s (amount0=%d, amount1=%d)",
            self.address, amount, tick_lower, tick_upper, recipient, amount0, amount1
        )
        return amount0, amount1
