"""
Range Position Service - 대칭 범위 포지션 생성

호출 순서:
    1. width 검증 (풀 호출 전)
    2. 풀에서 현재 sqrtPrice, tick_spacing 조회
    3. solve_price_range → align_ticks
    4. 유동성 계산 후 pool.mint 호출
    5. 풀의 mint 콜백을 verify_callback으로 인증하고 토큰 지불
    6. RangeOpened 알림 발행

mint부터 지불, 알림까지는 장부의 atomic() 블록 안에서 실행되어
어느 단계든 실패하면 잔고/allowance와 풀 포지션이 모두 복원됩니다.

References:
- Uniswap V3 Periphery: contracts/base/LiquidityManagement.sol
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..constants import POOL_INIT_CODE_HASH
from ..exceptions import ArithmeticPrecondition, DegenerateRange
from ..math.liquidity_math import get_amounts_for_liquidity, get_liquidity_for_amounts
from ..math.range_math import PriceRange, solve_price_range, validate_width
from ..math.tick_alignment import TickAlignment, align_ticks
from ..math.tick_math import get_sqrt_ratio_at_tick
from .address import get_pool_key, normalize_address, require_nonzero_address
from .callback import decode_mint_callback_data, encode_mint_callback_data, verify_callback
from .ledger import TokenLedger
from .types import PositionResult, RangeOpened

logger = logging.getLogger(__name__)

RangeOpenedListener = Callable[[RangeOpened], None]


@dataclass(frozen=True)
class RangePreview:
    """mint 없이 계산한 포지션 예상치

    amount0/amount1은 풀이 mint 시 요구할 금액(올림)입니다.
    """
    sqrt_price_x96: int
    price_range: PriceRange
    alignment: TickAlignment
    liquidity: int
    amount0: int
    amount1: int


def preview_range(
    sqrt_price_x96: int,
    tick_spacing: int,
    amount0: int,
    amount1: int,
    width: int
) -> RangePreview:
    """현재 가격에서 범위 계산 → 틱 정렬 → 유동성 산출

    Raises:
        InvalidWidth: width가 [0, 1000)을 벗어난 경우
        ArithmeticPrecondition: amount0 == 0, 오버플로우, 유동성 0
        DegenerateRange: 정렬 후 tick_lower >= tick_upper
    """
    validate_width(width)

    price_range = solve_price_range(sqrt_price_x96, amount0, amount1, width)
    alignment = align_ticks(
        price_range.sqrt_price_lower_x96,
        price_range.sqrt_price_upper_x96,
        tick_spacing,
    )
    logger.debug(
        "Solved range sqrt=[%d, %d] raw ticks=[%d, %d] aligned=[%d, %d] (spacing=%d)",
        price_range.sqrt_price_lower_x96, price_range.sqrt_price_upper_x96,
        alignment.raw_tick_lower, alignment.raw_tick_upper,
        alignment.tick_lower, alignment.tick_upper, tick_spacing
    )
    if alignment.is_degenerate:
        raise DegenerateRange(
            f"정렬된 범위가 비어 있습니다: [{alignment.tick_lower}, {alignment.tick_upper}] "
            f"(raw [{alignment.raw_tick_lower}, {alignment.raw_tick_upper}], spacing {tick_spacing})"
        )

    sqrt_price_lower_x96 = get_sqrt_ratio_at_tick(alignment.tick_lower)
    sqrt_price_upper_x96 = get_sqrt_ratio_at_tick(alignment.tick_upper)
    liquidity = get_liquidity_for_amounts(
        sqrt_price_x96, sqrt_price_lower_x96, sqrt_price_upper_x96, amount0, amount1
    )
    if liquidity == 0:
        raise ArithmeticPrecondition("계산된 유동성이 0입니다")

    owed0, owed1 = get_amounts_for_liquidity(
        sqrt_price_x96, sqrt_price_lower_x96, sqrt_price_upper_x96, liquidity, round_up=True
    )
    return RangePreview(
        sqrt_price_x96=sqrt_price_x96,
        price_range=price_range,
        alignment=alignment,
        liquidity=liquidity,
        amount0=owed0,
        amount1=owed1,
    )


@dataclass(frozen=True)
class RangeServiceConfig:
    """서비스 고정 설정

    - factory: 콜백 인증에 쓰이는 UniswapV3Factory 주소
    - address: 서비스 자신의 주소 (사용자가 allowance를 승인하는 spender)
    - init_code_hash: 풀 CREATE2 init code 해시
    """
    factory: str
    address: str
    init_code_hash: str = POOL_INIT_CODE_HASH

    def __post_init__(self):
        # frozen dataclass이므로 object.__setattr__로 정규화
        object.__setattr__(self, "factory", require_nonzero_address(self.factory))
        object.__setattr__(self, "address", require_nonzero_address(self.address))


class RangePositionService:
    """대칭 범위 포지션 생성기

    사용법:
        service = RangePositionService(
            RangeServiceConfig(factory=UNISWAP_V3_FACTORY, address=operator),
            ledger,
        )
        result = service.open_range(pool, 10**18, 4000 * 10**18, width=100, sender=user)
    """

    def __init__(self, config: RangeServiceConfig, ledger: TokenLedger):
        self.config = config
        self.ledger = ledger
        self._listeners: List[RangeOpenedListener] = []

    @property
    def address(self) -> str:
        return self.config.address

    @property
    def factory(self) -> str:
        return self.config.factory

    def subscribe(self, listener: RangeOpenedListener):
        """RangeOpened 알림 구독"""
        self._listeners.append(listener)

    @staticmethod
    def sqrt_price_at_tick(tick: int) -> int:
        """틱의 sqrtPriceX96 (TickMath.getSqrtRatioAtTick)"""
        return get_sqrt_ratio_at_tick(tick)

    def open_range(
        self,
        pool,
        amount0: int,
        amount1: int,
        width: int,
        sender: str,
        recipient: Optional[str] = None
    ) -> PositionResult:
        """현재 가격 중심의 대칭 범위 포지션 생성

        Args:
            pool: slot0/tick_spacing/token0/token1/fee/address/mint를 제공하는 풀
            amount0: 희망 token0 예치 수량 (> 0)
            amount1: 희망 token1 예치 수량
            width: 범위 폭 [0, 1000)
            sender: 토큰을 지불하는 사용자 (서비스에 allowance 승인 필요)
            recipient: 포지션 소유자. None이면 sender

        Returns:
            PositionResult

        Raises:
            InvalidWidth: width가 범위를 벗어난 경우 (풀 호출 없음)
            ArithmeticPrecondition: amount0 == 0, 오버플로우, 유동성 0
            DegenerateRange: 정렬 후 tick_lower >= tick_upper
            CallbackAuthorization: 콜백이 정식 풀에서 오지 않은 경우
        """
        validate_width(width)
        sender = normalize_address(sender)
        recipient = normalize_address(recipient) if recipient is not None else sender

        slot0 = pool.slot0()
        preview = preview_range(slot0.sqrt_price_x96, pool.tick_spacing, amount0, amount1, width)
        alignment = preview.alignment

        pool_key = get_pool_key(pool.token0, pool.token1, pool.fee)
        data = encode_mint_callback_data(pool_key, sender)

        # 알림 리스너의 실패도 mint와 지불을 함께 되돌림
        with self.ledger.atomic():
            real_amount0, real_amount1 = pool.mint(
                recipient, alignment.tick_lower, alignment.tick_upper, preview.liquidity, data, self
            )

            result = PositionResult(
                tick_lower=alignment.tick_lower,
                tick_upper=alignment.tick_upper,
                liquidity=preview.liquidity,
                amount0=real_amount0,
                amount1=real_amount1,
            )
            self._emit(RangeOpened(
                sender=sender,
                pool=normalize_address(pool.address),
                liquidity=result.liquidity,
                amount0=real_amount0,
                amount1=real_amount1,
                tick_lower=result.tick_lower,
                tick_upper=result.tick_upper,
            ))
        return result

    def uniswap_v3_mint_callback(
        self,
        amount0_owed: int,
        amount1_owed: int,
        data: bytes,
        caller: str
    ):
        """풀의 mint 콜백: 호출자 인증 후 payer의 토큰을 풀로 전송

        Raises:
            CallbackAuthorization: caller가 정식 풀이 아닌 경우
            InsufficientFunds: payer의 잔고/allowance 부족
        """
        decoded = decode_mint_callback_data(data)
        pool_address = verify_callback(
            self.config.factory, decoded.pool_key, caller, self.config.init_code_hash
        )

        if amount0_owed > 0:
            self.ledger.transfer_from(
                decoded.pool_key.token0, self.address, decoded.payer, pool_address, amount0_owed
            )
        if amount1_owed > 0:
            self.ledger.transfer_from(
                decoded.pool_key.token1, self.address, decoded.payer, pool_address, amount1_owed
            )

    def _emit(self, event: RangeOpened):
        logger.info(
            "Range opened by %s on pool %s: liquidity=%d amount0=%d amount1=%d ticks=[%d, %d]",
            event.sender, event.pool, event.liquidity, event.amount0, event.amount1,
            event.tick_lower, event.tick_upper
        )
        for listener in self._listeners:
            listener(event)
