"""
Pool layer for Range Minter

풀 연동:
- address: CREATE2 풀 주소 계산
- callback: mint 콜백 인증
- ledger, simulated_pool: 메모리 내 토큰 장부와 풀 시뮬레이터
- service: 범위 포지션 생성 오케스트레이터
"""

from .types import PoolKey, PositionResult, RangeOpened, Slot0, MintCallbackData
from .address import compute_pool_address, get_pool_key
from .callback import verify_callback, encode_mint_callback_data, decode_mint_callback_data
from .ledger import TokenLedger
from .simulated_pool import SimulatedPool
from .service import RangePositionService, RangeServiceConfig, RangePreview, preview_range
