"""
Uniswap V3 Symmetric Range Minter

현재 가격과 두 토큰 예치 수량으로부터 대칭 가격 범위를 계산하고,
틱 간격에 맞춘 포지션을 하나의 원자적 예치로 여는 라이브러리.
"""

__version__ = "0.1.0"
__author__ = "Zekiya"

from .constants import Q96, TICK_SPACINGS, MAX_WIDTH
from .exceptions import (
    RangeMinterError,
    InvalidAddress,
    InvalidWidth,
    ArithmeticPrecondition,
    CallbackAuthorization,
    DegenerateRange,
)
