"""
공통 테스트 픽스처

4000 token1 / token0 가격의 시뮬레이션 풀과 승인된 사용자 장부.
"""

import pytest
from web3 import Web3

from ..constants import UNISWAP_V3_FACTORY
from ..math.sqrt_price_math import encode_sqrt_ratio_x96
from ..pool.ledger import TokenLedger
from ..pool.service import RangePositionService, RangeServiceConfig
from ..pool.simulated_pool import SimulatedPool

TOKEN_A = Web3.to_checksum_address("0x" + "11" * 20)
TOKEN_B = Web3.to_checksum_address("0x" + "22" * 20)
OPERATOR = Web3.to_checksum_address("0x" + "aa" * 20)
USER = Web3.to_checksum_address("0x" + "bb" * 20)
ATTACKER = Web3.to_checksum_address("0x" + "cc" * 20)

FUNDED = 10 ** 30
SQRT_PRICE_4000 = encode_sqrt_ratio_x96(4000, 1)


@pytest.fixture
def ledger():
    ledger = TokenLedger()
    for token in (TOKEN_A, TOKEN_B):
        ledger.mint(token, USER, FUNDED)
        ledger.approve(token, USER, OPERATOR, FUNDED)
    return ledger


@pytest.fixture
def pool(ledger):
    return SimulatedPool(UNISWAP_V3_FACTORY, TOKEN_A, TOKEN_B, 3000, SQRT_PRICE_4000, ledger)


@pytest.fixture
def service(ledger):
    config = RangeServiceConfig(factory=UNISWAP_V3_FACTORY, address=OPERATOR)
    return RangePositionService(config, ledger)
