"""
Mint Callback 인증

풀은 mint 도중 요청자에게 콜백하여 지불할 토큰을 가져갑니다.
아무 컨트랙트나 풀을 사칭해 이 콜백으로 사용자가 승인한 allowance를
빼갈 수 있으므로, 호출자 신원은 (factory, PoolKey)에서 다시 계산한
주소와 정확히 일치해야 합니다.

References:
- Uniswap V3 Periphery: contracts/libraries/CallbackValidation.sol
- Uniswap V3 Periphery: contracts/base/LiquidityManagement.sol
"""

import logging

from eth_abi import encode, decode
from eth_abi.exceptions import DecodingError
from web3 import Web3

from ..constants import POOL_INIT_CODE_HASH
from ..exceptions import CallbackAuthorization, InvalidAddress
from .address import compute_pool_address, get_pool_key, normalize_address
from .types import PoolKey, MintCallbackData

logger = logging.getLogger(__name__)

# abi.encode(MintCallbackData({poolKey, payer}))
MINT_CALLBACK_DATA_TYPES = ["(address,address,uint24)", "address"]


def encode_mint_callback_data(pool_key: PoolKey, payer: str) -> bytes:
    """콜백 컨텍스트 인코딩"""
    return encode(
        MINT_CALLBACK_DATA_TYPES,
        [(pool_key.token0, pool_key.token1, pool_key.fee), normalize_address(payer)],
    )


def decode_mint_callback_data(data: bytes) -> MintCallbackData:
    """콜백 컨텍스트 디코딩

    Raises:
        CallbackAuthorization: 데이터 형식이 잘못된 경우
    """
    try:
        (token0, token1, fee), payer = decode(MINT_CALLBACK_DATA_TYPES, data)
        pool_key = get_pool_key(token0, token1, fee)
    except (DecodingError, InvalidAddress, ValueError, TypeError) as e:
        raise CallbackAuthorization(f"콜백 데이터를 해석할 수 없습니다: {e}") from e

    if (pool_key.token0, pool_key.token1) != (
        normalize_address(token0), normalize_address(token1)
    ):
        raise CallbackAuthorization("콜백 데이터의 토큰 순서가 잘못되었습니다")

    return MintCallbackData(pool_key=pool_key, payer=normalize_address(payer))


def verify_callback(
    factory: str,
    pool_key: PoolKey,
    caller: str,
    init_code_hash: str = POOL_INIT_CODE_HASH
) -> str:
    """콜백 호출자가 PoolKey의 정식 풀인지 검증

    Args:
        factory: UniswapV3Factory 주소
        pool_key: 콜백 데이터에서 꺼낸 PoolKey
        caller: 실제 콜백 호출자 주소

    Returns:
        검증된 풀 주소

    Raises:
        CallbackAuthorization: caller가 계산된 풀 주소와 다른 경우
    """
    expected = compute_pool_address(factory, pool_key, init_code_hash)

    if not isinstance(caller, str) or not Web3.is_address(caller):
        logger.warning("Rejected mint callback from malformed caller %r", caller)
        raise CallbackAuthorization(f"유효하지 않은 콜백 호출자: {caller!r}")

    if Web3.to_checksum_address(caller) != expected:
        logger.warning(
            "Rejected mint callback: caller=%s expected=%s", caller, expected
        )
        raise CallbackAuthorization(
            f"콜백 호출자 {caller}가 풀 {expected}와 일치하지 않습니다"
        )

    return expected
