"""
Pool Address - 결정적 풀 주소 계산

Uniswap V3 Periphery PoolAddress 라이브러리와 동일한 CREATE2 주소 유도:

    salt    = keccak256(abi.encode(token0, token1, fee))
    address = keccak256(0xff ++ factory ++ salt ++ POOL_INIT_CODE_HASH)[12:]

References:
- Uniswap V3 Periphery: contracts/libraries/PoolAddress.sol
"""

from eth_abi import encode
from web3 import Web3

from ..constants import POOL_INIT_CODE_HASH, ZERO_ADDRESS
from ..exceptions import InvalidAddress
from .types import PoolKey


def normalize_address(address: str) -> str:
    """주소 검증 후 checksum 형식으로 변환

    Raises:
        InvalidAddress: 주소 형식이 잘못된 경우
    """
    if not isinstance(address, str) or not Web3.is_address(address):
        raise InvalidAddress(f"유효하지 않은 주소: {address!r}")
    return Web3.to_checksum_address(address)


def require_nonzero_address(address: str) -> str:
    """0 주소가 아닌 유효한 주소인지 검증"""
    checksum = normalize_address(address)
    if checksum == ZERO_ADDRESS:
        raise InvalidAddress("0 주소는 사용할 수 없습니다")
    return checksum


def get_pool_key(token_a: str, token_b: str, fee: int) -> PoolKey:
    """토큰 순서를 정렬한 PoolKey 생성

    Args:
        token_a: 토큰 주소
        token_b: 토큰 주소
        fee: 수수료 티어 (uint24)

    Returns:
        token0 < token1 인 PoolKey
    """
    token_a = normalize_address(token_a)
    token_b = normalize_address(token_b)
    if token_a == token_b:
        raise InvalidAddress(f"동일한 토큰으로 풀을 만들 수 없습니다: {token_a}")
    if not 0 <= fee < 2 ** 24:
        raise ValueError(f"fee는 uint24 범위여야 합니다: {fee}")

    if int(token_a, 16) > int(token_b, 16):
        token_a, token_b = token_b, token_a
    return PoolKey(token0=token_a, token1=token_b, fee=fee)


def compute_pool_address(
    factory: str,
    pool_key: PoolKey,
    init_code_hash: str = POOL_INIT_CODE_HASH
) -> str:
    """factory와 PoolKey로부터 풀 주소를 결정적으로 계산

    Args:
        factory: UniswapV3Factory 주소
        pool_key: 정렬된 PoolKey
        init_code_hash: 풀 init code의 keccak256 해시

    Returns:
        checksum 풀 주소
    """
    factory = normalize_address(factory)
    if int(pool_key.token0, 16) >= int(pool_key.token1, 16):
        raise InvalidAddress("PoolKey는 token0 < token1 이어야 합니다")

    salt = Web3.keccak(
        encode(
            ["address", "address", "uint24"],
            [pool_key.token0, pool_key.token1, pool_key.fee],
        )
    )
    digest = Web3.keccak(
        b"\xff"
        + bytes.fromhex(factory[2:])
        + bytes(salt)
        + bytes.fromhex(init_code_hash[2:] if init_code_hash.startswith("0x") else init_code_hash)
    )
    return Web3.to_checksum_address("0x" + bytes(digest[12:]).hex())
