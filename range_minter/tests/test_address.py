"""
Pool Address 테스트

메인넷에 배포된 실제 풀 주소와 CREATE2 계산 결과를 비교합니다.
"""

import pytest

from ..pool.address import (
    compute_pool_address,
    get_pool_key,
    normalize_address,
    require_nonzero_address,
)
from ..pool.types import PoolKey
from ..constants import UNISWAP_V3_FACTORY, ZERO_ADDRESS
from ..exceptions import InvalidAddress

USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
USDT = "0xdAC17F958D2ee523a2206206994597C13D831ec7"
DAI = "0x6B175474E89094C44Da98b954EedeAC495271d0F"


class TestGetPoolKey:
    """get_pool_key 테스트"""

    def test_sorts_tokens(self):
        key = get_pool_key(WETH, USDC, 500)
        assert key == get_pool_key(USDC, WETH, 500)
        assert key.token0 == USDC
        assert key.token1 == WETH

    def test_lowercase_input_is_checksummed(self):
        key = get_pool_key(WETH.lower(), USDC.lower(), 3000)
        assert key == PoolKey(token0=USDC, token1=WETH, fee=3000)

    def test_same_token_rejected(self):
        with pytest.raises(InvalidAddress):
            get_pool_key(WETH, WETH, 3000)

    def test_fee_out_of_range(self):
        with pytest.raises(ValueError):
            get_pool_key(WETH, USDC, 2 ** 24)


class TestComputePoolAddress:
    """compute_pool_address 테스트"""

    @pytest.mark.parametrize("token_a, token_b, fee, expected", [
        (USDC, WETH, 500, "0x88e6A0c2dDD26FEEb64F039a2c41296FcB3f5640"),
        (USDC, WETH, 3000, "0x8ad599c3A0ff1De082011EFDDc58f1908eb6e6D8"),
        (WETH, USDT, 3000, "0x4e68Ccd3E89f51C3074ca5072bbAC773960dFa36"),
    ])
    def test_mainnet_pools(self, token_a, token_b, fee, expected):
        key = get_pool_key(token_a, token_b, fee)
        assert compute_pool_address(UNISWAP_V3_FACTORY, key) == expected

    def test_factory_constant_is_checksummed(self):
        """오타가 난 주소는 EIP-55 checksum 대소문자가 맞지 않음"""
        assert normalize_address(UNISWAP_V3_FACTORY) == UNISWAP_V3_FACTORY

    def test_sdk_reference_vector(self):
        """Uniswap v3-sdk computePoolAddress 테스트 벡터"""
        key = get_pool_key(USDC, DAI, 500)
        address = compute_pool_address("0x1111111111111111111111111111111111111111", key)
        assert address == "0x90B1b09A9715CaDbFD9331b3A7652B24BfBEfD32"

    def test_fee_changes_address(self):
        a = compute_pool_address(UNISWAP_V3_FACTORY, get_pool_key(USDC, WETH, 500))
        b = compute_pool_address(UNISWAP_V3_FACTORY, get_pool_key(USDC, WETH, 3000))
        assert a != b

    def test_factory_changes_address(self):
        key = get_pool_key(USDC, WETH, 500)
        other_factory = "0x0227628f3f023bb0b980b67d528571c95c6dac1c"
        assert compute_pool_address(UNISWAP_V3_FACTORY, key) != compute_pool_address(other_factory, key)

    def test_unsorted_key_rejected(self):
        with pytest.raises(InvalidAddress):
            compute_pool_address(UNISWAP_V3_FACTORY, PoolKey(token0=WETH, token1=USDC, fee=500))


class TestAddressValidation:
    """normalize_address, require_nonzero_address 테스트"""

    def test_malformed(self):
        for bad in ["0x123", "not an address", None, 42]:
            with pytest.raises(InvalidAddress):
                normalize_address(bad)

    def test_zero_address(self):
        with pytest.raises(InvalidAddress):
            require_nonzero_address(ZERO_ADDRESS)

    def test_checksum(self):
        assert normalize_address(WETH.lower()) == WETH


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
