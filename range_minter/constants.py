"""
Uniswap V3 상수 정의

온체인 수준 정밀도를 위한 상수들:
- Q96: sqrt price 인코딩에 사용 (2^96)
- TICK_SPACINGS: 각 수수료 티어별 틱 간격
- POOL_INIT_CODE_HASH: CREATE2 풀 주소 계산용 init code 해시
"""

from typing import Dict

# Fixed-point 인코딩 상수
Q96: int = 2 ** 96
Q192: int = 2 ** 192

# 범위 계산기 내부 고정소수점 기준 (10^9)
# 중간 곱이 uint256을 넘지 않도록 Q96보다 낮은 정밀도 사용
SOLVER_PRECISION: int = 10 ** 9

# width 파라미터 상한 (미포함): 목표 가격 비율 = (1000 + w) / (1000 - w)
MAX_WIDTH: int = 1000

# 각 수수료 티어별 틱 간격
TICK_SPACINGS: Dict[int, int] = {
    100: 1,
    500: 10,
    3000: 60,
    10000: 200,
}

# 지원되는 체인 ID 및 Subgraph ID
CHAIN_IDS: Dict[str, int] = {
    "ethereum": 0,
    "optimism": 1,
    "arbitrum": 2,
    "polygon": 3,
    "celo": 5,
}

# The Graph Subgraph IDs
SUBGRAPH_IDS: Dict[int, str] = {
    0: "5zvR82QoaXYFyDEKLZ9t6v9adgnptxYpKpSbxtgVENFV",  # Ethereum Mainnet
    1: "Cghf4LfVqPiFw6fp6Y5X5Ubc8UpmUhSfJL82zwiBFLaj",  # Optimism
    2: "FbCGRftH4a3yZugY7TnbYgPJVEv2LvMT6oF1fxPe9aJM",  # Arbitrum
    3: "3hCPRGf4z88VC5rsBKU5AA9FBBq5nF3jbKJG7VZCbhjm",  # Polygon
    5: "ESdrTJ3twMwWVoQ1hUE2u7PugEHX3QkenudD6aXCkDQ4",  # Celo
}

# 틱 범위 상수
MIN_TICK: int = -887272
MAX_TICK: int = 887272

# Uniswap V3 Factory (Ethereum mainnet 외 대부분의 체인 동일)
UNISWAP_V3_FACTORY: str = "0x1F98431c8aD98523631AE4a59f267346ea31F984"

# PoolAddress.POOL_INIT_CODE_HASH (v3-periphery)
POOL_INIT_CODE_HASH: str = "0xe34f199b19b2b4f47f68442619d555527d244f78a3297ea89325f843f87b8b54"

ZERO_ADDRESS: str = "0x0000000000000000000000000000000000000000"

# uint256 최대값
UINT256_MAX: int = 2 ** 256 - 1
UINT128_MAX: int = 2 ** 128 - 1
