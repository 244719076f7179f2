"""
GraphQL 쿼리 정의

범위 미리보기에 필요한 풀 현재 상태 조회 쿼리.
"""

# Pool 현재 상태 쿼리
POOL_QUERY = """
query Pool($id: ID!) {
  pool(id: $id) {
    id
    feeTier
    tick
    sqrtPrice
    liquidity
    token0 {
      id
      symbol
      name
      decimals
    }
    token1 {
      id
      symbol
      name
      decimals
    }
    totalValueLockedUSD
  }
}
"""
