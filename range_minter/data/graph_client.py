"""
The Graph API 클라이언트

Uniswap V3 Subgraph에서 풀의 현재 상태를 조회하는 클라이언트.
다중 체인 지원 (Ethereum, Polygon, Optimism, Arbitrum, Celo)
"""

import logging
import time
from typing import Optional, Dict, Any

import requests

from ..constants import SUBGRAPH_IDS, CHAIN_IDS
from .types import Pool
from . import queries

logger = logging.getLogger(__name__)


class GraphClientError(Exception):
    """Graph API 오류"""
    pass


class GraphClient:
    """The Graph API 클라이언트

    사용법:
        client = GraphClient(api_key="your_api_key", chain="ethereum")
        pool = client.get_pool("0x...")
    """

    def __init__(
        self,
        api_key: str,
        chain: str = "ethereum",
        timeout: int = 30,
        max_retries: int = 3,
        session: Optional[requests.Session] = None
    ):
        """
        Args:
            api_key: The Graph API 키
            chain: 체인 이름 (ethereum, polygon, optimism, arbitrum, celo)
            timeout: 요청 타임아웃 (초)
            max_retries: 네트워크 오류 시 최대 시도 횟수
            session: 재사용할 requests 세션
        """
        if not api_key:
            raise GraphClientError(
                "API 키가 필요합니다. GRAPH_API_KEY 환경변수를 설정하세요. "
                "API 키는 https://thegraph.com/studio/ 에서 발급받을 수 있습니다."
            )

        chain_lower = chain.lower()
        if chain_lower not in CHAIN_IDS:
            raise GraphClientError(
                f"지원하지 않는 체인: {chain}. "
                f"지원 체인: {', '.join(CHAIN_IDS.keys())}"
            )

        if max_retries < 1:
            raise ValueError(f"max_retries는 1 이상이어야 합니다: {max_retries}")

        self.api_key = api_key
        self.chain_id = CHAIN_IDS[chain_lower]
        self.subgraph_id = SUBGRAPH_IDS[self.chain_id]
        self.timeout = timeout
        self.max_retries = max_retries
        self._session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        """GraphQL 엔드포인트 URL"""
        return f"https://gateway.thegraph.com/api/{self.api_key}/subgraphs/id/{self.subgraph_id}"

    def _execute_query(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """GraphQL 쿼리 실행

        네트워크 오류만 재시도하고, GraphQL 오류는 즉시 실패합니다.

        Raises:
            GraphClientError: API 오류 발생 시
        """
        payload: Dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        last_error: Optional[GraphClientError] = None
        for attempt in range(self.max_retries):
            try:
                response = self._session.post(
                    self.endpoint,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                    timeout=self.timeout
                )
                response.raise_for_status()
                data = response.json()
            except requests.exceptions.Timeout:
                last_error = GraphClientError(f"요청 타임아웃 ({self.timeout}초)")
            except (requests.exceptions.RequestException, ValueError) as e:
                last_error = GraphClientError(f"네트워크 오류: {e}")
            else:
                if "errors" in data:
                    error_messages = [e.get("message", str(e)) for e in data["errors"]]
                    raise GraphClientError(f"GraphQL 오류: {'; '.join(error_messages)}")
                if "data" not in data:
                    raise GraphClientError("응답에 'data' 필드가 없습니다")
                return data["data"]

            if attempt < self.max_retries - 1:
                logger.warning(
                    "Subgraph request failed (attempt %d/%d): %s",
                    attempt + 1, self.max_retries, last_error
                )
                time.sleep(1.0 * (attempt + 1))

        raise last_error

    def get_pool(self, pool_id: str) -> Optional[Pool]:
        """Pool 정보 조회

        Args:
            pool_id: Pool 컨트랙트 주소

        Returns:
            Pool 객체 또는 None
        """
        data = self._execute_query(queries.POOL_QUERY, {"id": pool_id.lower()})
        pool_data = data.get("pool")
        if not pool_data:
            return None
        return Pool.from_dict(pool_data)
