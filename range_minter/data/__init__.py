"""
Data layer for Range Minter

The Graph API 클라이언트 및 풀 스냅샷 타입
"""

from .types import Token, Pool
from .graph_client import GraphClient, GraphClientError
