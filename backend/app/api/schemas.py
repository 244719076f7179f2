"""
API Request/Response Schemas using Pydantic

Defines data models for the range preview API endpoints.
Q64.96 values are plain integers; they routinely exceed 2^53.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class RangePreviewRequest(BaseModel):
    """Request payload for POST /api/v1/ranges/preview

    Either sqrt_price_x96 (with fee_tier or tick_spacing) or pool_id must be given.
    """
    amount0: int = Field(..., description="Desired token0 deposit in raw units")
    amount1: int = Field(..., description="Desired token1 deposit in raw units")
    width: int = Field(..., description="Range width in [0, 1000): price ratio (1000+w)/(1000-w)")
    sqrt_price_x96: Optional[int] = Field(None, description="Current pool sqrt price (Q64.96)", gt=0)
    pool_id: Optional[str] = Field(None, description="Pool ID from The Graph")
    fee_tier: int = Field(default=3000, description="Fee tier used to pick the tick spacing")
    tick_spacing: Optional[int] = Field(None, description="Explicit tick spacing (overrides fee_tier)", gt=0)

    class Config:
        json_schema_extra = {
            "example": {
                "amount0": 10 ** 18,
                "amount1": 4000 * 10 ** 18,
                "width": 100,
                "sqrt_price_x96": 5010828967500958623728276031392,
                "fee_tier": 3000
            }
        }


class RangePreviewResponse(BaseModel):
    """Response payload for POST /api/v1/ranges/preview"""
    status: str = Field(default="success", description="Response status")
    sqrt_price_x96: int = Field(..., description="Sqrt price the range was solved at")
    sqrt_price_lower_x96: int = Field(..., description="Solved lower sqrt price before alignment")
    sqrt_price_upper_x96: int = Field(..., description="Solved upper sqrt price before alignment")
    raw_tick_lower: int = Field(..., description="Tick of the solved lower bound")
    raw_tick_upper: int = Field(..., description="Tick of the solved upper bound")
    tick_lower: int = Field(..., description="Aligned lower tick")
    tick_upper: int = Field(..., description="Aligned upper tick")
    tick_spacing: int = Field(..., description="Tick spacing used for alignment")
    liquidity: int = Field(..., description="Liquidity the deposit would mint")
    amount0: int = Field(..., description="Token0 the pool would pull")
    amount1: int = Field(..., description="Token1 the pool would pull")
    pool_address: Optional[str] = Field(None, description="Derived pool address (pool_id previews only)")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class SqrtPriceResponse(BaseModel):
    """Response payload for GET /api/v1/ticks/{tick}/sqrt-price"""
    tick: int = Field(..., description="Tick index")
    sqrt_price_x96: int = Field(..., description="TickMath.getSqrtRatioAtTick(tick)")
    price: float = Field(..., description="Raw price token1/token0 (1.0001^tick)")

    class Config:
        json_schema_extra = {
            "example": {
                "tick": 0,
                "sqrt_price_x96": 79228162514264337593543950336,
                "price": 1.0
            }
        }


class HealthCheckResponse(BaseModel):
    """Response payload for GET /api/v1/health endpoint"""
    status: str = Field(..., description="Health status (healthy or unhealthy)")
    version: str = Field(..., description="API version")
    factory: str = Field(..., description="Factory used to derive pool addresses")
    chain: str = Field(..., description="Chain used for subgraph lookups")
    graph_api_configured: bool = Field(..., description="Whether pool_id previews are available")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Health check timestamp")

    class Config:
        json_schema_extra = {
            "example": {
                "status": "healthy",
                "version": "0.1.0",
                "factory": "0x1F98431c8aD98523631AE4a59f267346ea31F984",
                "chain": "ethereum",
                "graph_api_configured": True,
                "timestamp": "2024-01-15T10:30:00Z"
            }
        }
