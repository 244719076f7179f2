"""
Range Preview Endpoint

Computes the aligned symmetric range a deposit would open, without minting.
"""
import logging
from datetime import datetime

from fastapi import APIRouter, HTTPException

from app.api.schemas import RangePreviewRequest, RangePreviewResponse
from app.config import settings
from range_minter.data import GraphClient, GraphClientError
from range_minter.exceptions import ArithmeticPrecondition, DegenerateRange, InvalidWidth
from range_minter.math.tick_math import get_tick_spacing_for_fee
from range_minter.pool.address import compute_pool_address, get_pool_key
from range_minter.pool.service import preview_range

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/ranges/preview", response_model=RangePreviewResponse)
def preview(request: RangePreviewRequest):
    """
    Preview a symmetric range position

    Flow:
    1. Resolve the current sqrt price and tick spacing
       (from the request, or from the subgraph when pool_id is given)
    2. Solve the symmetric range and align it to the tick grid
    3. Return the liquidity and the token amounts the pool would pull

    Declared as a plain def: the subgraph client is blocking.
    """
    pool_address = None

    if request.pool_id is not None:
        try:
            client = GraphClient(api_key=settings.GRAPH_API_KEY, chain=settings.CHAIN)
            pool = client.get_pool(request.pool_id)
        except GraphClientError as e:
            logger.error("Subgraph lookup for pool %s failed: %s", request.pool_id, e)
            raise HTTPException(status_code=502, detail=str(e))

        if pool is None:
            raise HTTPException(
                status_code=404,
                detail=f"Pool {request.pool_id} not found on {settings.CHAIN}"
            )

        sqrt_price_x96 = pool.sqrt_price
        # InvalidAddress is a ValueError; both mean the subgraph data is unusable
        try:
            tick_spacing = request.tick_spacing or pool.tick_spacing
            pool_key = get_pool_key(pool.token0.id, pool.token1.id, pool.fee_tier)
            pool_address = compute_pool_address(
                settings.FACTORY_ADDRESS, pool_key, settings.POOL_INIT_CODE_HASH
            )
        except ValueError as e:
            logger.error("Subgraph returned unusable data for pool %s: %s", request.pool_id, e)
            raise HTTPException(status_code=502, detail=f"Subgraph returned unusable pool data: {e}")

    elif request.sqrt_price_x96 is not None:
        sqrt_price_x96 = request.sqrt_price_x96
        try:
            tick_spacing = request.tick_spacing or get_tick_spacing_for_fee(request.fee_tier)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))

    else:
        raise HTTPException(status_code=422, detail="Either sqrt_price_x96 or pool_id is required")

    try:
        result = preview_range(
            sqrt_price_x96, tick_spacing, request.amount0, request.amount1, request.width
        )
    except (InvalidWidth, ArithmeticPrecondition, DegenerateRange) as e:
        raise HTTPException(status_code=422, detail=str(e))

    alignment = result.alignment
    return RangePreviewResponse(
        sqrt_price_x96=sqrt_price_x96,
        sqrt_price_lower_x96=result.price_range.sqrt_price_lower_x96,
        sqrt_price_upper_x96=result.price_range.sqrt_price_upper_x96,
        raw_tick_lower=alignment.raw_tick_lower,
        raw_tick_upper=alignment.raw_tick_upper,
        tick_lower=alignment.tick_lower,
        tick_upper=alignment.tick_upper,
        tick_spacing=tick_spacing,
        liquidity=result.liquidity,
        amount0=result.amount0,
        amount1=result.amount1,
        pool_address=pool_address,
        timestamp=datetime.utcnow()
    )
