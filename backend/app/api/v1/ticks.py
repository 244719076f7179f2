"""
Tick Endpoints

Exposes TickMath conversions.
"""
from fastapi import APIRouter, HTTPException

from app.api.schemas import SqrtPriceResponse
from range_minter.pool.service import RangePositionService
from range_minter.math.tick_math import tick_to_price

router = APIRouter()


@router.get("/ticks/{tick}/sqrt-price", response_model=SqrtPriceResponse)
async def sqrt_price_at_tick(tick: int):
    """
    Sqrt price (Q64.96) at a tick

    Args:
        tick: Tick index in [-887272, 887272]
    """
    try:
        sqrt_price_x96 = RangePositionService.sqrt_price_at_tick(tick)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return SqrtPriceResponse(
        tick=tick,
        sqrt_price_x96=sqrt_price_x96,
        price=tick_to_price(tick)
    )
