"""가격 라우터 — 가격 조회 엔드포인트.

Pricing Router — Price query endpoint.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.pricing.database import get_pricing_db
from app.pricing.schemas import PriceResponse
from app.pricing.service import pricing_service

router: APIRouter = APIRouter()


@router.get("/price", response_model=PriceResponse)
async def get_price(
    vehicle_id: Annotated[int, Query(alias="vehicleId")],
    db: Annotated[AsyncSession, Depends(get_pricing_db)],
) -> PriceResponse:
    """차량 ID로 가격을 조회합니다.

    Return the price of the given vehicle, or 404 when it has none.
    """
    return await pricing_service.get_price(db, vehicle_id)
