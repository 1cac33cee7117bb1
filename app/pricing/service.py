"""가격 서비스 — 가격 조회 및 초기 시드 비즈니스 로직.

Pricing Service — Business logic for price lookup and initial seeding.
"""

import random
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from app.pricing.models import Price
from app.pricing.repository import price_repository
from app.pricing.schemas import PriceResponse
from app.utils.exceptions import NotFoundError


def random_price() -> Decimal:
    """5,000 ~ 25,000 USD 사이의 임의 가격 — Random price between 5,000 and 25,000."""
    amount = Decimal(random.uniform(1, 5)) * Decimal(5000)
    return amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


class PricingService:
    """가격 관련 비즈니스 로직을 처리하는 서비스.

    Service handling price business logic.
    """

    async def get_price(self, db: AsyncSession, vehicle_id: int) -> PriceResponse:
        """차량 ID로 가격을 조회합니다.

        Retrieve the price of a vehicle.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            vehicle_id: 차량 ID (Vehicle id)

        Returns:
            PriceResponse: 가격 응답 (Price response)

        Raises:
            NotFoundError: 가격이 없을 때 (No price for this vehicle)
        """
        price: Price | None = await price_repository.get_by_id(db, vehicle_id)
        if price is None:
            raise NotFoundError("Price not found")
        return PriceResponse(
            currency=price.currency,
            price=price.price,
            vehicle_id=price.vehicle_id,
        )

    async def seed_prices(self, db: AsyncSession, count: int) -> int:
        """비어 있는 가격 테이블에 차량 1..count의 임의 가격을 채웁니다.

        Fill an empty price table with random USD prices for vehicle ids
        1 through count. Does nothing when prices already exist.

        Returns:
            int: 생성된 가격 수 (Number of prices created)
        """
        if await price_repository.count(db) > 0:
            return 0

        for vehicle_id in range(1, count + 1):
            await price_repository.create(
                db,
                {"vehicle_id": vehicle_id, "currency": "USD", "price": random_price()},
            )
        return count


# 싱글턴 인스턴스 — Singleton instance
pricing_service: PricingService = PricingService()
