"""가격 Pydantic 응답 스키마 — Price response schema."""

from decimal import Decimal

from pydantic import BaseModel


class PriceResponse(BaseModel):
    """가격 응답 스키마.

    Price response schema. price is serialized as a decimal string.
    """

    currency: str  # 통화 코드 (Currency code)
    price: Decimal  # 가격 (Price amount)
    vehicle_id: int  # 차량 ID (Vehicle id)
