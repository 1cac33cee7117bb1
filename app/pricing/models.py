"""가격 SQLAlchemy ORM 모델 정의.

Price SQLAlchemy ORM model definition.

Tables:
    - prices: 차량 ID별 가격 (Price per vehicle id)
"""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.pricing.database import PricingBase


class Price(PricingBase):
    """가격 모델 — 차량 한 대의 가격.

    Price model — The price of one vehicle. Not linked to the vehicles
    database; vehicle_id is a plain key.

    Attributes:
        vehicle_id: 차량 ID (Vehicle id, primary key)
        currency: 통화 코드 (ISO currency code, e.g. "USD")
        price: 가격 (Price with two decimal places)
    """

    __tablename__ = "prices"

    # 차량 ID — Vehicle id (assigned by the caller, not generated)
    vehicle_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    # 통화 — ISO 4217 currency code
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    # 가격 — Price amount
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
