"""가격 레포지토리 — 가격 조회 및 생성.

Price Repository — Lookup and creation of price records.
"""

from app.pricing.models import Price
from app.repositories.base import BaseRepository


class PriceRepository(BaseRepository[Price]):
    """가격 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the prices table.
    """

    def __init__(self) -> None:
        super().__init__(Price, Price.vehicle_id)


# 싱글턴 인스턴스 — Singleton instance
price_repository: PriceRepository = PriceRepository()
