"""차량 레포지토리 — 차량 CRUD 쿼리.

Car Repository — CRUD queries for the cars table.
The manufacturer relationship is eager-loaded by the model mapping.
"""

from app.models.vehicle import Car
from app.repositories.base import BaseRepository


class CarRepository(BaseRepository[Car]):
    """차량 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the cars table.
    """

    def __init__(self) -> None:
        super().__init__(Car, Car.id)


# 싱글턴 인스턴스 — Singleton instance
car_repository: CarRepository = CarRepository()
