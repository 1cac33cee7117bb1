"""FastAPI 의존성 주입 모듈 — 서비스 인스턴스 제공.

FastAPI dependency injection module.
Exposes the car service through a dependency so tests can swap its
collaborators (stores and outbound clients) with app.dependency_overrides.
"""

from app.services.car_service import CarService, car_service


def get_car_service() -> CarService:
    """차량 서비스 인스턴스를 반환합니다 — Return the car service instance."""
    return car_service
