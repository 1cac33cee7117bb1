"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all vehicles models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    vehicle: 제조사 및 차량 (Manufacturer and Car)
"""

from app.models.vehicle import Manufacturer, Car

__all__ = [
    "Manufacturer", "Car",
]
