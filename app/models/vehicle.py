"""차량 관련 SQLAlchemy ORM 모델 정의.

Vehicle-related SQLAlchemy ORM model definitions.
Includes Manufacturer (shared reference) and Car (catalog listing).
Price and street address are derived at read time and have no columns here.

Tables:
    - manufacturers: 제조사 (Car manufacturers, code generated on insert)
    - cars: 차량 목록 (Vehicle listings with details and coordinates)
"""

from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Integer, Float, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Manufacturer(Base):
    """제조사 모델 — 여러 차량이 공유하는 참조 엔티티.

    Manufacturer model — Shared reference entity for cars.
    The code is generated by the database on first insert; names are unique
    so one record exists per distinct manufacturer.

    Attributes:
        code: 제조사 코드, 자동 증가 (Manufacturer code, autoincrement)
        name: 제조사 이름 (Manufacturer name, unique)
    """

    __tablename__ = "manufacturers"

    # 제조사 코드 — Manufacturer code (server-generated integer)
    code: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 제조사 이름 — Manufacturer display name (unique)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)


class Car(Base):
    """차량 모델 — 카탈로그의 단일 차량 항목.

    Car model — One vehicle listing in the catalog.
    Details and location columns are stored flat on the row.

    Attributes:
        id: 고유 식별자, 자동 증가 (Unique identifier, autoincrement)
        condition: 차량 상태 "NEW"|"USED" (Vehicle condition)
        body ~ external_color: 차량 상세 (Vehicle details)
        manufacturer_code: 제조사 FK (Manufacturer foreign key)
        lat, lon: 위치 좌표 (Location coordinates)
        created_at: 생성 일시 UTC, 변경 불가 (Creation timestamp, immutable)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        manufacturer: 제조사 (Referenced manufacturer, eager-loaded)
    """

    __tablename__ = "cars"

    # 차량 고유 식별자 — Car unique identifier (autoincrement)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 차량 상태 — "NEW" | "USED"
    condition: Mapped[str] = mapped_column(String(10), nullable=False)

    # 상세 정보 — Details
    body: Mapped[str] = mapped_column(String(100), nullable=False)
    model: Mapped[str] = mapped_column(String(100), nullable=False)
    manufacturer_code: Mapped[int] = mapped_column(Integer, ForeignKey("manufacturers.code"), nullable=False, index=True)
    number_of_doors: Mapped[int | None] = mapped_column(Integer, nullable=True)
    fuel_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    engine: Mapped[str | None] = mapped_column(String(100), nullable=True)
    mileage: Mapped[int | None] = mapped_column(Integer, nullable=True)
    model_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    production_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    external_color: Mapped[str | None] = mapped_column(String(50), nullable=True)

    # 위치 좌표 — Only coordinates are persisted; address fields are derived
    lat: Mapped[float] = mapped_column(Float, nullable=False)
    lon: Mapped[float] = mapped_column(Float, nullable=False)

    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — selectin으로 즉시 로딩 (Eager-loaded so async code never lazy-loads)
    manufacturer = relationship("Manufacturer", lazy="selectin")
