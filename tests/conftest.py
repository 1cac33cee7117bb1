"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite database, session, and httpx client
fixtures for the vehicles API, the pricing service and the maps service.
Each test gets a fresh schema. Outbound price/maps calls are replaced with
stub clients injected into the car service.
"""

import os

# Settings 검증 전에 환경 변수 설정 — Set env vars before importing app modules
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["PRICING_DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["AXIOM_API_TOKEN"] = ""
os.environ["AXIOM_DATASET"] = ""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.api.deps import get_car_service
from app.database import Base, build_engine, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 — register all models with metadata
from app.repositories.car_repository import car_repository
from app.repositories.manufacturer_repository import manufacturer_repository
from app.schemas.vehicle import LocationSchema
from app.services.car_service import CarService


# ---------------------------------------------------------------------------
# 외부 클라이언트 스텁 — Stub price/maps clients
# ---------------------------------------------------------------------------
class StubPriceClient:
    """고정 가격을 반환하고 호출 기록을 남기는 스텁."""

    def __init__(self, price: str = "USD 12345.67") -> None:
        self.price = price
        self.calls: list[int] = []

    async def get_price(self, vehicle_id: int) -> str:
        self.calls.append(vehicle_id)
        return self.price


class StubMapsClient:
    """고정 위치를 반환하고 호출 기록을 남기는 스텁."""

    def __init__(self, location: LocationSchema | None = None) -> None:
        self.location = location
        self.calls: list[LocationSchema] = []

    async def get_address(self, location: LocationSchema) -> LocationSchema:
        self.calls.append(location)
        if self.location is not None:
            return self.location
        return location.model_copy(update={
            "address": "777 Brockton Avenue",
            "city": "Abington",
            "state": "MA",
            "zip": "2351",
        })


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 인메모리 엔진. 매 테스트마다 스키마를 새로 생성합니다."""
    eng = build_engine("sqlite+aiosqlite://")
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def price_stub() -> StubPriceClient:
    return StubPriceClient()


@pytest.fixture
def maps_stub() -> StubMapsClient:
    return StubMapsClient()


@pytest.fixture
def car_service(price_stub: StubPriceClient, maps_stub: StubMapsClient) -> CarService:
    """스텁 클라이언트가 주입된 차량 서비스."""
    return CarService(car_repository, manufacturer_repository, price_stub, maps_stub)


@pytest_asyncio.fixture
async def client(db: AsyncSession, car_service: CarService) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션과 차량 서비스를 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_car_service] = lambda: car_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
def car_payload(**overrides) -> dict:
    """차량 생성 요청 본문을 만듭니다."""
    payload = {
        "condition": "USED",
        "details": {
            "body": "sedan",
            "model": "Impala",
            "manufacturer": {"name": "Chevrolet"},
            "number_of_doors": 4,
            "fuel_type": "Gasoline",
            "engine": "3.6L V6",
            "mileage": 32280,
            "model_year": 2018,
            "production_year": 2018,
            "external_color": "white",
        },
        "location": {"lat": 40.730610, "lon": -73.935242},
    }
    payload.update(overrides)
    return payload


@pytest_asyncio.fixture
async def manufacturer(db: AsyncSession):
    """테스트 제조사를 생성합니다."""
    from app.models.vehicle import Manufacturer
    m = Manufacturer(name="Audi")
    db.add(m)
    await db.flush()
    await db.refresh(m)
    return m


@pytest_asyncio.fixture
async def car(db: AsyncSession, manufacturer):
    """테스트 차량(USED)을 생성합니다."""
    from app.models.vehicle import Car
    c = Car(
        condition="USED",
        body="sedan",
        model="A4",
        number_of_doors=4,
        lat=40.730610,
        lon=-73.935242,
        manufacturer=manufacturer,
    )
    db.add(c)
    await db.flush()
    await db.refresh(c)
    await db.commit()
    return c
