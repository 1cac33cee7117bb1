"""차량 서비스 — 차량 CRUD 및 가격/주소 보강 비즈니스 로직.

Car Service — Business logic for car CRUD operations.
Creates, reads, updates and deletes cars, and enriches single-car reads
with a price from the pricing service and an address from the maps service.
Price and address are never persisted.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.vehicle import Car, Manufacturer
from app.repositories.car_repository import CarRepository, car_repository
from app.repositories.manufacturer_repository import (
    ManufacturerRepository,
    manufacturer_repository,
)
from app.schemas.vehicle import (
    CarRequest,
    CarResponse,
    DetailsSchema,
    LocationSchema,
    ManufacturerSchema,
)
from app.services.maps_client import MapsClient, maps_client
from app.services.price_client import PriceClient, price_client
from app.utils.exceptions import NotFoundError

# 요청 상세에서 차량 컬럼으로 그대로 복사되는 필드
# Detail fields copied one-to-one onto Car columns
_DETAIL_COLUMNS: tuple[str, ...] = (
    "body",
    "model",
    "number_of_doors",
    "fuel_type",
    "engine",
    "mileage",
    "model_year",
    "production_year",
    "external_color",
)


class CarService:
    """차량 관련 비즈니스 로직을 처리하는 서비스.

    Service handling car business logic.
    Stores and clients are injected through the constructor; a database
    session is passed to each call and committed by the router.

    Attributes:
        car_repository: 차량 저장소 (Car store)
        manufacturer_repository: 제조사 저장소 (Manufacturer store)
        price_client: 가격 조회 클라이언트 (Price lookup client)
        maps_client: 주소 조회 클라이언트 (Location lookup client)
    """

    def __init__(
        self,
        car_repository: CarRepository,
        manufacturer_repository: ManufacturerRepository,
        price_client: PriceClient,
        maps_client: MapsClient,
    ) -> None:
        self.car_repository = car_repository
        self.manufacturer_repository = manufacturer_repository
        self.price_client = price_client
        self.maps_client = maps_client

    def _location_of(self, car: Car) -> LocationSchema:
        """저장된 좌표만 담긴 위치 — Stored coordinates, no address fields."""
        return LocationSchema(lat=car.lat, lon=car.lon)

    def _to_response(
        self,
        car: Car,
        price: str | None = None,
        location: LocationSchema | None = None,
    ) -> CarResponse:
        """차량 모델을 응답 스키마로 변환합니다.

        Convert a Car model instance to a CarResponse schema.
        price and location override the stored values when given.

        Args:
            car: 차량 모델 (Car model instance)
            price: 보강된 가격 (Enriched price, optional)
            location: 보강된 위치 (Enriched location, optional)

        Returns:
            CarResponse: 차량 응답 (Car response)
        """
        details = DetailsSchema(
            manufacturer=ManufacturerSchema(
                code=car.manufacturer.code,
                name=car.manufacturer.name,
            ),
            **{column: getattr(car, column) for column in _DETAIL_COLUMNS},
        )
        return CarResponse(
            id=car.id,
            condition=car.condition,
            details=details,
            location=location if location is not None else self._location_of(car),
            price=price,
            created_at=car.created_at,
            updated_at=car.updated_at,
        )

    async def _resolve_manufacturer(
        self,
        db: AsyncSession,
        data: ManufacturerSchema,
    ) -> Manufacturer:
        """제조사를 확보합니다 — 코드가 없으면 이름으로 조회 후 없으면 생성.

        Ensure the referenced manufacturer exists.
        Without a code, the manufacturer is looked up by name and created when
        absent, which assigns its code. With a code, it must already exist.

        Raises:
            NotFoundError: 주어진 코드의 제조사가 없을 때 (Unknown manufacturer code)
        """
        if data.code is not None:
            manufacturer: Manufacturer | None = await self.manufacturer_repository.get_by_code(
                db, data.code
            )
            if manufacturer is None:
                raise NotFoundError("Manufacturer not found")
            return manufacturer

        manufacturer = await self.manufacturer_repository.get_by_name(db, data.name)
        if manufacturer is None:
            manufacturer = await self.manufacturer_repository.create(db, {"name": data.name})
        return manufacturer

    async def list_cars(self, db: AsyncSession) -> list[CarResponse]:
        """모든 차량 목록을 조회합니다 (가격/주소 보강 없음).

        List every persisted car without price or address enrichment.
        """
        cars = await self.car_repository.get_all(db)
        return [self._to_response(c) for c in cars]

    async def get_car(self, db: AsyncSession, car_id: int) -> CarResponse:
        """차량 상세 정보를 가격/주소와 함께 조회합니다.

        Retrieve a car and enrich it with a price and an address.
        Both values come from the external clients on every call; the stored
        record is left untouched.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            car_id: 차량 ID (Car id)

        Returns:
            CarResponse: 보강된 차량 응답 (Enriched car response)

        Raises:
            NotFoundError: 차량을 찾을 수 없을 때 (Car not found)
            httpx.HTTPError: 외부 서비스 호출 실패 시 (Upstream call failed)
        """
        car: Car | None = await self.car_repository.get_by_id(db, car_id)
        if car is None:
            raise NotFoundError("Car not found")

        price: str = await self.price_client.get_price(car.id)
        location: LocationSchema = await self.maps_client.get_address(self._location_of(car))

        return self._to_response(car, price=price, location=location)

    async def save_car(self, db: AsyncSession, data: CarRequest) -> CarResponse:
        """차량을 생성하거나 수정합니다.

        Create or update a car depending on whether data carries an id.
        The manufacturer is resolved first, then the car is either inserted
        or merged into the existing record. On update only condition, details
        and location change; id and created_at are kept.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 차량 요청 데이터 (Car request data)

        Returns:
            CarResponse: 저장된 차량 응답 (Persisted car response)

        Raises:
            NotFoundError: 수정 대상 차량 또는 제조사 코드가 없을 때
                           (Car to update or manufacturer code not found)
        """
        manufacturer: Manufacturer = await self._resolve_manufacturer(
            db, data.details.manufacturer
        )

        values: dict = {column: getattr(data.details, column) for column in _DETAIL_COLUMNS}
        values.update(
            condition=data.condition.value,
            lat=data.location.lat,
            lon=data.location.lon,
        )

        if data.id is not None:
            car: Car | None = await self.car_repository.get_by_id(db, data.id)
            if car is None:
                raise NotFoundError("Car not found")
            for field, value in values.items():
                setattr(car, field, value)
        else:
            car = Car(**values)

        car.manufacturer = manufacturer
        car = await self.car_repository.save(db, car)
        return self._to_response(car)

    async def delete_car(self, db: AsyncSession, car_id: int) -> None:
        """차량을 삭제합니다.

        Delete a car by its id.

        Raises:
            NotFoundError: 차량을 찾을 수 없을 때 (Car not found)
        """
        car: Car | None = await self.car_repository.get_by_id(db, car_id)
        if car is None:
            raise NotFoundError("Car not found")
        await self.car_repository.delete(db, car)


# 싱글턴 인스턴스 — Singleton instance
car_service: CarService = CarService(
    car_repository,
    manufacturer_repository,
    price_client,
    maps_client,
)
