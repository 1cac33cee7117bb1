"""차량 Pydantic 요청/응답 스키마 정의.

Vehicle Pydantic request/response schema definitions.
Covers cars, their details, location, and manufacturer reference.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class Condition(str, Enum):
    """차량 상태 — Vehicle condition."""

    NEW = "NEW"
    USED = "USED"


class ManufacturerSchema(BaseModel):
    """제조사 참조 스키마.

    Manufacturer reference schema.
    A missing code means the manufacturer is looked up (or created) by name.

    Attributes:
        code: 제조사 코드 (Manufacturer code, None until persisted)
        name: 제조사 이름 (Manufacturer name)
    """

    code: int | None = None  # 제조사 코드 — 없으면 이름으로 조회/생성
    name: str = Field(min_length=1, max_length=255)  # 제조사 이름 (Manufacturer name)


class LocationSchema(BaseModel):
    """위치 스키마 — 좌표 + 파생 주소 필드.

    Location schema. Only lat/lon are stored; address, city, state and zip
    are filled in by the maps service on single-car reads.
    """

    lat: float  # 위도 (Latitude)
    lon: float  # 경도 (Longitude)
    address: str | None = None  # 도로명 주소 (Street address, derived)
    city: str | None = None  # 도시 (City, derived)
    state: str | None = None  # 주 (State, derived)
    zip: str | None = None  # 우편번호 (Postal code, derived)


class DetailsSchema(BaseModel):
    """차량 상세 스키마.

    Vehicle details schema.

    Attributes:
        body: 차체 유형 (Body type, e.g. "sedan")
        model: 모델명 (Model name)
        manufacturer: 제조사 참조 (Manufacturer reference)
    """

    body: str = Field(min_length=1, max_length=100)
    model: str = Field(min_length=1, max_length=100)
    manufacturer: ManufacturerSchema
    number_of_doors: int | None = None
    fuel_type: str | None = None
    engine: str | None = None
    mileage: int | None = None
    model_year: int | None = None
    production_year: int | None = None
    external_color: str | None = None


class CarRequest(BaseModel):
    """차량 생성/수정 요청 스키마.

    Car create/update request schema.
    A present id selects the update path in the car service.

    Attributes:
        id: 차량 ID (Car id, None for creation)
        condition: 차량 상태 (Vehicle condition)
        details: 차량 상세 (Vehicle details)
        location: 위치 (Location; only lat/lon are persisted)
    """

    id: int | None = None
    condition: Condition
    details: DetailsSchema
    location: LocationSchema


class CarResponse(BaseModel):
    """차량 응답 스키마.

    Car response schema. price and the address fields of location are only
    populated on single-car reads.
    """

    id: int  # 차량 ID (Car id)
    condition: Condition  # 차량 상태 (Vehicle condition)
    details: DetailsSchema  # 차량 상세 (Vehicle details)
    location: LocationSchema  # 위치 (Location)
    price: str | None = None  # 가격 문자열, 예: "USD 12345.67" (Formatted price, derived)
    created_at: datetime  # 생성 일시 (Creation timestamp)
    updated_at: datetime  # 수정 일시 (Last update timestamp)
