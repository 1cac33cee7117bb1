"""차량 라우터 — 차량 CRUD 엔드포인트.

Car Router — CRUD endpoints for the vehicle catalog.
Mutating endpoints commit the request session after the service returns.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_car_service
from app.database import get_db
from app.schemas.vehicle import CarRequest, CarResponse
from app.services.car_service import CarService

router: APIRouter = APIRouter()


@router.get("/", response_model=list[CarResponse])
async def list_cars(
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[CarService, Depends(get_car_service)],
) -> list[CarResponse]:
    """차량 목록을 조회합니다.

    List all cars (no price or address).
    """
    return await service.list_cars(db)


@router.get("/{car_id}", response_model=CarResponse)
async def get_car(
    car_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[CarService, Depends(get_car_service)],
) -> CarResponse:
    """차량 상세 정보를 조회합니다 (가격/주소 포함).

    Retrieve a car with its current price and address.
    """
    return await service.get_car(db, car_id)


@router.post("/", response_model=CarResponse, status_code=201)
async def create_car(
    data: CarRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[CarService, Depends(get_car_service)],
) -> CarResponse:
    """새 차량을 등록합니다.

    Create a new car. An id in the body is ignored.
    """
    result: CarResponse = await service.save_car(db, data.model_copy(update={"id": None}))
    await db.commit()
    return result


@router.put("/{car_id}", response_model=CarResponse)
async def update_car(
    car_id: int,
    data: CarRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[CarService, Depends(get_car_service)],
) -> CarResponse:
    """차량 정보를 수정합니다.

    Update an existing car; the id comes from the path.
    """
    result: CarResponse = await service.save_car(db, data.model_copy(update={"id": car_id}))
    await db.commit()
    return result


@router.delete("/{car_id}", status_code=204)
async def delete_car(
    car_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[CarService, Depends(get_car_service)],
) -> None:
    """차량을 삭제합니다.

    Delete a car by its id.
    """
    await service.delete_car(db, car_id)
    await db.commit()
