"""지도 서비스 FastAPI 엔트리포인트.

Maps service entry point.

Run:
    uvicorn app.maps.main:app --port 9191
"""

from typing import Annotated

from fastapi import FastAPI, Query

from app.maps.service import AddressResponse, maps_service
from app.middleware.axiom_logging import AxiomLoggingMiddleware

app: FastAPI = FastAPI(title="Maps Service", version="1.0.0")

app.add_middleware(AxiomLoggingMiddleware, service_name="maps-service")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트 — Health check endpoint."""
    return {"status": "ok"}


@app.get("/maps", response_model=AddressResponse, tags=["Maps"])
async def get_address(
    lat: Annotated[float, Query(ge=-90, le=90)],
    lon: Annotated[float, Query(ge=-180, le=180)],
) -> AddressResponse:
    """좌표에 대한 주소를 조회합니다.

    Return a street address for the given coordinates.
    """
    return maps_service.get_address(lat, lon)
