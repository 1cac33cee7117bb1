"""위치 조회 클라이언트 — 지도 서비스 HTTP 호출.

Location lookup client — Calls the maps service to turn coordinates into
a street address. Errors propagate to the caller after being logged.
"""

import logging

import httpx

from app.config import settings
from app.schemas.vehicle import LocationSchema

logger = logging.getLogger(__name__)


class MapsClient:
    """좌표로 주소를 조회하는 클라이언트 — Client resolving coordinates to an address."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url: str = base_url or settings.MAPS_SERVICE_URL
        self.timeout: float = timeout if timeout is not None else settings.CLIENT_TIMEOUT_SECONDS
        self._transport = transport

    async def get_address(self, location: LocationSchema) -> LocationSchema:
        """주소 필드가 채워진 위치 사본을 반환합니다.

        Return a copy of the location with address, city, state and zip
        filled in from the maps service. The input is not modified.

        Raises:
            httpx.HTTPError: 연결 실패, 2xx 이외 응답 또는 잘못된 응답 본문
                             (Transport failure, non-2xx response or malformed body)
        """
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(
                    "/maps", params={"lat": location.lat, "lon": location.lon}
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(
                "Address lookup failed for (%s, %s): %s", location.lat, location.lon, e
            )
            raise

        try:
            data = response.json()
            fields = {key: data[key] for key in ("address", "city", "state", "zip")}
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(
                "Malformed address response for (%s, %s): %s", location.lat, location.lon, e
            )
            raise httpx.DecodingError(
                f"Malformed address response for ({location.lat}, {location.lon})",
                request=response.request,
            ) from e

        return location.model_copy(update=fields)


# 싱글턴 인스턴스 — Singleton instance
maps_client: MapsClient = MapsClient()
