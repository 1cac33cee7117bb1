"""가격 조회 클라이언트 — 가격 서비스 HTTP 호출.

Price lookup client — Calls the pricing service over HTTP.
Failures are logged and re-raised as httpx errors; there is no retry
and no fallback price.
"""

import logging

import httpx

from app.config import settings

logger = logging.getLogger(__name__)


class PriceClient:
    """차량 ID로 가격 문자열을 조회하는 클라이언트.

    Client that fetches a formatted price for a vehicle id.

    Attributes:
        base_url: 가격 서비스 기본 URL (Pricing service base URL)
        timeout: 요청 타임아웃(초) (Request timeout in seconds)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url: str = base_url or settings.PRICING_SERVICE_URL
        self.timeout: float = timeout if timeout is not None else settings.CLIENT_TIMEOUT_SECONDS
        self._transport = transport

    async def get_price(self, vehicle_id: int) -> str:
        """차량 가격을 "<통화> <금액>" 형식으로 반환합니다.

        Return the vehicle's price formatted as "<currency> <price>",
        e.g. "USD 12345.67".

        Args:
            vehicle_id: 차량 ID (Vehicle id)

        Returns:
            str: 형식화된 가격 (Formatted price)

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
                response = await client.get("/services/price", params={"vehicleId": vehicle_id})
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Price lookup failed for vehicle %s: %s", vehicle_id, e)
            raise

        try:
            data = response.json()
            return f"{data['currency']} {data['price']}"
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Malformed price response for vehicle %s: %s", vehicle_id, e)
            raise httpx.DecodingError(
                f"Malformed price response for vehicle {vehicle_id}", request=response.request
            ) from e


# 싱글턴 인스턴스 — Singleton instance
price_client: PriceClient = PriceClient()
