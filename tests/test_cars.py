"""차량 CRUD API 테스트.

Car CRUD API tests — Create, Read, Update, Delete car endpoints,
validation, and translation of upstream failures.
"""

import httpx
from httpx import AsyncClient

from app.repositories.car_repository import car_repository
from app.repositories.manufacturer_repository import manufacturer_repository
from app.services.car_service import CarService
from app.services.maps_client import MapsClient
from app.services.price_client import PriceClient
from tests.conftest import car_payload

URL = "/api/v1/cars/"


class TestCarCreate:
    """차량 생성 테스트."""

    async def test_create_car(self, client: AsyncClient):
        """차량 생성 성공."""
        res = await client.post(URL, json=car_payload())
        assert res.status_code == 201
        data = res.json()
        assert data["id"] is not None
        assert data["condition"] == "USED"
        assert data["details"]["model"] == "Impala"
        assert data["details"]["manufacturer"]["name"] == "Chevrolet"
        assert data["details"]["manufacturer"]["code"] is not None
        assert data["price"] is None

    async def test_create_ignores_body_id(self, client: AsyncClient, car):
        """POST 본문의 id는 무시되고 새 차량이 생성됨."""
        res = await client.post(URL, json=car_payload(id=car.id))
        assert res.status_code == 201
        assert res.json()["id"] != car.id

    async def test_create_invalid_condition(self, client: AsyncClient):
        """잘못된 차량 상태는 422."""
        res = await client.post(URL, json=car_payload(condition="BROKEN"))
        assert res.status_code == 422

    async def test_create_missing_location(self, client: AsyncClient):
        """위치 누락 시 422."""
        payload = car_payload()
        del payload["location"]
        res = await client.post(URL, json=payload)
        assert res.status_code == 422


class TestCarRead:
    """차량 조회 테스트."""

    async def test_list_cars(self, client: AsyncClient, car):
        """차량 목록 조회 — 가격/주소 없음."""
        res = await client.get(URL)
        assert res.status_code == 200
        data = res.json()
        assert len(data) == 1
        assert data[0]["id"] == car.id
        assert data[0]["price"] is None
        assert data[0]["location"]["address"] is None

    async def test_get_car(self, client: AsyncClient, car):
        """차량 상세 조회 — 가격/주소 포함."""
        res = await client.get(f"{URL}{car.id}")
        assert res.status_code == 200
        data = res.json()
        assert data["id"] == car.id
        assert data["details"]["manufacturer"]["name"] == "Audi"
        assert data["price"] == "USD 12345.67"
        assert data["location"]["address"] == "777 Brockton Avenue"
        assert data["location"]["lat"] == car.lat

    async def test_get_nonexistent_car(self, client: AsyncClient):
        """존재하지 않는 차량 조회 시 404."""
        res = await client.get(f"{URL}999")
        assert res.status_code == 404
        assert res.json()["detail"] == "Car not found"


class TestCarUpdate:
    """차량 수정 테스트."""

    async def test_update_car(self, client: AsyncClient, car):
        """차량 상태/위치 수정."""
        res = await client.put(
            f"{URL}{car.id}",
            json=car_payload(condition="NEW", location={"lat": 1.0, "lon": 2.0}),
        )
        assert res.status_code == 200
        data = res.json()
        assert data["id"] == car.id
        assert data["condition"] == "NEW"
        assert data["location"]["lat"] == 1.0

    async def test_update_uses_path_id(self, client: AsyncClient, car):
        """본문의 id보다 경로의 id가 우선."""
        res = await client.put(f"{URL}{car.id}", json=car_payload(id=12345))
        assert res.status_code == 200
        assert res.json()["id"] == car.id

    async def test_update_nonexistent_car(self, client: AsyncClient):
        """존재하지 않는 차량 수정 시 404."""
        res = await client.put(f"{URL}999", json=car_payload())
        assert res.status_code == 404


class TestCarDelete:
    """차량 삭제 테스트."""

    async def test_delete_car(self, client: AsyncClient, car):
        """차량 삭제 성공."""
        res = await client.delete(f"{URL}{car.id}")
        assert res.status_code == 204

        # 삭제 후 조회 시 404
        res2 = await client.get(f"{URL}{car.id}")
        assert res2.status_code == 404

    async def test_delete_nonexistent_car(self, client: AsyncClient):
        """존재하지 않는 차량 삭제 시 404."""
        res = await client.delete(f"{URL}999")
        assert res.status_code == 404


class TestUpstreamFailure:
    """외부 서비스 실패 테스트."""

    async def test_pricing_down_returns_502(self, client: AsyncClient, car, car_service: CarService):
        """가격 서비스 오류 시 502."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        car_service.price_client = PriceClient(
            base_url="http://pricing", transport=httpx.MockTransport(handler)
        )
        res = await client.get(f"{URL}{car.id}")
        assert res.status_code == 502
        assert res.json()["detail"] == "Upstream service unavailable"

    async def test_maps_unreachable_returns_502(self, client: AsyncClient, car, car_service: CarService):
        """지도 서비스 연결 실패 시 502."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        car_service.maps_client = MapsClient(
            base_url="http://maps", transport=httpx.MockTransport(handler)
        )
        res = await client.get(f"{URL}{car.id}")
        assert res.status_code == 502

    async def test_pricing_html_body_returns_502(self, client: AsyncClient, car, car_service: CarService):
        """가격 서비스가 200으로 HTML을 반환하면 502."""
        car_service.price_client = PriceClient(
            base_url="http://pricing",
            transport=httpx.MockTransport(lambda r: httpx.Response(200, text="<html>oops</html>")),
        )
        res = await client.get(f"{URL}{car.id}")
        assert res.status_code == 502
        assert res.json()["detail"] == "Upstream service unavailable"

    async def test_list_unaffected_by_upstream(self, client: AsyncClient, car):
        """목록 조회는 외부 서비스를 호출하지 않음."""
        failing = CarService(
            car_repository,
            manufacturer_repository,
            PriceClient(base_url="http://pricing", transport=httpx.MockTransport(lambda r: httpx.Response(500))),
            MapsClient(base_url="http://maps", transport=httpx.MockTransport(lambda r: httpx.Response(500))),
        )
        from app.api.deps import get_car_service
        from app.main import app

        app.dependency_overrides[get_car_service] = lambda: failing
        res = await client.get(URL)
        assert res.status_code == 200
        assert len(res.json()) == 1


async def test_health(client: AsyncClient):
    """헬스 체크."""
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}
