"""Axiom 로깅 미들웨어 테스트.

Axiom logging middleware tests — Event contents, masking, skipped paths,
and ingestion off the event loop thread.
"""

import threading
from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.middleware import axiom_logging
from app.middleware.axiom_logging import AxiomLoggingMiddleware
from app.utils.exceptions import NotFoundError


class RecordingAxiomClient:
    """수집 이벤트와 호출 스레드를 기록하는 Axiom 클라이언트 대체."""

    def __init__(self, token: str) -> None:
        self.token = token
        self.events: list[dict[str, Any]] = []
        self.datasets: list[str] = []
        self.threads: list[int] = []
        recorders.append(self)

    def ingest_events(self, dataset: str, events: list[dict[str, Any]]) -> None:
        self.datasets.append(dataset)
        self.events.extend(events)
        self.threads.append(threading.get_ident())


recorders: list[RecordingAxiomClient] = []


@pytest_asyncio.fixture
async def logged_client(monkeypatch: pytest.MonkeyPatch) -> AsyncGenerator[AsyncClient, None]:
    """Axiom이 설정된 작은 앱의 테스트 클라이언트."""
    recorders.clear()
    monkeypatch.setattr(axiom_logging.settings, "AXIOM_API_TOKEN", "test-token")
    monkeypatch.setattr(axiom_logging.settings, "AXIOM_DATASET", "test-dataset")
    monkeypatch.setattr(axiom_logging, "AxiomClient", RecordingAxiomClient)

    app = FastAPI()
    app.add_middleware(AxiomLoggingMiddleware, service_name="test-service")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/items/{item_id}")
    async def read_item(item_id: int) -> dict[str, int]:
        if item_id == 404:
            raise NotFoundError("Item not found")
        return {"id": item_id}

    @app.post("/items")
    async def create_item(payload: dict[str, Any]) -> dict[str, Any]:
        return payload

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class TestAxiomLogging:
    """요청 이벤트 로깅 테스트."""

    async def test_logs_one_event_per_request(self, logged_client: AsyncClient):
        """요청마다 서비스 이름이 붙은 이벤트 1건."""
        res = await logged_client.get("/items/7", params={"q": "x"})
        assert res.status_code == 200

        [recorder] = recorders
        assert recorder.datasets == ["test-dataset"]
        [event] = recorder.events
        assert event["service"] == "test-service"
        assert event["method"] == "GET"
        assert event["path"] == "/items/7"
        assert event["status_code"] == 200
        assert event["query_params"] == {"q": "x"}
        assert "duration_ms" in event

    async def test_error_detail_captured(self, logged_client: AsyncClient):
        """에러 응답의 detail을 기록하고 응답 본문은 유지."""
        res = await logged_client.get("/items/404")
        assert res.status_code == 404
        assert res.json() == {"detail": "Item not found"}

        [event] = recorders[0].events
        assert event["status_code"] == 404
        assert event["error"] == "Item not found"

    async def test_sensitive_body_fields_masked(self, logged_client: AsyncClient):
        """요청 본문의 민감 필드는 마스킹."""
        res = await logged_client.post("/items", json={"name": "a", "api_key": "secret-value"})
        assert res.status_code == 200

        [event] = recorders[0].events
        assert event["request_body"] == {"name": "a", "api_key": "***"}

    async def test_health_not_logged(self, logged_client: AsyncClient):
        """헬스 체크는 로깅하지 않음."""
        res = await logged_client.get("/health")
        assert res.status_code == 200
        assert all(not r.events for r in recorders)

    async def test_ingest_runs_off_event_loop_thread(self, logged_client: AsyncClient):
        """수집 호출은 이벤트 루프 스레드를 막지 않음."""
        await logged_client.get("/items/1")
        [thread_id] = recorders[0].threads
        assert thread_id != threading.get_ident()
