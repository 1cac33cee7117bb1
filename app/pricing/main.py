"""가격 서비스 FastAPI 엔트리포인트.

Pricing service entry point.
Creates the price table on startup and seeds it when empty.

Run:
    uvicorn app.pricing.main:app --port 8082
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import settings
from app.middleware.axiom_logging import AxiomLoggingMiddleware
from app.pricing.database import PricingBase, pricing_engine, pricing_session
from app.pricing.router import router as pricing_router
from app.pricing.service import pricing_service


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """시작 시 테이블 생성 및 시드 — Create tables and seed prices on startup."""
    async with pricing_engine.begin() as conn:
        await conn.run_sync(PricingBase.metadata.create_all)

    async with pricing_session() as db:
        await pricing_service.seed_prices(db, settings.PRICING_SEED_COUNT)
        await db.commit()

    yield
    await pricing_engine.dispose()


app: FastAPI = FastAPI(
    title="Pricing Service",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(AxiomLoggingMiddleware, service_name="pricing-service")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트 — Health check endpoint."""
    return {"status": "ok"}


app.include_router(pricing_router, prefix="/services", tags=["Pricing"])
