"""가격 서비스 데이터베이스 설정 모듈.

Pricing service database configuration.
Uses its own engine, session factory and declarative base so price records
live apart from the vehicles schema.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import settings
from app.database import build_engine

# 가격 DB 엔진 — Pricing database engine
pricing_engine: AsyncEngine = build_engine(settings.PRICING_DATABASE_URL, echo=settings.DEBUG)

# 가격 DB 세션 팩토리 — Pricing session factory
pricing_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    pricing_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class PricingBase(DeclarativeBase):
    """가격 서비스 ORM 베이스 클래스 — Declarative base for pricing models."""

    pass


async def get_pricing_db() -> AsyncGenerator[AsyncSession, None]:
    """가격 DB 세션을 생성하고 요청 종료 시 닫습니다.

    FastAPI dependency that yields a pricing database session.
    """
    async with pricing_session() as session:
        try:
            yield session
        finally:
            await session.close()
