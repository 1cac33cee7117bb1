"""초기 데이터 시드 스크립트 — 테이블 생성 및 기본 제조사 등록.

Seed script — Creates the vehicles tables and the default manufacturers.
Run this script once to bootstrap a fresh database.

Usage:
    python -m app.seed

Creates:
    - 5개 제조사: Audi, Chevrolet, Ford, BMW, Dodge (5 manufacturers)
"""

import asyncio

from app.database import async_session, engine, Base
from app.models import Manufacturer
from app.repositories.manufacturer_repository import manufacturer_repository

# 기본 제조사 목록 — Default manufacturer names
DEFAULT_MANUFACTURERS: tuple[str, ...] = ("Audi", "Chevrolet", "Ford", "BMW", "Dodge")


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Seed the database with initial data.
    Creates tables if they don't exist, then inserts any missing default
    manufacturer.

    Idempotent: 이미 존재하는 제조사는 건너뜁니다 (Existing manufacturers are skipped).
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        created: int = 0
        for name in DEFAULT_MANUFACTURERS:
            existing: Manufacturer | None = await manufacturer_repository.get_by_name(db, name)
            if existing is None:
                await manufacturer_repository.create(db, {"name": name})
                created += 1
        await db.commit()

    print(f"Seed complete: {created} manufacturer(s) created.")


if __name__ == "__main__":
    asyncio.run(seed())
