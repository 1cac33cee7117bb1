"""제조사 레포지토리 — 제조사 조회 및 생성.

Manufacturer Repository — Lookup and creation of manufacturers.
Extends BaseRepository with a lookup by unique name.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.vehicle import Manufacturer
from app.repositories.base import BaseRepository


class ManufacturerRepository(BaseRepository[Manufacturer]):
    """제조사 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the manufacturers table.
    """

    def __init__(self) -> None:
        """ManufacturerRepository를 초기화합니다.

        Initialize the repository keyed by the generated manufacturer code.
        """
        super().__init__(Manufacturer, Manufacturer.code)

    async def get_by_code(
        self,
        db: AsyncSession,
        code: int,
    ) -> Manufacturer | None:
        """코드로 제조사를 조회합니다 — Retrieve a manufacturer by its code."""
        return await self.get_by_id(db, code)

    async def get_by_name(
        self,
        db: AsyncSession,
        name: str,
    ) -> Manufacturer | None:
        """이름으로 제조사를 조회합니다.

        Retrieve a manufacturer by its unique name.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            name: 제조사 이름 (Manufacturer name)

        Returns:
            Manufacturer | None: 조회된 제조사 또는 None (Found manufacturer or None)
        """
        query: Select = select(Manufacturer).where(Manufacturer.name == name)
        result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
manufacturer_repository: ManufacturerRepository = ManufacturerRepository()
