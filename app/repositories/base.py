"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides generic Create, Read, Save, Delete operations keyed by the
model's integer primary key.

Usage:
    class ManufacturerRepository(BaseRepository[Manufacturer]):
        def __init__(self) -> None:
            super().__init__(Manufacturer, Manufacturer.code)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import DeclarativeBase, InstrumentedAttribute

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=DeclarativeBase)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.
    Repositories only flush; the caller owns the transaction and commits.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
        pk: 기본 키 컬럼 (Primary key column used for lookups)
    """

    def __init__(self, model: type[ModelType], pk: InstrumentedAttribute) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class and its key column.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
            pk: 조회에 사용할 기본 키 컬럼 (Primary key column for lookups)
        """
        self.model: type[ModelType] = model
        self.pk: InstrumentedAttribute = pk

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드의 ID (Primary key of the record)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = select(self.model).where(self.pk == record_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_all(self, db: AsyncSession) -> Sequence[ModelType]:
        """모든 레코드를 기본 키 순으로 조회합니다.

        Retrieve all records ordered by primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록 (List of records)
        """
        query: Select = select(self.model).order_by(self.pk)
        result = await db.execute(query)
        return result.scalars().all()

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """새 레코드를 생성합니다.

        Create a new record in the database.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 데이터 딕셔너리
                      (Dictionary of data for the new record)

        Returns:
            ModelType: 생성된 레코드, 키가 채워짐 (The created record with its key assigned)
        """
        db_obj: ModelType = self.model(**obj_data)
        return await self.save(db, db_obj)

    async def save(
        self,
        db: AsyncSession,
        db_obj: ModelType,
    ) -> ModelType:
        """새 레코드 또는 변경된 레코드를 저장합니다.

        Persist a new or modified record and reload server-side values.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            db_obj: 저장할 모델 인스턴스 (Model instance to persist)

        Returns:
            ModelType: 저장된 레코드 (The persisted record)
        """
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def delete(
        self,
        db: AsyncSession,
        db_obj: ModelType,
    ) -> None:
        """레코드를 삭제합니다.

        Delete a loaded record.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            db_obj: 삭제할 모델 인스턴스 (Model instance to delete)
        """
        await db.delete(db_obj)
        await db.flush()

    async def count(self, db: AsyncSession) -> int:
        """전체 레코드 수를 반환합니다 — Return the total number of records."""
        query: Select = select(func.count()).select_from(self.model)
        return (await db.execute(query)).scalar() or 0
