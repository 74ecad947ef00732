from __future__ import annotations

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from models.grape import Grape, GrapeCreate, GrapeRead
from services.results import OperationResult

logger = logging.getLogger(__name__)


class GrapeNotFoundError(LookupError):
    """Raised when a grape id has no matching row."""

    def __init__(self, grape_id: int):
        super().__init__(f"Grape {grape_id} not found")
        self.grape_id = grape_id


class GrapeService:
    """
    Storage for grapes.
    Opens one session per call; every method returns an OperationResult.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def add_grape(self, grape: GrapeCreate) -> OperationResult[GrapeRead]:
        async with self._session_factory() as db:
            try:
                row = Grape(name=grape.name, color=grape.color)
                # 0 means "not set"; let the database assign the key
                if grape.id:
                    row.id = grape.id

                db.add(row)
                await db.commit()
                await db.refresh(row)

            except Exception as e:
                await db.rollback()
                return OperationResult.failure(e)

        logger.debug("Stored grape id=%s", row.id)
        return OperationResult.success(GrapeRead.model_validate(row))

    async def get_grapes(self) -> OperationResult[List[GrapeRead]]:
        async with self._session_factory() as db:
            try:
                result = await db.execute(select(Grape).order_by(Grape.id))
                grapes = result.scalars().all()
            except Exception as e:
                return OperationResult.failure(e)

        return OperationResult.success([GrapeRead.model_validate(g) for g in grapes])

    async def delete_grape(self, grape_id: int) -> OperationResult[None]:
        async with self._session_factory() as db:
            try:
                grape = await db.get(Grape, grape_id)
                if grape is None:
                    return OperationResult.failure(GrapeNotFoundError(grape_id))

                await db.delete(grape)
                await db.commit()

            except Exception as e:
                await db.rollback()
                return OperationResult.failure(e)

        return OperationResult.success()
