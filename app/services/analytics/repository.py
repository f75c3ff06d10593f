# ============================================================================
# Analytics Data Access
# ============================================================================
"""
Read-only query layer used by the analytics services.

Every call opens its own session from the factory, so independent calls
can be awaited concurrently (an AsyncSession must not be shared between
concurrent tasks).
"""
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Sequence
import logging

from sqlalchemy import Select, func, select
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from app.core.exceptions import DataAccessFailure

logger = logging.getLogger(__name__)


class AnalyticsRepository:
    """count / find / grouped-aggregate access over the database"""

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    async def _execute(self, operation: str, stmt, consume: Callable[[Result], Any]) -> Any:
        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                return consume(result)
        except SQLAlchemyError as e:
            logger.error(f"Analytics query failed ({operation}): {e}")
            raise DataAccessFailure(operation, str(e)) from e

    # =========================================================================
    # Counting
    # =========================================================================
    async def count(self, model, *criteria) -> int:
        """Number of rows of `model` matching every criterion"""
        stmt = select(func.count()).select_from(model)
        if criteria:
            stmt = stmt.where(*criteria)
        total = await self._execute(f"count {model.__tablename__}", stmt, Result.scalar)
        return total or 0

    async def count_distinct(self, column, *criteria) -> int:
        stmt = select(func.count(func.distinct(column)))
        if criteria:
            stmt = stmt.where(*criteria)
        total = await self._execute(f"count distinct {column.key}", stmt, Result.scalar)
        return total or 0

    # =========================================================================
    # Row Access
    # =========================================================================
    async def find(
        self,
        *columns,
        where: Sequence = (),
        order_by: Sequence = (),
        offset: Optional[int] = None,
        limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """Projected rows as plain dicts keyed by column name"""
        stmt = select(*columns)
        if where:
            stmt = stmt.where(*where)
        if order_by:
            stmt = stmt.order_by(*order_by)
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return await self.fetch(stmt)

    async def fetch(self, stmt: Select) -> List[Dict[str, Any]]:
        """Run a prepared select (joins included) and return dict rows"""
        return await self._execute(
            "fetch",
            stmt,
            lambda result: [dict(row) for row in result.mappings().all()],
        )

    async def timestamps_between(
        self,
        column,
        start: datetime,
        end: datetime,
        *criteria
    ) -> List[datetime]:
        """Values of a timestamp column within [start, end]"""
        stmt = select(column).where(column >= start, column <= end, *criteria)
        return await self._execute(
            f"timestamps {column.key}",
            stmt,
            lambda result: list(result.scalars().all()),
        )

    # =========================================================================
    # Aggregation
    # =========================================================================
    async def group_count(self, column, *criteria) -> Dict[Any, int]:
        """Row count per distinct value of `column`"""
        stmt = select(column, func.count().label("count")).group_by(column)
        if criteria:
            stmt = stmt.where(*criteria)
        return await self._execute(
            f"group by {column.key}",
            stmt,
            lambda result: {row[0]: row[1] for row in result.all()},
        )
