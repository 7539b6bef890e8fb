from typing import List, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from stuff_manager.domain.exceptions import RepositoryError
from stuff_manager.domain.models.stuff import Stuff as DomainStuff
from stuff_manager.domain.ports.repositories.stuff_repository import StuffRepository
from stuff_manager.infrastructure.persistence.models import Stuff as SQLStuff

# OFFSET is a signed 64-bit integer in both PostgreSQL and SQLite.
MAX_STORE_OFFSET = 2**63 - 1


class SQLAlchemyStuffRepository(StuffRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_stuff: SQLStuff) -> DomainStuff:
        return DomainStuff(
            id=sql_stuff.id,
            name=sql_stuff.name,
            description=sql_stuff.description or "",
        )

    async def get_page(self, offset: int = 0, limit: int = 10) -> List[DomainStuff]:
        if offset > MAX_STORE_OFFSET:
            # no table can hold that many rows
            return []

        query = select(SQLStuff).order_by(SQLStuff.id).offset(offset).limit(limit)
        try:
            result = await self.session.execute(query)
        except (SQLAlchemyError, OverflowError) as e:
            raise RepositoryError(f"Failed to read stuff (offset={offset}, limit={limit}): {e}") from e
        return [self._to_domain(stuff) for stuff in result.scalars().all()]

    async def add_many(self, items: Sequence[DomainStuff]) -> List[DomainStuff]:
        sql_items = [SQLStuff(name=item.name, description=item.description) for item in items]
        self.session.add_all(sql_items)
        await self.session.commit()
        for sql_stuff in sql_items:
            await self.session.refresh(sql_stuff)
        return [self._to_domain(sql_stuff) for sql_stuff in sql_items]
