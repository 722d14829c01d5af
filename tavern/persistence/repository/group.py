"""PostgreSQL implementation of Group repository."""

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from tavern.domain.model import Group
from tavern.domain.repository import GroupRepository
from tavern.domain.value import GroupId
from tavern.persistence.mappers import group_to_dict, row_to_group
from tavern.persistence.tables import groups_table


class PostgresGroupRepository(GroupRepository):
    """PostgreSQL implementation of GroupRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        """Find a group by ID."""
        stmt = select(groups_table).where(groups_table.c.id == group_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_group(dict(row)) if row else None

    async def save(self, group: Group) -> Group:
        """Save a group (create or update)."""
        group_dict = group_to_dict(group)
        stmt = pg_insert(groups_table).values(**group_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[groups_table.c.id],
            set_={k: v for k, v in group_dict.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return group

    async def increment_member_count(self, group_id: GroupId) -> None:
        """Atomically increment the member count by 1."""
        stmt = (
            update(groups_table)
            .where(groups_table.c.id == group_id)
            .values(member_count=groups_table.c.member_count + 1)
        )
        await self.session.execute(stmt)
