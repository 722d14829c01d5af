"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import delete, func, insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from tavern.domain.model import User
from tavern.domain.repository import UserRepository
from tavern.domain.value import UserId
from tavern.domain.value.types import Username
from tavern.persistence.mappers import (
    row_to_user,
    user_to_dict,
    user_to_invitation_rows,
    user_to_membership_rows,
)
from tavern.persistence.tables import (
    guild_memberships_table,
    invitations_table,
    users_table,
)


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _load(self, stmt) -> Optional[User]:
        """Run a users query and assemble the first match with its children."""
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None

        memberships = await self.session.execute(
            select(guild_memberships_table)
            .where(guild_memberships_table.c.user_id == row["id"])
            .order_by(guild_memberships_table.c.position)
        )
        invitations = await self.session.execute(
            select(invitations_table)
            .where(invitations_table.c.user_id == row["id"])
            .order_by(invitations_table.c.position)
        )
        return row_to_user(
            dict(row),
            [dict(m) for m in memberships.mappings().all()],
            [dict(i) for i in invitations.mappings().all()],
        )

    async def find_by_id(
        self, user_id: UserId, for_update: bool = False
    ) -> Optional[User]:
        """Find a user by ID, optionally locking the row."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        if for_update:
            stmt = stmt.with_for_update()
        return await self._load(stmt)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username (case-insensitive)."""
        stmt = select(users_table).where(
            func.lower(users_table.c.username) == username.root.lower()
        )
        return await self._load(stmt)

    async def find_by_email(
        self, email: str, for_update: bool = False
    ) -> Optional[User]:
        """Find a user by email (case-insensitive), optionally locking the row."""
        stmt = select(users_table).where(
            func.lower(users_table.c.email) == email.lower()
        )
        if for_update:
            stmt = stmt.with_for_update()
        return await self._load(stmt)

    async def save(self, user: User) -> User:
        """Upsert the user row and replace its memberships and invitations.

        Raises:
            IntegrityError: If the user holds two invitations to one group
        """
        user_dict = user_to_dict(user)
        upsert = pg_insert(users_table).values(**user_dict)
        upsert = upsert.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={k: v for k, v in user_dict.items() if k != "id"},
        )
        await self.session.execute(upsert)

        await self.session.execute(
            delete(guild_memberships_table).where(
                guild_memberships_table.c.user_id == user.id
            )
        )
        membership_rows = user_to_membership_rows(user)
        if membership_rows:
            await self.session.execute(
                insert(guild_memberships_table), membership_rows
            )

        await self.session.execute(
            delete(invitations_table).where(invitations_table.c.user_id == user.id)
        )
        invitation_rows = user_to_invitation_rows(user)
        if invitation_rows:
            await self.session.execute(insert(invitations_table), invitation_rows)

        await self.session.flush()
        return user
