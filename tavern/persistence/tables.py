"""SQLAlchemy table definitions for Tavern.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    func,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("username", String(40), nullable=False),
    Column("email", String(255), nullable=True),
    Column("balance", Integer, nullable=False, server_default="0"),
    # The one party the user is in (guild memberships have their own table)
    Column("party_id", UUID, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("balance >= 0", name="ck_users_balance_non_negative"),
)

Index("uq_users_username_lower", func.lower(users_table.c.username), unique=True)
Index("uq_users_email_lower", func.lower(users_table.c.email), unique=True)

# ============================================================================
# GROUPS TABLE
# ============================================================================
groups_table = Table(
    "groups",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(255), nullable=False),
    Column("type", String(20), nullable=False),  # 'guild', 'party'
    Column("privacy", String(20), nullable=False),  # 'public', 'private'
    Column("leader_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("member_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("type IN ('guild', 'party')", name="ck_groups_type"),
    CheckConstraint("privacy IN ('public', 'private')", name="ck_groups_privacy"),
)

# ============================================================================
# GUILD MEMBERSHIPS TABLE
# ============================================================================
guild_memberships_table = Table(
    "guild_memberships",
    metadata,
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "group_id", UUID, ForeignKey("groups.id", ondelete="CASCADE"), nullable=False
    ),
    Column("position", Integer, nullable=False),
    PrimaryKeyConstraint("user_id", "group_id", name="pk_guild_memberships"),
)

# ============================================================================
# INVITATIONS TABLE
# ============================================================================
# One row per pending invitation; the primary key enforces at most one
# invitation per user and group.
invitations_table = Table(
    "invitations",
    metadata,
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "group_id", UUID, ForeignKey("groups.id", ondelete="CASCADE"), nullable=False
    ),
    Column("group_type", String(20), nullable=False),
    Column("group_name", String(255), nullable=False),
    Column("inviter_id", UUID, nullable=False),
    Column("position", Integer, nullable=False),
    PrimaryKeyConstraint("user_id", "group_id", name="pk_invitations"),
)

Index("idx_invitations_group_id", invitations_table.c.group_id)
