"""initial_schema

Create the schema for Tavern groups:
- Users (balance, party membership)
- Groups (guilds and parties)
- Guild memberships (ordered per user)
- Invitations (one pending invitation per user and group)

Revision ID: 3f1c9a7d2b64
Revises:
Create Date: 2026-10-19 10:12:04.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(), primary_key=True),
        sa.Column("username", sa.String(40), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("balance", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("party_id", postgresql.UUID(), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.CheckConstraint("balance >= 0", name="ck_users_balance_non_negative"),
    )
    op.execute("CREATE UNIQUE INDEX uq_users_username_lower ON users (lower(username))")
    op.execute("CREATE UNIQUE INDEX uq_users_email_lower ON users (lower(email))")

    op.create_table(
        "groups",
        sa.Column("id", postgresql.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("privacy", sa.String(20), nullable=False),
        sa.Column(
            "leader_id", postgresql.UUID(), sa.ForeignKey("users.id"), nullable=False
        ),
        sa.Column("member_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.CheckConstraint("type IN ('guild', 'party')", name="ck_groups_type"),
        sa.CheckConstraint(
            "privacy IN ('public', 'private')", name="ck_groups_privacy"
        ),
    )

    op.create_table(
        "guild_memberships",
        sa.Column(
            "user_id",
            postgresql.UUID(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "group_id",
            postgresql.UUID(),
            sa.ForeignKey("groups.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("user_id", "group_id", name="pk_guild_memberships"),
    )

    op.create_table(
        "invitations",
        sa.Column(
            "user_id",
            postgresql.UUID(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "group_id",
            postgresql.UUID(),
            sa.ForeignKey("groups.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("group_type", sa.String(20), nullable=False),
        sa.Column("group_name", sa.String(255), nullable=False),
        sa.Column("inviter_id", postgresql.UUID(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("user_id", "group_id", name="pk_invitations"),
    )
    op.create_index("idx_invitations_group_id", "invitations", ["group_id"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_index("idx_invitations_group_id", table_name="invitations")
    op.drop_table("invitations")
    op.drop_table("guild_memberships")
    op.drop_table("groups")
    op.execute("DROP INDEX IF EXISTS uq_users_email_lower")
    op.execute("DROP INDEX IF EXISTS uq_users_username_lower")
    op.drop_table("users")
