"""SQLAlchemy table definitions for desk.

These table definitions are used for classical ORM mapping.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMUNITIES TABLE
# ============================================================================
communities_table = Table(
    "communities",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("uuid", String(36), nullable=False),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False),
    Column("avatar", Text, nullable=False, server_default=""),
    Column("description", Text, nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("uuid", name="uq_communities_uuid"),
)

# ============================================================================
# SYS USERS TABLE (administrators and staff)
# ============================================================================
sys_users_table = Table(
    "sys_users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("uuid", UUID(as_uuid=True), nullable=False),  # Shared with OpenIM
    Column("email", String(255), nullable=False),
    Column("nickname", String(255), nullable=False),
    Column("avatar", Text, nullable=False, server_default=""),
    Column("description", Text, nullable=False, server_default=""),
    Column("is_enable", Boolean, nullable=False, server_default="true"),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column("password", String(255), nullable=False),  # bcrypt hash
    Column(
        "community_id",
        Integer,
        ForeignKey("communities.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("uuid", name="uq_sys_users_uuid"),
    # Only concurrency guard for simultaneous registrations
    UniqueConstraint("email", name="uq_sys_users_email"),
)

Index("idx_sys_users_community_id", sys_users_table.c.community_id)

# ============================================================================
# VERIFICATION CODES TABLE (one live code per email)
# ============================================================================
verification_codes_table = Table(
    "verification_codes",
    metadata,
    Column("email", String(255), primary_key=True),
    Column("code", String(16), nullable=False),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
)
