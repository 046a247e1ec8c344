"""Table Definitions.

SQLAlchemy table definitions for the adventurer domain.
Plain table schema; entities are mapped explicitly in mappers.py.
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    text,
)
from sqlalchemy.sql import func

metadata = MetaData()

adventurers_table = Table(
    "adventurers",
    metadata,
    # BIGINT identity on PostgreSQL; SQLite only autoincrements INTEGER keys
    Column(
        "id",
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    ),
    Column("name", String(120), nullable=False, index=True),
    Column("class", String(32), nullable=False, index=True),
    Column("level", Integer, nullable=False, server_default=text("1")),
    Column("xp", Integer, nullable=False, server_default=text("0")),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column(
        "updated_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    ),
    CheckConstraint("level >= 1", name="ck_adventurers_level_min"),
    CheckConstraint("xp >= 0", name="ck_adventurers_xp_min"),
)
