"""PostgreSQL Persistence.

SQLAlchemy Core tables with explicit row <-> entity mappers; the domain
entities stay free of ORM metadata.
"""

from apps.adventurers.infrastructure.persistence_postgres.adventurer_repository_sqla import (
    SqlaAdventurerRepository,
)
from apps.adventurers.infrastructure.persistence_postgres.tables import (
    adventurers_table,
    metadata,
)
from apps.adventurers.infrastructure.persistence_postgres.transaction_manager_sqla import (
    SqlaTransactionManager,
)

__all__ = [
    "SqlaAdventurerRepository",
    "SqlaTransactionManager",
    "adventurers_table",
    "metadata",
]
