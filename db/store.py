"""
db/store.py
-----------
Thin query/execute layer over the connection pool.
Repositories hand it parameterized SQL (`%s` placeholders) and get back
the fetched rows together with the affected-row count.
"""

from dataclasses import dataclass, field
from typing import Any, Sequence

from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class QueryResult:
    """
    Outcome of a single statement.

    Attributes:
        rows: Fetched rows as tuples (empty for statements returning nothing).
        row_count: Rows affected (DML) or returned (SELECT).
    """
    rows: list[tuple] = field(default_factory=list)
    row_count: int = 0

    def first(self) -> tuple | None:
        """Returns the first row, or None if there are no rows."""
        return self.rows[0] if self.rows else None


class PostgresStore:
    """Executes statements on connections borrowed from a psycopg2 pool."""

    def __init__(self, conn_pool):
        self.pool = conn_pool

    def execute(self, sql: str, params: Sequence[Any] = ()) -> QueryResult:
        """
        Run one statement in its own transaction.

        Args:
            sql: Query text with positional `%s` placeholders.
            params: Values bound to the placeholders, in order.

        Returns:
            A QueryResult with rows (if the statement produces any) and row count.

        Raises:
            psycopg2.Error: Propagated after the transaction is rolled back.
        """
        conn = self.pool.getconn()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, tuple(params))
                rows = cur.fetchall() if cur.description is not None else []
                row_count = cur.rowcount
            conn.commit()
            return QueryResult(rows=list(rows), row_count=row_count)
        except Exception as e:
            conn.rollback()
            logger.error(f"Query failed: {e}")
            raise
        finally:
            self.pool.putconn(conn)
