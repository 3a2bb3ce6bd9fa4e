from typing import Any, Generic, List, Optional, Type

import psycopg
from psycopg import sql

from recordgate import db
from recordgate.config import config
from recordgate.errors import QueryError
from recordgate.logger import get_logger
from recordgate.mutation.gateway import GatewayBacked, MutationGateway
from recordgate.mutation.postgres import PostgresMutationGateway
from recordgate.query.base import R, check_limit, like_pattern

logger = get_logger(__name__)


class PostgresAccessor(GatewayBacked, Generic[R]):
    """
    Entity accessor reading `record_type.table` through recordgate.db.

    Results are ordered by the display field, then id, so bounded listings
    page predictably. Database errors surface as QueryError.
    """

    record_type: Type[R]

    def __init__(
        self,
        gateway: Optional[MutationGateway] = None,
        search_limit: Optional[int] = None,
        case_sensitive: Optional[bool] = None,
    ):
        super().__init__(gateway if gateway is not None else PostgresMutationGateway())
        self.search_limit = config.search_limit if search_limit is None else search_limit
        self.case_sensitive = (
            config.search_case_sensitive if case_sensitive is None else case_sensitive
        )

    def list(self, limit: int) -> List[R]:
        check_limit(limit)
        return self._select(limit=limit)

    def search(self, term: str) -> List[R]:
        operator = "LIKE" if self.case_sensitive else "ILIKE"
        where = sql.SQL("{} {} %s").format(
            sql.Identifier(self.record_type.display_field), sql.SQL(operator)
        )
        return self._select(where, (like_pattern(term),), limit=self.search_limit)

    def get(self, record_id: str) -> Optional[R]:
        rows = self._select(sql.SQL("id = %s"), (record_id,), limit=1)
        return rows[0] if rows else None

    def _filter_by(self, field: str, value: Any, limit: int) -> List[R]:
        """Records whose `field` equals `value`, at most `limit` of them."""
        check_limit(limit)
        where = sql.SQL("{} = %s").format(sql.Identifier(field))
        return self._select(where, (value,), limit=limit)

    def _select(
        self,
        where: Optional[sql.Composable] = None,
        params: tuple = (),
        limit: Optional[int] = None,
    ) -> List[R]:
        record_type = self.record_type
        query = sql.SQL("SELECT {columns} FROM {table}").format(
            columns=sql.SQL(", ").join(
                map(sql.Identifier, ["id", *record_type.column_names()])
            ),
            table=sql.Identifier(record_type.table),
        )
        if where is not None:
            query += sql.SQL(" WHERE ") + where
        query += sql.SQL(" ORDER BY {} NULLS LAST, id").format(
            sql.Identifier(record_type.display_field)
        )
        if limit is not None:
            query += sql.SQL(" LIMIT %s")
            params = params + (limit,)

        try:
            rows = db.fetch_all(query, params)
        except psycopg.Error as exc:
            logger.error("Query on %s failed: %s", record_type.table, exc)
            raise QueryError(f"Query on {record_type.table} failed: {exc}") from exc
        return [record_type.from_row(row) for row in rows]
