from typing import Sequence

from psycopg import sql

from recordgate import db
from recordgate.errors import InvalidStateError
from recordgate.logger import get_logger
from recordgate.mutation.gateway import require_id, require_no_id
from recordgate.records import Record

logger = get_logger(__name__)


class PostgresMutationGateway:
    """
    Mutation gateway backed by PostgreSQL.

    One statement per record, each on its own connection from recordgate.db,
    so a failure part way through a batch leaves earlier rows committed.
    Identifiers are generated by the database (see migrations/).
    """

    def create(self, records: Sequence[Record]) -> None:
        logger.debug("create %d record(s)", len(records))
        for record in records:
            self._insert(record, "create")

    def update(self, records: Sequence[Record]) -> None:
        logger.debug("update %d record(s)", len(records))
        for record in records:
            self._update(record, "update")

    def upsert(self, records: Sequence[Record]) -> None:
        logger.debug("upsert %d record(s)", len(records))
        for record in records:
            if record.has_id():
                self._update(record, "upsert")
            else:
                self._insert(record, "upsert")

    def delete(self, records: Sequence[Record]) -> None:
        logger.debug("delete %d record(s)", len(records))
        for record in records:
            require_id(record, "delete")
            db.execute(
                sql.SQL("DELETE FROM {table} WHERE id = %s").format(
                    table=sql.Identifier(record.table)
                ),
                (record.id,),
            )

    def _insert(self, record: Record, operation: str) -> None:
        require_no_id(record, operation)
        columns = record.column_names()
        query = sql.SQL("INSERT INTO {table} ({columns}) VALUES ({values}) RETURNING id").format(
            table=sql.Identifier(record.table),
            columns=sql.SQL(", ").join(map(sql.Identifier, columns)),
            values=sql.SQL(", ").join(sql.Placeholder() * len(columns)),
        )
        row = db.fetch_one(query, tuple(getattr(record, name) for name in columns))
        record.id = str(row["id"])

    def _update(self, record: Record, operation: str) -> None:
        require_id(record, operation)
        columns = record.column_names()
        query = sql.SQL("UPDATE {table} SET {assignments} WHERE id = %s RETURNING id").format(
            table=sql.Identifier(record.table),
            assignments=sql.SQL(", ").join(
                sql.SQL("{} = %s").format(sql.Identifier(name)) for name in columns
            ),
        )
        params = tuple(getattr(record, name) for name in columns) + (record.id,)
        if db.fetch_one(query, params) is None:
            raise InvalidStateError(
                f"Cannot {operation} {type(record).__name__} {record.id}: no such record"
            )
