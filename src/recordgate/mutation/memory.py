import copy
import itertools
from typing import Dict, List, Optional, Sequence, Type

from recordgate.errors import InvalidStateError
from recordgate.logger import get_logger
from recordgate.mutation.gateway import require_id, require_no_id
from recordgate.records import Record

logger = get_logger(__name__)


class InMemoryMutationGateway:
    """
    Mutation gateway over a process-local record store.

    The store maps identifier to a private copy of each record. Callers only
    change it through create/update/upsert/delete, and reads hand back copies.
    Identifiers are the record type's key prefix followed by a sequence
    number, so they never repeat within one gateway.
    """

    def __init__(self):
        self._store: Dict[str, Record] = {}
        self._sequence = itertools.count(1)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, record_id: str) -> bool:
        return record_id in self._store

    # Mutations

    def create(self, records: Sequence[Record]) -> None:
        logger.debug("create %d record(s)", len(records))
        for record in records:
            self._insert(record, "create")

    def update(self, records: Sequence[Record]) -> None:
        logger.debug("update %d record(s)", len(records))
        for record in records:
            self._replace(record, "update")

    def upsert(self, records: Sequence[Record]) -> None:
        logger.debug("upsert %d record(s)", len(records))
        for record in records:
            if record.has_id():
                self._replace(record, "upsert")
            else:
                self._insert(record, "upsert")

    def delete(self, records: Sequence[Record]) -> None:
        logger.debug("delete %d record(s)", len(records))
        for record in records:
            require_id(record, "delete")
            # An id held by another record type is absent for this one
            if type(self._store.get(record.id)) is type(record):
                del self._store[record.id]

    # Reads

    def get(self, record_id: str) -> Optional[Record]:
        """Return a copy of the stored record, or None."""
        stored = self._store.get(record_id)
        return copy.deepcopy(stored) if stored is not None else None

    def records(self, record_type: Optional[Type[Record]] = None) -> List[Record]:
        """Copies of every stored record, optionally only those of one type."""
        return [
            copy.deepcopy(stored)
            for stored in self._store.values()
            if record_type is None or isinstance(stored, record_type)
        ]

    # Internals

    def _insert(self, record: Record, operation: str) -> None:
        require_no_id(record, operation)
        record.id = self._next_id(record)
        self._store[record.id] = copy.deepcopy(record)

    def _replace(self, record: Record, operation: str) -> None:
        require_id(record, operation)
        stored = self._store.get(record.id)
        # Identifiers only come from _insert, so an unknown one is an error
        if stored is None:
            raise InvalidStateError(
                f"Cannot {operation} {type(record).__name__} {record.id}: no such record"
            )
        if type(stored) is not type(record):
            raise InvalidStateError(
                f"Cannot {operation} {type(record).__name__} {record.id}: "
                f"id belongs to a {type(stored).__name__}"
            )
        self._store[record.id] = copy.deepcopy(record)

    def _next_id(self, record: Record) -> str:
        return f"{record.key_prefix}{next(self._sequence):012d}"
