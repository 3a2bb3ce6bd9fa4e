from typing import Protocol, Sequence, runtime_checkable

from recordgate.errors import InvalidStateError
from recordgate.logger import get_logger
from recordgate.records import Record

logger = get_logger(__name__)


@runtime_checkable
class MutationGateway(Protocol):
    """
    Create, update, upsert and delete records.

    Every operation walks its input in order and stops at the first record
    that fails. Records before it stay written; nothing is rolled back.
    Identifiers are assigned by the gateway on create and written back onto
    the input records.
    """

    def create(self, records: Sequence[Record]) -> None:
        ...

    def update(self, records: Sequence[Record]) -> None:
        ...

    def upsert(self, records: Sequence[Record]) -> None:
        ...

    def delete(self, records: Sequence[Record]) -> None:
        ...


def require_id(record: Record, operation: str) -> None:
    """Raise InvalidStateError unless the record has an identifier."""
    if not record.has_id():
        logger.warning("%s rejected: %s has no id", operation, type(record).__name__)
        raise InvalidStateError(
            f"Cannot {operation} {type(record).__name__} without an id"
        )


def require_no_id(record: Record, operation: str) -> None:
    """Raise InvalidStateError if the record already has an identifier."""
    if record.has_id():
        logger.warning(
            "%s rejected: %s already has id %s", operation, type(record).__name__, record.id
        )
        raise InvalidStateError(
            f"Cannot {operation} {type(record).__name__} {record.id}: it already has an id"
        )


class GatewayBacked:
    """
    Exposes the mutation operations of the gateway it is given.

    Accessors hold a reference to their gateway rather than a copy of its
    store, so reads always see what the gateway last wrote.
    """

    def __init__(self, gateway: MutationGateway):
        self.gateway = gateway

    def create(self, records: Sequence[Record]) -> None:
        self.gateway.create(records)

    def update(self, records: Sequence[Record]) -> None:
        self.gateway.update(records)

    def upsert(self, records: Sequence[Record]) -> None:
        self.gateway.upsert(records)

    def delete(self, records: Sequence[Record]) -> None:
        self.gateway.delete(records)
