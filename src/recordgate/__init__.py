"""
recordgate

Typed records behind two capabilities per entity type: a mutation gateway
(create, update, upsert, delete) and an entity accessor (list, search, get).
Each comes in a PostgreSQL flavour and an in-memory flavour for tests.
"""

from recordgate.errors import InvalidStateError, QueryError, RecordGateError
from recordgate.records import Record

__all__ = ["InvalidStateError", "QueryError", "Record", "RecordGateError"]
