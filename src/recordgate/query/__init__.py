"""
Query

Read operations over one entity type, composed with the mutation gateway
that writes it.
"""

from recordgate.query.base import EntityQueries
from recordgate.query.memory import InMemoryAccessor
from recordgate.query.postgres import PostgresAccessor

__all__ = ["EntityQueries", "InMemoryAccessor", "PostgresAccessor"]
