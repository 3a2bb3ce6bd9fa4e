from typing import List, Protocol, runtime_checkable

from recordgate.account.model import Account
from recordgate.mutation.gateway import MutationGateway
from recordgate.query.base import EntityQueries
from recordgate.query.postgres import PostgresAccessor


@runtime_checkable
class AccountQueries(MutationGateway, EntityQueries[Account], Protocol):
    """Everything callers can do with accounts, live or mocked."""

    def list_by_industry(self, industry: str, limit: int) -> List[Account]:
        ...


class AccountRepository(PostgresAccessor[Account]):
    """
    Repository for account data access.
    Encapsulates all SQL for the accounts table.
    """

    record_type = Account

    def list_by_industry(self, industry: str, limit: int) -> List[Account]:
        """Up to `limit` accounts in the given industry."""
        return self._filter_by("industry", industry, limit)
