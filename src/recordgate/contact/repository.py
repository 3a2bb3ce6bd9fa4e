from typing import List, Protocol, runtime_checkable

from recordgate.contact.model import Contact
from recordgate.mutation.gateway import MutationGateway
from recordgate.query.base import EntityQueries
from recordgate.query.postgres import PostgresAccessor


@runtime_checkable
class ContactQueries(MutationGateway, EntityQueries[Contact], Protocol):
    def list_by_account(self, account_id: str, limit: int) -> List[Contact]:
        ...


class ContactRepository(PostgresAccessor[Contact]):
    """
    Repository for contact data access.
    Encapsulates all SQL for the contacts table.
    """

    record_type = Contact

    def list_by_account(self, account_id: str, limit: int) -> List[Contact]:
        """Up to `limit` contacts belonging to one account."""
        return self._filter_by("account_id", account_id, limit)
