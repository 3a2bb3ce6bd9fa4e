from typing import List

from recordgate.contact.model import Contact
from recordgate.query.memory import InMemoryAccessor


class ContactRepositoryMock(InMemoryAccessor[Contact]):
    """In-memory stand-in for ContactRepository."""

    record_type = Contact

    def list_by_account(self, account_id: str, limit: int) -> List[Contact]:
        return self._filter_by("account_id", account_id, limit)
