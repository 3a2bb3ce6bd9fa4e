from typing import List

from recordgate.account.model import Account
from recordgate.query.memory import InMemoryAccessor


class AccountRepositoryMock(InMemoryAccessor[Account]):
    """In-memory stand-in for AccountRepository."""

    record_type = Account

    def list_by_industry(self, industry: str, limit: int) -> List[Account]:
        return self._filter_by("industry", industry, limit)
