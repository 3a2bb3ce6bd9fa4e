"""
Account

Organisations: the Account record, its live repository and its in-memory mock.
"""

from recordgate.account.mock import AccountRepositoryMock
from recordgate.account.model import Account
from recordgate.account.repository import AccountQueries, AccountRepository

__all__ = ["Account", "AccountQueries", "AccountRepository", "AccountRepositoryMock"]
