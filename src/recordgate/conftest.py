# src/recordgate/conftest.py
"""
Pytest configuration and shared fixtures.

Tests are co-located with implementation files using the *_test.py suffix.
In-memory fixtures need nothing external. Fixtures built on db_connection
need a reachable PostgreSQL at DATABASE_URL and skip the test otherwise.
"""

import os

# Set environment BEFORE importing any app modules
os.environ["RECORDGATE_ENV"] = "test"

import psycopg
import pytest

from recordgate import db
from recordgate.config import config

# =============================================================================
# In-memory Fixtures
# =============================================================================


@pytest.fixture
def gateway():
    """Provide an empty in-memory mutation gateway."""
    from recordgate.mutation import InMemoryMutationGateway

    return InMemoryMutationGateway()


@pytest.fixture
def account_mock(gateway):
    """Provide an AccountRepositoryMock over the shared gateway."""
    from recordgate.account import AccountRepositoryMock

    return AccountRepositoryMock(gateway, search_limit=10, case_sensitive=False)


@pytest.fixture
def contact_mock(gateway):
    """Provide a ContactRepositoryMock over the shared gateway."""
    from recordgate.contact import ContactRepositoryMock

    return ContactRepositoryMock(gateway, search_limit=10, case_sensitive=False)


@pytest.fixture
def sample_accounts(account_mock) -> list:
    """Create three accounts through the mock."""
    from recordgate.account import Account

    accounts = [
        Account(name="Acme Corporation", industry="Manufacturing", website="acme.example"),
        Account(name="Globex", industry="Energy", phone="555-0100"),
        Account(name="Initech", industry="Software"),
    ]
    account_mock.create(accounts)
    return accounts


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def test_db():
    """
    Apply the schema to the database at DATABASE_URL once per session.

    Skips every dependent test when the database cannot be reached.
    """
    try:
        conn = psycopg.connect(config.database_url, connect_timeout=3)
    except psycopg.OperationalError as exc:
        pytest.skip(f"PostgreSQL not available: {exc}")

    with conn:
        with conn.cursor() as cur:
            for path in db.migration_files():
                cur.execute(path.read_text())

    yield config.database_url


@pytest.fixture
def db_connection(test_db):
    """
    Provide a database connection with transaction rollback.

    Each test runs in a transaction that is rolled back at the end,
    ensuring tests don't affect each other.
    """
    conn = psycopg.connect(test_db)

    # Clean slate: truncate all tables before each test
    with conn.cursor() as cur:
        cur.execute("TRUNCATE accounts, contacts CASCADE")
    conn.commit()

    # Override the db module to use this connection
    db.set_connection_override(conn)

    yield conn

    conn.rollback()
    db.clear_connection_override()
    conn.close()


@pytest.fixture
def account_repo(db_connection):
    """Provide a live AccountRepository."""
    from recordgate.account import AccountRepository

    return AccountRepository(search_limit=10, case_sensitive=False)


@pytest.fixture
def contact_repo(db_connection):
    """Provide a live ContactRepository."""
    from recordgate.contact import ContactRepository

    return ContactRepository(search_limit=10, case_sensitive=False)
