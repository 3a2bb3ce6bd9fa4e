"""
Tests for InMemoryMutationGateway.

Run with: pytest src/recordgate/mutation/memory_test.py -v
"""

import pytest

from recordgate.account import Account
from recordgate.contact import Contact
from recordgate.errors import InvalidStateError
from recordgate.mutation import InMemoryMutationGateway, MutationGateway


def test_satisfies_protocol(gateway):
    assert isinstance(gateway, MutationGateway)


class TestCreate:
    """Tests for InMemoryMutationGateway.create()"""

    @pytest.mark.parametrize("count", [1, 3, 10])
    def test_create_assigns_ids(self, gateway, count):
        accounts = [Account(name=f"Account {i}") for i in range(count)]

        gateway.create(accounts)

        assert all(account.has_id() for account in accounts)
        assert len(gateway) == count

    def test_ids_are_unique_across_calls(self, gateway):
        ids = set()
        for i in range(50):
            account = Account(name=f"Account {i}")
            gateway.create([account])
            ids.add(account.id)

        assert len(ids) == 50

    def test_ids_use_key_prefix(self, gateway):
        account = Account(name="Acme")
        contact = Contact(last_name="Lovelace")

        gateway.create([account, contact])

        assert account.id.startswith("001")
        assert contact.id.startswith("003")
        assert len(account.id) == 15

    def test_create_stores_a_copy(self, gateway):
        account = Account(name="Acme")
        gateway.create([account])

        account.name = "Changed without update"

        assert gateway.get(account.id).name == "Acme"

    def test_create_with_id_raises_and_leaves_store_unchanged(self, gateway):
        existing = Account(name="Existing")
        gateway.create([existing])
        before = gateway.records()

        with pytest.raises(InvalidStateError, match="already has an id"):
            gateway.create([Account(id="001999999999999", name="Supplied")])

        assert gateway.records() == before

    def test_create_is_fail_fast(self, gateway):
        first = Account(name="First")
        bad = Account(id="001999999999999", name="Bad")
        last = Account(name="Last")

        with pytest.raises(InvalidStateError):
            gateway.create([first, bad, last])

        assert first.has_id()
        assert first.id in gateway
        assert not last.has_id()
        assert len(gateway) == 1

    def test_create_empty_batch(self, gateway):
        gateway.create([])

        assert len(gateway) == 0


class TestUpdate:
    """Tests for InMemoryMutationGateway.update()"""

    def test_update_replaces_stored_record(self, gateway):
        account = Account(name="Acme", industry="Retail")
        gateway.create([account])

        account.industry = "Manufacturing"
        gateway.update([account])

        assert gateway.get(account.id) == account

    def test_update_without_id_raises_and_leaves_store_unchanged(self, gateway):
        gateway.create([Account(name="Acme")])
        before = gateway.records()

        with pytest.raises(InvalidStateError, match="without an id"):
            gateway.update([Account(name="No id")])

        assert gateway.records() == before

    def test_update_unknown_id_raises(self, gateway):
        with pytest.raises(InvalidStateError, match="no such record"):
            gateway.update([Account(id="001999999999999", name="Ghost")])

        assert len(gateway) == 0

    def test_update_with_id_of_other_type_raises(self, gateway):
        account = Account(name="Acme")
        gateway.create([account])

        with pytest.raises(InvalidStateError, match="belongs to a Account"):
            gateway.update([Contact(id=account.id, last_name="Lovelace")])

        assert gateway.get(account.id) == account

    def test_update_is_fail_fast(self, gateway):
        first = Account(name="First")
        second = Account(name="Second")
        gateway.create([first, second])

        first.name = "First v2"
        second.name = "Second v2"
        with pytest.raises(InvalidStateError):
            gateway.update([first, Account(name="No id"), second])

        assert gateway.get(first.id).name == "First v2"
        assert gateway.get(second.id).name == "Second"


class TestUpsert:
    """Tests for InMemoryMutationGateway.upsert()"""

    def test_upsert_without_id_creates(self, gateway):
        account = Account(name="Acme", industry="Retail")

        gateway.upsert([account])

        assert account.has_id()
        assert gateway.get(account.id).fields() == account.fields()

    def test_upsert_with_existing_id_updates(self, gateway):
        account = Account(name="Acme")
        gateway.create([account])
        account_id = account.id

        account.phone = "555-0100"
        gateway.upsert([account])

        assert account.id == account_id
        assert len(gateway) == 1
        assert gateway.get(account_id).phone == "555-0100"

    def test_upsert_mixed_batch(self, gateway):
        existing = Account(name="Existing")
        gateway.create([existing])
        existing.name = "Existing v2"
        fresh = Account(name="Fresh")

        gateway.upsert([existing, fresh])

        assert len(gateway) == 2
        assert gateway.get(existing.id).name == "Existing v2"
        assert gateway.get(fresh.id).name == "Fresh"

    def test_upsert_unknown_id_raises(self, gateway):
        with pytest.raises(InvalidStateError, match="no such record"):
            gateway.upsert([Account(id="001999999999999", name="Ghost")])

        assert len(gateway) == 0


class TestDelete:
    """Tests for InMemoryMutationGateway.delete()"""

    def test_delete_removes_record(self, gateway):
        account = Account(name="Acme")
        gateway.create([account])

        gateway.delete([account])

        assert account.id not in gateway
        assert gateway.get(account.id) is None

    def test_delete_without_id_raises_and_leaves_store_unchanged(self, gateway):
        gateway.create([Account(name="Acme")])
        before = gateway.records()

        with pytest.raises(InvalidStateError, match="without an id"):
            gateway.delete([Account(name="No id")])

        assert gateway.records() == before

    def test_delete_absent_id_is_noop(self, gateway):
        account = Account(name="Acme")
        gateway.create([account])
        gateway.delete([account])

        gateway.delete([account])

        assert len(gateway) == 0

    def test_delete_with_id_of_other_type_is_noop(self, gateway):
        contact = Contact(last_name="Lovelace")
        gateway.create([contact])

        gateway.delete([Account(id=contact.id, name="Not a contact")])

        assert contact.id in gateway
        assert gateway.get(contact.id) == contact

    def test_accessor_delete_leaves_other_types(self, account_mock, contact_mock):
        contact = Contact(last_name="Lovelace")
        contact_mock.create([contact])

        account_mock.delete([Account(id=contact.id)])

        assert contact_mock.get(contact.id) == contact

    def test_deleted_id_cannot_be_updated(self, gateway):
        account = Account(name="Acme")
        gateway.create([account])
        gateway.delete([account])

        with pytest.raises(InvalidStateError, match="no such record"):
            gateway.update([account])


class TestReads:
    """Tests for InMemoryMutationGateway.get() and records()"""

    def test_records_filters_by_type(self, gateway):
        account = Account(name="Acme")
        contact = Contact(last_name="Lovelace")
        gateway.create([account, contact])

        assert gateway.records(Account) == [account]
        assert gateway.records(Contact) == [contact]
        assert len(gateway.records()) == 2

    def test_records_returns_copies(self, gateway):
        gateway.create([Account(name="Acme")])

        gateway.records()[0].name = "Mutated"

        assert gateway.records()[0].name == "Acme"

    def test_get_unknown_returns_none(self, gateway):
        assert gateway.get("001000000000042") is None

    def test_separate_gateways_have_separate_stores(self):
        first = InMemoryMutationGateway()
        second = InMemoryMutationGateway()

        first.create([Account(name="Acme")])

        assert len(first) == 1
        assert len(second) == 0
