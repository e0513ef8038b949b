# =============================================================================
# tests/test_store.py - In-memory Contact Store Tests
# =============================================================================

import pytest

from contacts_api.app.core.db import ContactStore, StorageError, get_store, init_db
from contacts_api.app.schemas.contact import Contact


def make_contact(contact_id="c-1", name="Alice"):
    return Contact(id=contact_id, name=name, country_code="+1", phone_number="5551234")


class TestContactStore:
    """Tests for ContactStore operations."""

    def test_add_and_get(self):
        store = ContactStore()
        store.add(make_contact())

        found = store.get("c-1")

        assert found == make_contact()

    def test_get_missing_returns_none(self):
        assert ContactStore().get("missing") is None

    def test_add_duplicate_id_raises(self):
        store = ContactStore()
        store.add(make_contact())

        with pytest.raises(StorageError):
            store.add(make_contact(name="Bob"))

        assert store.get("c-1").name == "Alice"

    def test_returned_records_are_copies(self):
        """Mutating a returned record must not change stored state."""
        store = ContactStore()
        store.add(make_contact())

        found = store.get("c-1")
        found.name = "Mallory"

        assert store.get("c-1").name == "Alice"

    def test_list_all(self):
        store = ContactStore()
        store.add(make_contact("c-1"))
        store.add(make_contact("c-2", name="Bob"))

        ids = {contact.id for contact in store.list_all()}

        assert ids == {"c-1", "c-2"}

    def test_replace_existing(self):
        store = ContactStore()
        store.add(make_contact())

        assert store.replace(make_contact(name="Alicia")) is True
        assert store.get("c-1").name == "Alicia"

    def test_replace_missing_returns_false(self):
        store = ContactStore()

        assert store.replace(make_contact()) is False
        assert store.count() == 0

    def test_remove(self):
        store = ContactStore()
        store.add(make_contact())

        assert store.remove("c-1") is True
        assert store.remove("c-1") is False
        assert store.get("c-1") is None

    def test_clear(self):
        store = ContactStore()
        store.add(make_contact())
        store.clear()

        assert store.list_all() == []


class TestClosedStore:
    """A closed store rejects every operation."""

    @pytest.mark.parametrize(
        "operation",
        [
            lambda s: s.add(make_contact()),
            lambda s: s.get("c-1"),
            lambda s: s.list_all(),
            lambda s: s.replace(make_contact()),
            lambda s: s.remove("c-1"),
            lambda s: s.count(),
        ],
    )
    def test_operations_raise(self, operation):
        store = ContactStore()
        store.close()

        with pytest.raises(StorageError):
            operation(store)

        assert store.is_open is False


class TestInitDb:
    def test_init_db_replaces_store(self):
        old = get_store()

        new = init_db()

        assert new is get_store()
        assert new is not old
        assert new.is_open
        assert new.count() == 0
