# =============================================================================
# tests/test_concurrency.py - Concurrent Access Tests
# =============================================================================
# Several threads hit the store (directly and through HTTP) at once.  The
# store lock must keep ids unique, lose no inserts, and leave every record
# in one of the states that was actually written.
# =============================================================================

from concurrent.futures import ThreadPoolExecutor

from contacts_api.app.core.db import ContactStore
from contacts_api.app.schemas.contact import Contact

THREADS = 4
PER_THREAD = 50


class TestConcurrentStore:
    """ContactStore used from many threads."""

    def test_concurrent_adds_are_all_kept(self):
        store = ContactStore()

        def add_batch(worker):
            for i in range(PER_THREAD):
                store.add(
                    Contact(
                        id=f"w{worker}-{i}",
                        name=f"Worker {worker}",
                        country_code="+1",
                        phone_number=str(i),
                    )
                )

        with ThreadPoolExecutor(max_workers=THREADS) as pool:
            list(pool.map(add_batch, range(THREADS)))

        assert store.count() == THREADS * PER_THREAD
        assert len({contact.id for contact in store.list_all()}) == THREADS * PER_THREAD

    def test_concurrent_replaces_are_last_write_wins(self):
        store = ContactStore()
        store.add(Contact(id="shared", name="original", country_code="+1", phone_number="0"))
        written = {f"writer-{worker}-{i}" for worker in range(THREADS) for i in range(PER_THREAD)}

        def replace_batch(worker):
            for i in range(PER_THREAD):
                assert store.replace(
                    Contact(
                        id="shared",
                        name=f"writer-{worker}-{i}",
                        country_code="+1",
                        phone_number=str(i),
                    )
                )

        with ThreadPoolExecutor(max_workers=THREADS) as pool:
            list(pool.map(replace_batch, range(THREADS)))

        final = store.get("shared")
        assert store.count() == 1
        assert final.name in written
        # Fields come from a single write, never a mix of two.
        assert final.name.endswith(f"-{final.phone_number}")


class TestConcurrentRequests:
    """Parallel HTTP requests through the test client."""

    def test_parallel_creates_get_unique_ids(self, client):
        def create_batch(worker):
            ids = []
            for i in range(PER_THREAD):
                response = client.post(
                    "/contacts",
                    json={"Name": f"Worker {worker}", "CountryCode": "+1", "PhoneNumber": str(i)},
                )
                assert response.status_code == 200
                ids.append(response.json()["Id"])
            return ids

        with ThreadPoolExecutor(max_workers=THREADS) as pool:
            batches = list(pool.map(create_batch, range(THREADS)))

        ids = [contact_id for batch in batches for contact_id in batch]
        assert len(ids) == THREADS * PER_THREAD
        assert len(set(ids)) == THREADS * PER_THREAD
        listed = client.get("/contacts").json()
        assert {contact["Id"] for contact in listed} == set(ids)

    def test_parallel_updates_leave_a_written_state(self, client):
        created = client.post(
            "/contacts", json={"Name": "original", "CountryCode": "+1", "PhoneNumber": "0"}
        ).json()
        url = f"/contacts/{created['Id']}"

        def update_batch(worker):
            for i in range(10):
                response = client.put(
                    url,
                    json={"Name": f"writer-{worker}-{i}", "CountryCode": "+1", "PhoneNumber": str(i)},
                )
                assert response.status_code == 200

        with ThreadPoolExecutor(max_workers=THREADS) as pool:
            list(pool.map(update_batch, range(THREADS)))

        final = client.get(url).json()
        assert final["Id"] == created["Id"]
        assert final["Name"].startswith("writer-")
        assert final["Name"].endswith(f"-{final['PhoneNumber']}")
        assert len(client.get("/contacts").json()) == 1
