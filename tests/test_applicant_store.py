import pytest
from pydantic import ValidationError

from conftest import make_fields
from services.store.applicants import ApplicantNotFound


def ids(store):
    return [a.id for a in store.list()]


def test_add_assigns_fresh_ids(store):
    seen = set()
    for i in range(5):
        applicant = store.add(make_fields())
        assert applicant.id not in seen
        seen.add(applicant.id)
    assert len(store) == 5


def test_add_returns_the_stored_record(store):
    applicant = store.add(make_fields(name="Jo"))
    assert store.list() == (applicant,)
    assert store.get(applicant.id) == applicant
    assert applicant.name == "Jo"


def test_ids_are_not_reused_after_delete(store):
    first = store.add(make_fields())
    second = store.add(make_fields())
    store.delete(second.id)
    third = store.add(make_fields())
    assert third.id not in {first.id, second.id}


def test_update_replaces_fields_and_keeps_id_and_position(seeded_store):
    before = seeded_store.list()
    target = before[1]
    new_fields = make_fields(name="Bobby", age=40, email="bobby@x.org", gender="other")

    seeded_store.update(target.id, new_fields)

    after = seeded_store.list()
    assert [a.id for a in after] == [a.id for a in before]
    matches = [a for a in after if a.id == target.id]
    assert len(matches) == 1
    assert matches[0].fields == new_fields
    assert after[0] == before[0]
    assert after[2] == before[2]


def test_update_unknown_id(seeded_store):
    with pytest.raises(ApplicantNotFound) as exc:
        seeded_store.update(99, make_fields())
    assert exc.value.applicant_id == 99


def test_delete_keeps_relative_order(seeded_store):
    assert ids(seeded_store) == [1, 2, 3]
    seeded_store.delete(2)
    assert ids(seeded_store) == [1, 3]
    assert 2 not in seeded_store


def test_delete_unknown_id(seeded_store):
    with pytest.raises(ApplicantNotFound):
        seeded_store.delete(42)
    assert len(seeded_store) == 3


def test_get_unknown_id(store):
    with pytest.raises(ApplicantNotFound):
        store.get(1)


def test_list_is_a_snapshot(seeded_store):
    snapshot = seeded_store.list()
    seeded_store.delete(1)
    assert len(snapshot) == 3
    assert len(seeded_store.list()) == 2


def test_records_are_immutable(store):
    applicant = store.add(make_fields())
    with pytest.raises(ValidationError):
        applicant.id = 7
    assert store.list()[0].id == applicant.id


def test_subscribers_see_every_change(store):
    seen = []
    store.subscribe(lambda snapshot: seen.append([a.id for a in snapshot]))

    a = store.add(make_fields())
    b = store.add(make_fields())
    store.update(a.id, make_fields(name="Zed"))
    store.delete(b.id)

    assert seen == [[1], [1, 2], [1, 2], [1]]


def test_unsubscribe(store):
    seen = []
    unsubscribe = store.subscribe(seen.append)
    store.add(make_fields())
    unsubscribe()
    store.add(make_fields())
    assert len(seen) == 1


def test_failed_mutation_does_not_notify(store):
    seen = []
    store.subscribe(seen.append)
    with pytest.raises(ApplicantNotFound):
        store.delete(1)
    assert seen == []


def test_failing_listener_does_not_undo_the_change(store, caplog):
    seen = []

    def broken(snapshot):
        raise RuntimeError("boom")

    store.subscribe(broken)
    store.subscribe(seen.append)

    store.add(make_fields())

    assert len(store) == 1
    assert len(seen) == 1
    assert "listener failed" in caplog.text
