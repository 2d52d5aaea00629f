from user_registry_api.app.core.store import UserStore
from user_registry_api.app.schemas.user import UserInput


def make_input(name="Juan Perez", email="juan@example.com", age=30):
    return UserInput(name=name, email=email, age=age)


def test_new_store_is_empty(store):
    assert len(store) == 0
    assert store.list() == []


def test_insert_assigns_unique_ids(store):
    first = store.insert(make_input())
    second = store.insert(make_input(email="ana@example.com"))
    assert first.id and second.id
    assert first.id != second.id
    assert store.find_by_id(first.id) == first


def test_list_preserves_insertion_order(store):
    emails = ["a@example.com", "b@example.com", "c@example.com"]
    for email in emails:
        store.insert(make_input(email=email))
    assert [user.email for user in store.list()] == emails


def test_find_by_id_unknown(store):
    assert store.find_by_id("missing") is None


def test_email_in_use_honours_exclusion(store):
    user = store.insert(make_input())
    assert store.email_in_use("juan@example.com")
    assert not store.email_in_use("juan@example.com", excluding_id=user.id)
    assert not store.email_in_use("other@example.com")


def test_replace_keeps_id_and_position(store):
    first = store.insert(make_input())
    store.insert(make_input(email="ana@example.com"))
    updated = store.replace(first.id, make_input(name="Juan Modificado", email="jm@example.com", age=35))
    assert updated.id == first.id
    assert updated.name == "Juan Modificado"
    assert store.list()[0] == updated


def test_replace_unknown(store):
    assert store.replace("missing", make_input()) is None
    assert len(store) == 0


def test_remove(store):
    user = store.insert(make_input())
    assert store.remove(user.id) is True
    assert store.remove(user.id) is False
    assert store.find_by_id(user.id) is None


def test_stores_are_independent():
    one, two = UserStore(), UserStore()
    one.insert(make_input())
    assert len(two) == 0


def test_clear(store):
    store.insert(make_input())
    store.clear()
    assert store.list() == []
