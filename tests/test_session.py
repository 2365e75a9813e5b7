"""Identity store tests: persisted records, logout and malformed payloads."""

from bookshop.models import Identity
from bookshop.session import IdentityStore, identity_from_record


def test_no_record_means_anonymous(tmp_path):
    assert IdentityStore(tmp_path / "user.json").load() is None


def test_save_then_load(tmp_path):
    store = IdentityStore(tmp_path / "user.json")
    store.save(Identity(user_id="42", username="sita"))
    loaded = store.load()
    assert loaded == Identity(user_id="42", username="sita")


def test_clear_logs_out(tmp_path):
    store = IdentityStore(tmp_path / "user.json")
    store.save(Identity(user_id="42"))
    store.clear()
    assert store.load() is None
    store.clear()


def test_unparseable_record_is_anonymous(tmp_path):
    path = tmp_path / "user.json"
    path.write_text("{broken", encoding="utf-8")
    assert IdentityStore(path).load() is None


def test_numeric_user_id_is_stringified():
    assert identity_from_record({"userId": 7}).user_id == "7"


def test_records_without_user_id_are_anonymous():
    assert identity_from_record({"username": "ram"}) is None
    assert identity_from_record(["userId", 1]) is None
