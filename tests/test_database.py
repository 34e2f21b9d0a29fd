import pytest

from glance.database import KeyValueStore


@pytest.fixture
def kv(tmp_path):
    kv = KeyValueStore(tmp_path / "nested" / "kv.db")
    kv.open()
    yield kv
    kv.close()


def test_get_missing_returns_default(kv):
    assert kv.get("nothing") is None
    assert kv.get("nothing", []) == []
    assert kv.contains("nothing") is False


def test_set_and_overwrite(kv):
    kv.set("expenses", [{"id": "a"}])
    kv.set("expenses", [{"id": "b"}])

    assert kv.get("expenses") == [{"id": "b"}]
    assert kv.keys() == ["expenses"]


def test_empty_list_counts_as_written(kv):
    kv.set("categories", [])
    assert kv.contains("categories") is True


def test_delete_is_idempotent(kv):
    kv.set("budgets", [])
    kv.delete("budgets")
    kv.delete("budgets")
    assert kv.contains("budgets") is False


def test_closed_store_raises(tmp_path):
    kv = KeyValueStore(tmp_path / "kv.db")
    assert kv.is_open is False
    with pytest.raises(RuntimeError):
        kv.get("expenses")
