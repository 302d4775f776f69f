import pytest

from kadroute.value_store import ValueStore, hash_key


def test_set_and_get_with_equivalent_keys():
    store = ValueStore()
    store[[1, 2, 3]] = "data"
    assert store[b"\x01\x02\x03"] == "data"
    assert store[bytearray([1, 2, 3])] == "data"
    assert len(store) == 1


def test_overwrite_keeps_single_entry():
    store = ValueStore()
    store[b"key"] = "a"
    store[list(b"key")] = "b"
    assert len(store) == 1
    assert store[b"key"] == "b"


def test_delete_and_missing():
    store = ValueStore({b"key": "v"})
    del store[b"key"]
    assert len(store) == 0
    with pytest.raises(KeyError):
        store[b"key"]
    with pytest.raises(KeyError):
        del store[b"key"]


def test_iteration_yields_bytes_keys():
    store = ValueStore([([107], 1), (b"x", 2)])
    assert sorted(store) == [b"k", b"x"]
    assert dict(store.items()) == {b"k": 1, b"x": 2}


def test_contains():
    store = ValueStore({b"a": 1})
    assert b"a" in store
    assert [97] in store
    assert b"b" not in store
    assert "a" not in store


def test_string_key_rejected():
    store = ValueStore()
    with pytest.raises(TypeError):
        store["key"] = 1
    assert len(store) == 0
    assert list(store) == []
    assert b"key" not in store


def test_hash_of_empty_key_is_zero():
    assert hash_key(b"") == 0


def test_hash_is_stable_across_key_types():
    assert hash_key(b"key") == hash_key(list(b"key")) == hash_key(bytearray(b"key"))


def test_hash_depends_on_order_and_fits_64_bits():
    assert hash_key(b"ab") != hash_key(b"ba")
    for key in (b"a", bytes(range(256)), b"\xff" * 1000):
        assert 0 <= hash_key(key) < 2**64