from __future__ import annotations

from flatkv import Entry, KeyValueTable


def test_set_then_get_returns_value():
    t = KeyValueTable()
    t.set("name", "Alice")
    assert t.get("name") == "Alice"


def test_get_missing_is_none_not_empty_string():
    t = KeyValueTable()
    t.set("empty", "")
    assert t.get("missing") is None
    assert t.get("empty") == ""


def test_set_overwrites():
    t = KeyValueTable()
    t.set("a", "1")
    t.set("a", "2")
    assert t.get("a") == "2"
    assert len(t) == 1


def test_delete_reports_whether_removed():
    t = KeyValueTable()
    t.set("k", "v")
    assert t.delete("k") is True
    assert t.get("k") is None
    assert t.delete("k") is False


def test_delete_missing_leaves_table_unchanged():
    t = KeyValueTable()
    t.set("k", "v")
    assert t.delete("nope") is False
    assert t.to_dict() == {"k": "v"}


def test_empty_key_and_value_are_plain_entries():
    t = KeyValueTable()
    t.set("", "")
    assert "" in t
    assert t.get("") == ""
    assert t.delete("") is True


def test_entries_and_keys():
    t = KeyValueTable()
    t.set("k1", "v1")
    t.set("k2", "v2")
    assert set(t.keys()) == {"k1", "k2"}
    assert set(t.entries()) == {Entry(key="k1", value="v1"), Entry(key="k2", value="v2")}


def test_entries_accept_lone_surrogates():
    t = KeyValueTable()
    t.set("k", "\udcff")
    [entry] = t.entries()
    assert (entry.key, entry.value) == ("k", "\udcff")
