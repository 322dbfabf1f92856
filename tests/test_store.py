"""Tests for the symbol store."""

from scsslens.index import SymbolStore

from conftest import make_record


class TestSymbolStore:
    def test_set_and_get(self):
        store = SymbolStore()
        record = make_record("file:///p/a.scss", variables=["$a"])
        store.set("file:///p/a.scss", record)

        assert store.get("file:///p/a.scss") is record
        assert "file:///p/a.scss" in store
        assert len(store) == 1

    def test_set_replaces_wholesale(self):
        store = SymbolStore()
        store.set("file:///p/a.scss", make_record("file:///p/a.scss", variables=["$a", "$b"]))
        store.set("file:///p/a.scss", make_record("file:///p/a.scss", variables=["$a"]))

        names = [s.name for s in store.get("file:///p/a.scss").variables]
        assert names == ["$a"]
        assert len(store) == 1

    def test_get_all_keeps_insertion_order(self):
        store = SymbolStore()
        for name in ("c", "a", "b"):
            store.set(f"file:///p/{name}.scss", make_record(f"file:///p/{name}.scss", variables=[f"${name}"]))
        # Re-setting keeps the first insertion position
        store.set("file:///p/c.scss", make_record("file:///p/c.scss", variables=["$c2"]))

        assert [r.variables[0].name for r in store.get_all()] == ["$c2", "$a", "$b"]
        assert store.uris() == ["file:///p/c.scss", "file:///p/a.scss", "file:///p/b.scss"]

    def test_get_all_is_a_snapshot(self):
        store = SymbolStore()
        store.set("file:///p/a.scss", make_record("file:///p/a.scss"))
        snapshot = store.get_all()
        store.set("file:///p/b.scss", make_record("file:///p/b.scss"))

        assert len(snapshot) == 1

    def test_delete(self):
        store = SymbolStore()
        store.set("file:///p/a.scss", make_record("file:///p/a.scss"))

        assert store.delete("file:///p/a.scss") is True
        assert store.delete("file:///p/a.scss") is False
        assert store.get("file:///p/a.scss") is None

    def test_clear(self):
        store = SymbolStore()
        store.set("file:///p/a.scss", make_record("file:///p/a.scss"))
        store.clear()

        assert len(store) == 0
        assert list(store) == []
