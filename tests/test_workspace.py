"""Tests for workspaces and the workspace manager."""

import threading

import pytest

from scsslens.index import Workspace, WorkspaceManager
from scsslens.uris import path_to_uri


@pytest.fixture
def two_roots(write_files):
    root = write_files({
        "one/a.scss": "$a: 1;\n",
        "two/b.scss": "$b: 1;\n",
    })
    return root / "one", root / "two"


class TestWorkspace:
    def test_init_scans_root(self, write_files):
        root = write_files({"a.scss": "$a: 1;\n", "b.scss": "$b: 1;\n"})
        workspace = Workspace(path_to_uri(root))
        processed = workspace.init()

        assert len(processed) == 2
        assert len(workspace.store) == 2

    def test_relative_path(self):
        workspace = Workspace("file:///project")

        assert workspace.relative("file:///project/styles/a.scss") == "./styles/a.scss"

    def test_owns(self):
        workspace = Workspace("file:///project")

        assert workspace.owns("file:///project/a.scss")
        assert not workspace.owns("file:///other/a.scss")

    def test_non_file_root_is_not_scanned(self):
        workspace = Workspace("untitled:project")

        assert workspace.init() == []


class TestWorkspaceManager:
    def test_current_is_unset_until_active_document(self, two_roots):
        one, _ = two_roots
        manager = WorkspaceManager()
        manager.init_workspace(path_to_uri(one))

        assert manager.current is None

    def test_active_document_selects_owning_workspace(self, two_roots):
        one, two = two_roots
        manager = WorkspaceManager()
        manager.init_workspace(path_to_uri(one))
        manager.init_workspace(path_to_uri(two))

        manager.set_active_document(path_to_uri(two / "b.scss"))
        assert manager.current is manager.get_workspace(path_to_uri(two))
        assert [s.name for s in manager.resolve_workspace_symbol("")] == ["$b"]

        manager.set_active_document(path_to_uri(one / "a.scss"))
        assert [s.name for s in manager.resolve_workspace_symbol("")] == ["$a"]

    def test_document_outside_every_root(self, two_roots):
        one, _ = two_roots
        manager = WorkspaceManager()
        manager.init_workspace(path_to_uri(one))
        manager.set_active_document(path_to_uri(one / "a.scss"))

        assert manager.set_active_document("file:///elsewhere/x.scss") is None
        assert manager.current is None

    def test_remove_current_workspace(self, two_roots):
        one, _ = two_roots
        manager = WorkspaceManager()
        workspace = manager.init_workspace(path_to_uri(one))
        manager.set_active_document(path_to_uri(one / "a.scss"))

        assert manager.remove_workspace(path_to_uri(one)) is True
        assert manager.current is None
        assert manager.get_workspace(path_to_uri(one)) is None
        assert len(workspace.store) == 0
        assert manager.remove_workspace(path_to_uri(one)) is False

    def test_remove_other_workspace_keeps_current(self, two_roots):
        one, two = two_roots
        manager = WorkspaceManager()
        manager.init_workspace(path_to_uri(one))
        manager.init_workspace(path_to_uri(two))
        manager.set_active_document(path_to_uri(one / "a.scss"))

        manager.remove_workspace(path_to_uri(two))

        assert manager.current is manager.get_workspace(path_to_uri(one))

    def test_update_by_changed_files_groups_by_workspace(self, two_roots, monkeypatch):
        one, two = two_roots
        manager = WorkspaceManager()
        manager.init_workspace(path_to_uri(one))
        manager.init_workspace(path_to_uri(two))

        calls = []
        monkeypatch.setattr(Workspace, "update", lambda self, files: calls.append((self.uri, files)) or [])

        manager.update_by_changed_files([
            path_to_uri(one / "a.scss"),
            path_to_uri(two / "b.scss"),
            path_to_uri(one / "new.scss"),
            "file:///elsewhere/x.scss",
        ])

        assert calls == [
            (path_to_uri(one), [str(one / "a.scss"), str(one / "new.scss")]),
            (path_to_uri(two), [str(two / "b.scss")]),
        ]

    def test_update_by_changed_files_reindexes(self, two_roots):
        one, _ = two_roots
        manager = WorkspaceManager()
        workspace = manager.init_workspace(path_to_uri(one))

        (one / "a.scss").unlink()
        (one / "c.scss").write_text("$c: 1;\n", encoding="utf-8")
        manager.update_by_changed_files([path_to_uri(one / "a.scss"), path_to_uri(one / "c.scss")])

        assert workspace.store.uris() == [path_to_uri(one / "c.scss")]

    def test_uris_are_normalized(self, two_roots):
        one, _ = two_roots
        manager = WorkspaceManager()
        manager.init_workspace(str(one) + "/")

        assert manager.get_workspace(path_to_uri(one)) is not None


class TestWorkspaceLocking:
    def test_update_waits_for_running_scan(self, write_files):
        root = write_files({"a.scss": "$a: 1;\n"})
        workspace = Workspace(path_to_uri(root))
        scanning = threading.Event()
        release = threading.Event()
        finished = []

        original = workspace.stylesheets.get_record

        def slow_get_record(uri, text, root_uri=None):
            if not scanning.is_set():
                scanning.set()
                release.wait(timeout=5)
            return original(uri, text, root_uri)

        workspace.stylesheets.get_record = slow_get_record

        def run(name, func):
            func()
            finished.append(name)

        scan = threading.Thread(target=run, args=("scan", workspace.init))
        scan.start()
        assert scanning.wait(timeout=5)

        update = threading.Thread(target=run, args=("update", lambda: workspace.update([str(root / "a.scss")])))
        update.start()
        update.join(timeout=0.2)
        assert update.is_alive()
        assert finished == []

        release.set()
        scan.join(timeout=5)
        update.join(timeout=5)

        assert finished == ["scan", "update"]
