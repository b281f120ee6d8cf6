"""
Tests for progress marker persistence.
"""

import pytest

from kubeflow_setup.state_store import FileMarkerStore, MemoryMarkerStore


@pytest.fixture
def store(tmp_path):
    return FileMarkerStore(tmp_path / "state" / ".kubeflow_setup_progress")


def test_missing_file_loads_none(store):
    assert store.load() is None
    assert not store.exists()


def test_save_creates_parent_and_writes_single_token(store):
    store.save("microk8s_installed")

    assert store.path.read_text(encoding="utf-8") == "microk8s_installed\n"
    assert store.load() == "microk8s_installed"


def test_save_overwrites(store):
    store.save("start")
    store.save("juju_installed")

    assert store.path.read_text(encoding="utf-8") == "juju_installed\n"


def test_no_temp_files_left_behind(store):
    store.save("start")
    store.save("model_created")

    assert [p.name for p in store.path.parent.iterdir()] == [store.path.name]


def test_load_reads_file_written_by_shell(store):
    # `echo "$1" > "$PROGRESS_FILE"` style content
    store.path.parent.mkdir(parents=True)
    store.path.write_text("  addons_enabled\n\n", encoding="utf-8")

    assert store.load() == "addons_enabled"


def test_empty_file_loads_none(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text("\n", encoding="utf-8")

    assert store.load() is None


@pytest.mark.parametrize("bad", ["", "two words", "line\nbreak"])
def test_rejects_non_token(store, bad):
    with pytest.raises(ValueError):
        store.save(bad)


def test_reset(store):
    assert store.reset() is False
    store.save("start")

    assert store.reset() is True
    assert not store.exists()


def test_expands_user(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))

    s = FileMarkerStore("~/.kubeflow_setup_progress")

    assert s.path == tmp_path / ".kubeflow_setup_progress"


def test_memory_store_history():
    s = MemoryMarkerStore("start")
    s.save("a")
    s.save("b")

    assert s.load() == "b"
    assert s.history == ["a", "b"]
