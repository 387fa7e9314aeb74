import pytest

from pysitemaint.marker import MarkerFileStore
from pysitemaint.models import MaintenanceMarker


@pytest.fixture
def store(tmp_path) -> MarkerFileStore:
    return MarkerFileStore(path=str(tmp_path / ".maintenance"))


def test_read_missing_file(store):
    assert store.read() is None
    assert not store.exists()


def test_write_always_on(store, tmp_path):
    store.write()

    assert (tmp_path / ".maintenance").read_text(encoding="utf-8") == "<?php $upgrading = time();"
    assert store.exists()
    assert store.read() == MaintenanceMarker(timestamp=None)


def test_write_timestamp(store, tmp_path):
    store.write(timestamp=1700000000)

    assert (tmp_path / ".maintenance").read_text(encoding="utf-8") == "<?php $upgrading = 1700000000;"
    assert store.read().timestamp == 1700000000


def test_write_overwrites_in_full(store):
    store.write(timestamp=1700000000)
    store.write()

    assert store.read().timestamp is None


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("<?php $upgrading=123 ;", 123),
        ("<?php\n$upgrading =\n  456;", 456),
        ("<?php $upgrading = 1; $upgrading = 2;", 1),
        ("<?php $upgrading = 789", 789),
    ],
)
def test_read_first_integer_assignment(store, tmp_path, content, expected):
    (tmp_path / ".maintenance").write_text(content, encoding="utf-8")

    assert store.read().timestamp == expected


@pytest.mark.parametrize("content", ["", "garbage", "<?php $upgrading = 'soon';", "<?php $other = 12;"])
def test_read_unrecognized_content_is_on_without_timestamp(store, tmp_path, content):
    (tmp_path / ".maintenance").write_text(content, encoding="utf-8")

    marker = store.read()

    assert marker is not None
    assert marker.timestamp is None


def test_delete_is_idempotent(store):
    store.write()

    store.delete()
    store.delete()

    assert not store.exists()


def test_write_into_missing_directory_raises(tmp_path):
    store = MarkerFileStore(path=str(tmp_path / "missing" / ".maintenance"))

    with pytest.raises(OSError):
        store.write()


def test_read_non_utf8_content(store, tmp_path):
    (tmp_path / ".maintenance").write_bytes(b"<?php /* caf\xe9 */ $upgrading = 1700000000;")

    assert store.read().timestamp == 1700000000

    (tmp_path / ".maintenance").write_bytes(b"\xff\xfe\xe9")

    assert store.read() == MaintenanceMarker(timestamp=None)
