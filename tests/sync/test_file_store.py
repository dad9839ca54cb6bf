from __future__ import annotations

import pytest

from src.attendance_sync.attendance_sync.core.exceptions import StoreReadError


def test_missing_file_reads_as_none(file_store):
    assert file_store.read() is None


def test_write_is_pretty_printed_with_two_spaces(file_store):
    file_store.write({"activeSession": None, "records": []})

    text = file_store.path.read_text(encoding="utf-8")
    assert text == '{\n  "activeSession": null,\n  "records": []\n}'
    assert not file_store.tmp_path.exists()


def test_write_replaces_whole_document(file_store):
    file_store.write({"activeSession": {"id": "s1", "name": "A"}, "records": [], "extra": 1})
    file_store.write({"activeSession": None, "records": []})

    assert file_store.read() == {"activeSession": None, "records": []}


def test_tmp_path_is_sibling(file_store):
    assert file_store.tmp_path.parent == file_store.path.parent
    assert file_store.tmp_path.name == "db.json.tmp"


def test_corrupt_file_raises(file_store):
    file_store.path.write_text("", encoding="utf-8")
    with pytest.raises(StoreReadError):
        file_store.read()


def test_non_object_document_raises(file_store):
    file_store.path.write_text("[]", encoding="utf-8")
    with pytest.raises(StoreReadError):
        file_store.read()


def test_invalid_utf8_raises_store_error(file_store):
    file_store.path.write_bytes(b'{"records": [\xff\xfe]}')
    with pytest.raises(StoreReadError):
        file_store.read()
