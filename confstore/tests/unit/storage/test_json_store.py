import json

import pytest

from confstore.storage.json_store import JSONStoreFile


def test_json_store_file_roundtrip(tmp_path):
    path = tmp_path / "store.json"
    store = JSONStoreFile(path)
    store.save({"server": {"port": 8080}, "name": "démo"})

    assert store.load() == {"server": {"port": 8080}, "name": "démo"}
    assert store.load() == store.load()


def test_save_writes_tab_indented_utf8(tmp_path):
    path = tmp_path / "store.json"
    JSONStoreFile(path).save({"b": 1, "a": "ü"})

    text = path.read_text(encoding="utf-8")
    assert text == '{\n\t"b": 1,\n\t"a": "ü"\n}'


def test_missing_file_loads_empty_and_creates_directory(tmp_path):
    path = tmp_path / "nested" / "dir" / "store.json"
    store = JSONStoreFile(path)

    assert store.load() == {}
    assert path.parent.is_dir()
    assert not path.exists()


def test_corrupt_file_loads_empty_and_is_left_untouched(tmp_path):
    # Unparsable content is treated as "no data" instead of raising; the
    # damaged bytes survive until the next save overwrites them.
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")
    store = JSONStoreFile(path)

    assert store.load() == {}
    assert path.read_text(encoding="utf-8") == "{not json"

    store.save({"a": 1})
    assert json.loads(path.read_text(encoding="utf-8")) == {"a": 1}


def test_invalid_utf8_loads_empty(tmp_path):
    path = tmp_path / "store.json"
    path.write_bytes(b"\xff\xfe\x00garbage")

    assert JSONStoreFile(path).load() == {}


def test_non_object_document_is_returned_as_is(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    assert JSONStoreFile(path).load() == [1, 2, 3]


def test_other_io_errors_propagate(tmp_path):
    path = tmp_path / "store.json"
    path.mkdir()

    with pytest.raises(OSError):
        JSONStoreFile(path).load()


def test_unserialisable_value_keeps_previous_content(tmp_path):
    path = tmp_path / "store.json"
    store = JSONStoreFile(path)
    store.save({"a": 1})

    with pytest.raises(TypeError):
        store.save({"a": object()})

    assert store.load() == {"a": 1}


def test_save_recreates_deleted_directory(tmp_path):
    path = tmp_path / "gone" / "store.json"
    store = JSONStoreFile(path)
    store.save({"a": 1})
    path.unlink()
    path.parent.rmdir()

    store.save({"a": 2})

    assert store.load() == {"a": 2}


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_float_keeps_previous_content(tmp_path, value):
    path = tmp_path / "store.json"
    store = JSONStoreFile(path)
    store.save({"ratio": 0.5})

    with pytest.raises(ValueError):
        store.save({"ratio": value})

    assert path.read_text(encoding="utf-8") == '{\n\t"ratio": 0.5\n}'
