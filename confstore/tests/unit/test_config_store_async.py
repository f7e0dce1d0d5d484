import asyncio

import pytest

from confstore import ConfigStore


@pytest.fixture
def store(tmp_path):
    return ConfigStore(cwd=tmp_path, config_name="cfg", use_async=True)


def test_set_async_then_get_async(store):
    async def scenario():
        await store.set_async("server.port", 8080)
        await store.set_async({"a.b": 1, "c": 2})
        return (
            await store.get_async("server.port"),
            await store.get_async("a"),
            await store.get_async("missing", "fallback"),
        )

    assert asyncio.run(scenario()) == (8080, {"b": 1}, "fallback")
    assert store.get("c") == 2


def test_set_async_rejects_bad_shape_before_awaiting(store):
    with pytest.raises(TypeError):
        store.set_async(3.5, "value")
    with pytest.raises(TypeError):
        store.set_async("key")


def test_has_delete_clear_async(store):
    async def scenario():
        await store.set_async({"a.b": 1, "c": 2})
        present = await store.has_async("a.b")
        await store.delete_async("a.b")
        gone = not await store.has_async("a.b")
        await store.clear_async()
        return present, gone

    assert asyncio.run(scenario()) == (True, True)
    assert store.size == 0


def test_merge_defaults_async(tmp_path):
    store = ConfigStore(cwd=tmp_path, defaults={"a": 1, "b": 2}, use_async=True)
    store.save_store({"a": 5})

    asyncio.run(store.merge_defaults_async())

    assert store.load_store() == {"a": 5, "b": 2}


def test_get_async_on_corrupt_file(store):
    store.path.parent.mkdir(parents=True, exist_ok=True)
    store.path.write_text("{{{", encoding="utf-8")

    assert asyncio.run(store.get_async("anything", "d")) == "d"


def test_async_io_errors_surface_on_await(tmp_path):
    blocker = tmp_path / "file.txt"
    blocker.write_text("", encoding="utf-8")
    store = ConfigStore(cwd=blocker, use_async=True)

    with pytest.raises(OSError):
        asyncio.run(store.get_async("a"))
    with pytest.raises(OSError):
        asyncio.run(store.set_async("a", 1))


def test_async_store_roundtrip(store):
    async def scenario():
        await store.save_store_async({"x": [1, 2]})
        return await store.load_store_async()

    assert asyncio.run(scenario()) == {"x": [1, 2]}
