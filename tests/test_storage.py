import fnmatch

import pytest

from db.storage import InMemoryStore, RedisStore, create_store


class FakeRedis:
    """Minimal async stand-in for redis.asyncio.Redis."""

    def __init__(self):
        self.data = {}
        self.closed = False

    async def ping(self):
        return True

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value):
        self.data[key] = value

    async def delete(self, *keys):
        return sum(1 for key in keys if self.data.pop(key, None) is not None)

    async def scan_iter(self, match="*"):
        for key in list(self.data):
            if fnmatch.fnmatchcase(key, match):
                yield key.encode("utf-8")

    async def aclose(self):
        self.closed = True


@pytest.mark.asyncio
async def test_in_memory_store_round_trip():
    store = InMemoryStore()
    await store.set("k", [{"score": 1}])

    assert await store.get("k") == [{"score": 1}]
    assert await store.get("missing") is None
    assert await store.delete("k") is True
    assert await store.delete("k") is False


@pytest.mark.asyncio
async def test_in_memory_store_copies_values():
    store = InMemoryStore()
    value = [{"score": 1}]
    await store.set("k", value)
    value.append({"score": 2})

    fetched = await store.get("k")
    fetched.append({"score": 3})

    assert await store.get("k") == [{"score": 1}]


@pytest.mark.asyncio
async def test_redis_store_prefixes_and_serializes():
    client = FakeRedis()
    store = RedisStore("redis://localhost:6379", client=client)
    await store.connect()

    await store.set("quiz_history:u1", [{"score": 3}])

    assert b'"score": 3' in client.data["quiz_service:quiz_history:u1"]
    assert await store.get("quiz_history:u1") == [{"score": 3}]
    assert await store.delete("quiz_history:u1") is True
    assert await store.get("quiz_history:u1") is None

    await store.close()
    assert client.closed


def test_create_store_selects_backend():
    assert isinstance(create_store(""), InMemoryStore)
    assert isinstance(create_store("redis://localhost:6379"), RedisStore)


@pytest.mark.asyncio
async def test_in_memory_store_lists_keys_by_prefix():
    store = InMemoryStore()
    await store.set("quiz_history:u1", [])
    await store.set("quiz_history:u2", [])
    await store.set("other:u3", [])

    assert sorted(await store.keys("quiz_history:")) == ["quiz_history:u1", "quiz_history:u2"]
    assert len(await store.keys()) == 3


@pytest.mark.asyncio
async def test_redis_store_lists_keys_without_prefix():
    client = FakeRedis()
    client.data["unrelated:quiz_history:x"] = b"[]"
    store = RedisStore("redis://localhost:6379", client=client)
    await store.set("quiz_history:u1", [])
    await store.set("quiz_history:u2", [])

    assert sorted(await store.keys("quiz_history:")) == ["quiz_history:u1", "quiz_history:u2"]
