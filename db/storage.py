import copy
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import redis.asyncio as redis

logger = logging.getLogger(__name__)

REDIS_KEY_PREFIX = "quiz_service:"


class KeyValueStore(ABC):
    """Per-key storage used by repositories; values are JSON-compatible."""

    async def connect(self) -> None:
        pass

    async def close(self) -> None:
        pass

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        ...

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        ...

    @abstractmethod
    async def delete(self, key: str) -> bool:
        ...

    @abstractmethod
    async def keys(self, prefix: str = "") -> List[str]:
        ...


class InMemoryStore(KeyValueStore):
    """Process-local store; contents are lost on restart."""

    def __init__(self):
        self._data: Dict[str, Any] = {}

    async def get(self, key: str) -> Optional[Any]:
        value = self._data.get(key)
        return copy.deepcopy(value) if value is not None else None

    async def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    async def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    async def keys(self, prefix: str = "") -> List[str]:
        return [key for key in self._data if key.startswith(prefix)]


class RedisStore(KeyValueStore):
    """Redis-backed store"""

    def __init__(self, redis_url: str, key_prefix: str = REDIS_KEY_PREFIX, client: Optional[redis.Redis] = None):
        self.redis_url = redis_url
        self.key_prefix = key_prefix
        self._redis = client

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    async def connect(self) -> None:
        if self._redis is None:
            self._redis = redis.from_url(self.redis_url, decode_responses=False)
        await self._redis.ping()
        logger.info("Connected to Redis store")

    async def close(self) -> None:
        if self._redis is not None:
            await self._redis.aclose()
            self._redis = None

    async def get(self, key: str) -> Optional[Any]:
        data = await self._redis.get(self._key(key))
        if data is None:
            return None
        return json.loads(data.decode("utf-8") if isinstance(data, bytes) else data)

    async def set(self, key: str, value: Any) -> None:
        await self._redis.set(self._key(key), json.dumps(value, default=str).encode("utf-8"))

    async def delete(self, key: str) -> bool:
        return await self._redis.delete(self._key(key)) > 0

    async def keys(self, prefix: str = "") -> List[str]:
        keys = []
        async for raw in self._redis.scan_iter(match=f"{self._key(prefix)}*"):
            key = raw.decode("utf-8") if isinstance(raw, bytes) else raw
            keys.append(key[len(self.key_prefix):])
        return keys


def create_store(redis_url: Optional[str] = None) -> KeyValueStore:
    if redis_url:
        return RedisStore(redis_url)
    return InMemoryStore()
