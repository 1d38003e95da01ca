"""Storage backends for the audit log.

Both backends keep entries newest first and drop the oldest once the
capacity is reached.
"""

import asyncio
from typing import Protocol

from dpi_admin.core.audit.models import AuditLogEntry
from dpi_admin.core.cache.redis import redis_client


class AuditStore(Protocol):
    """Capped, newest-first list of audit entries."""

    async def push(self, entry: AuditLogEntry) -> None: ...

    async def entries(self) -> list[AuditLogEntry]: ...

    async def clear(self) -> None: ...

    async def ping(self) -> bool: ...


class MemoryAuditStore:
    """Process-local audit store.

    Suitable for a single worker and for tests; entries are lost on restart.
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._entries: list[AuditLogEntry] = []
        self._lock = asyncio.Lock()

    async def push(self, entry: AuditLogEntry) -> None:
        async with self._lock:
            self._entries.insert(0, entry)
            del self._entries[self.capacity :]

    async def entries(self) -> list[AuditLogEntry]:
        async with self._lock:
            return list(self._entries)

    async def clear(self) -> None:
        async with self._lock:
            self._entries.clear()

    async def ping(self) -> bool:
        return True


class RedisAuditStore:
    """Audit store shared between workers through a Redis list."""

    def __init__(self, key: str, capacity: int) -> None:
        self.key = key
        self.capacity = capacity

    async def push(self, entry: AuditLogEntry) -> None:
        async with redis_client() as client, client.pipeline(transaction=True) as pipe:
            pipe.lpush(self.key, entry.model_dump_json())
            pipe.ltrim(self.key, 0, self.capacity - 1)
            await pipe.execute()

    async def entries(self) -> list[AuditLogEntry]:
        async with redis_client() as client:
            raw = await client.lrange(self.key, 0, -1)
        return [AuditLogEntry.model_validate_json(item) for item in raw]

    async def clear(self) -> None:
        async with redis_client() as client:
            await client.delete(self.key)

    async def ping(self) -> bool:
        async with redis_client() as client:
            return bool(await client.ping())
