"""Revoked access tokens.

A logged-out token stays on the list until it would have expired anyway.
"""

import asyncio
from datetime import UTC, datetime
from functools import lru_cache
from typing import Protocol

from dpi_admin.config import settings
from dpi_admin.core.cache.redis import redis_client
from dpi_admin.core.constants import REVOKED_TOKEN_PREFIX


class RevocationList(Protocol):
    async def revoke(self, jti: str, expires_at: datetime) -> None: ...

    async def is_revoked(self, jti: str) -> bool: ...


class MemoryRevocationList:
    """Process-local revocation list."""

    def __init__(self) -> None:
        self._revoked: dict[str, datetime] = {}
        self._lock = asyncio.Lock()

    async def revoke(self, jti: str, expires_at: datetime) -> None:
        async with self._lock:
            self._purge()
            self._revoked[jti] = expires_at

    async def is_revoked(self, jti: str) -> bool:
        async with self._lock:
            self._purge()
            return jti in self._revoked

    def _purge(self) -> None:
        now = datetime.now(UTC)
        for jti in [j for j, exp in self._revoked.items() if exp <= now]:
            del self._revoked[jti]


class RedisRevocationList:
    """Revocation list shared between workers; keys expire with the token."""

    def __init__(self, prefix: str = REVOKED_TOKEN_PREFIX) -> None:
        self.prefix = prefix

    async def revoke(self, jti: str, expires_at: datetime) -> None:
        ttl = int((expires_at - datetime.now(UTC)).total_seconds())
        if ttl <= 0:
            return
        async with redis_client() as client:
            await client.setex(f"{self.prefix}{jti}", ttl, "1")

    async def is_revoked(self, jti: str) -> bool:
        async with redis_client() as client:
            return await client.exists(f"{self.prefix}{jti}") > 0


@lru_cache
def get_revocation_list() -> RevocationList:
    """Process-wide revocation list selected by SESSION_BACKEND."""
    if settings.session_backend == "redis":
        return RedisRevocationList()
    return MemoryRevocationList()
