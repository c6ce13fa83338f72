"""Redis connection handle.

Owns the asyncio Redis client used by the student store. The handle is
created and opened by the application lifespan and closed on shutdown;
nothing in the package reaches for a process-wide client.
"""

import redis.asyncio as redis

from roster.config.models.storage import RedisConfig
from roster.db.errors import StorageUnavailable
from roster.observability.logging import get_logger

logger = get_logger(__name__)


class RedisHandle:
    """Manages a redis.asyncio client with explicit lifecycle.

    Usage:
        handle = RedisHandle(RedisConfig(url="redis://..."))
        await handle.connect()
        try:
            client = await handle.acquire()
            await client.hgetall("student:1")
        finally:
            await handle.close()
    """

    def __init__(
        self,
        config: RedisConfig | None = None,
        client: redis.Redis | None = None,
    ) -> None:
        """Initialize handle configuration.

        Args:
            config: Redis connection settings (uses defaults if not provided)
            client: An already-created client to adopt instead of connecting
        """
        self._config = config or RedisConfig()
        self._client = client

    @property
    def config(self) -> RedisConfig:
        return self._config

    async def connect(self) -> redis.Redis:
        """Create the client and verify the server answers.

        Returns:
            The connected client (the existing one if already connected)

        Raises:
            StorageUnavailable: If the server cannot be reached
        """
        if self._client is not None:
            return self._client

        client = redis.from_url(
            self._config.resolved_url(),
            decode_responses=True,
            socket_timeout=self._config.socket_timeout,
            socket_connect_timeout=self._config.socket_timeout,
        )
        try:
            await client.ping()
        except redis.RedisError as e:
            await client.aclose()
            logger.error("redis_connection_failed", error=str(e))
            raise StorageUnavailable(f"Failed to connect to Redis: {e}", cause=e) from e

        self._client = client
        logger.info("redis_connected", url=self._config.resolved_url().split("@")[-1])
        return client

    async def close(self) -> None:
        """Close the client gracefully."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("redis_closed")

    async def acquire(self) -> redis.Redis:
        """Get the client, connecting first if needed.

        A server that was down at startup is picked up on the next call.

        Raises:
            StorageUnavailable: If the server cannot be reached
        """
        if self._client is None:
            return await self.connect()
        return self._client

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    async def health_check(self) -> bool:
        """Check that the server responds to PING.

        A handle that is not connected tries to connect first, so a server
        that was down at startup reports healthy once it is back.
        """
        try:
            client = await self.acquire()
        except StorageUnavailable:
            return False

        try:
            return bool(await client.ping())
        except redis.RedisError as e:
            logger.warning("redis_health_check_failed", error=str(e))
            return False
