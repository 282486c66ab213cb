from redis.asyncio import Redis
from redis.exceptions import RedisError

from aes_demo.core.result import Err, Ok, Result, StatusCode, error
from aes_demo.shared.logger import Logger

logger = Logger(__name__).get_logger()


class CacheHelper:
    """Redis-backed key/value cache with the same Result contract as the pipeline.

    Nothing in the request pipeline depends on it; the app connects it at
    startup only when ``cache.enabled`` is set.
    """

    def __init__(self, client: Redis | None = None):
        self.client = client
        self.is_connected = False

    async def init(self, url: str) -> None:
        if self.client is None:
            self.client = Redis.from_url(url, decode_responses=True)

        try:
            await self.client.ping()
        except (RedisError, OSError) as e:
            self.is_connected = False
            logger.error("Cache client error: %s", e)
            return

        self.is_connected = True
        logger.info("Cache client ready.")

    def _connection_lost(self, e: Exception) -> Err:
        self.is_connected = False
        logger.error("Cache client error: %s", e)
        return error(StatusCode.SERVICE_UNAVAILABLE, "Cache client not connected")

    async def get(self, key: str) -> Result[str | None]:
        if not self.is_connected:
            return error(StatusCode.SERVICE_UNAVAILABLE, "Cache client not connected")
        if not key:
            return error(StatusCode.BAD_REQUEST, "Key is required")

        try:
            data = await self.client.get(key)
        except (RedisError, OSError) as e:
            return self._connection_lost(e)
        return Ok(data)

    async def set(self, key: str, value: str) -> Result[None]:
        if not self.is_connected:
            return error(StatusCode.SERVICE_UNAVAILABLE, "Cache client not connected")
        if not key:
            return error(StatusCode.BAD_REQUEST, "Key is required")
        if not value:
            return error(StatusCode.BAD_REQUEST, "Value is required")

        try:
            await self.client.set(key, value)
        except (RedisError, OSError) as e:
            return self._connection_lost(e)
        return Ok(None)

    async def disconnect(self) -> None:
        if self.is_connected:
            await self.client.aclose()
            self.is_connected = False
            logger.info("Cache client closed.")
