import asyncio
import logging
from typing import Awaitable, Callable, Dict, Optional

from .models import ModMetadata

logger = logging.getLogger(__name__)


class MetadataCache:
    """In-memory cache of resolved mod metadata keyed by logical name.

    Concurrent requests for the same uncached name share one in-flight
    resolution. Failed resolutions are not stored.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, ModMetadata] = {}
        self._pending: Dict[str, "asyncio.Future[ModMetadata]"] = {}

    def get(self, name: str) -> Optional[ModMetadata]:
        return self._entries.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    async def resolve(self, name: str, loader: Callable[[], Awaitable[ModMetadata]]) -> ModMetadata:
        cached = self._entries.get(name)
        if cached is not None:
            logger.debug("Metadata cache hit for %s", name)
            return cached

        pending = self._pending.get(name)
        if pending is not None:
            return await asyncio.shield(pending)

        future: "asyncio.Future[ModMetadata]" = asyncio.get_running_loop().create_future()
        self._pending[name] = future
        try:
            result = await loader()
        except Exception as e:
            future.set_exception(e)
            # Mark retrieved so a failure with no waiters is not reported as unhandled.
            future.exception()
            raise
        else:
            self._entries[name] = result
            future.set_result(result)
            return result
        finally:
            if not future.done():
                future.cancel()
            del self._pending[name]
