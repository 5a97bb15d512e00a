"""Single-flight population of the icon cache.

Per key the state is derived, never stored:

* *cached*   - either cache file exists; nothing to do.
* *fetching* - the key is in the in-flight map; await the running task.
* *idle*     - neither; the caller starts the population task.

The check-and-claim in :meth:`FetchCoordinator.ensure_cached` has no ``await``
between the lookup and the insert, so on one event loop two callers can never
both see *idle* for the same key. All callers await the same task through
:func:`asyncio.shield`, so a caller that is cancelled stops waiting without
stopping the fetch the other callers depend on.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, Optional

from ..config import SETTINGS
from ..errors import FetchError, FetchNotFound, FetchTransportError
from ..icons.key import IconKey
from .cache import IconCache
from .network import HttpClient


logger = logging.getLogger(__name__)


def fetch_icon(http: HttpClient, key: IconKey, base_url: str) -> str:
    """Perform one GET for ``key`` and return the SVG text."""

    url = key.remote_url(base_url)
    status, body = http.get(url)

    # The API answers unknown icons with a literal "404" body, usually with a 200.
    if status == 404 or body == "404":
        raise FetchNotFound(f"Icon {key} not found at {url}")
    if not 200 <= status < 300:
        raise FetchTransportError(f"Fetching icon {key} failed with HTTP {status}")
    return body


class FetchCoordinator:
    def __init__(
        self,
        http: HttpClient,
        cache: IconCache,
        *,
        base_url: Optional[str] = None,
    ) -> None:
        self.http = http
        self.cache = cache
        self.base_url = base_url or SETTINGS.api_url
        # plain cache path -> population task
        self._in_flight: Dict[str, "asyncio.Task[bool]"] = {}

    @property
    def in_flight_count(self) -> int:
        return len(self._in_flight)

    def is_in_flight(self, key: IconKey) -> bool:
        return key.cache_path in self._in_flight

    async def ensure_cached(self, key: IconKey) -> bool:
        """Make sure ``key`` is cached, fetching it at most once process-wide.

        Returns ``True`` when a cache file exists afterwards and ``False`` when
        the fetch failed. Fetch errors are logged, not raised; the next call
        for the same key starts a fresh attempt.
        """

        if self.cache.is_cached(key):
            return True

        task = self._in_flight.get(key.cache_path)
        if task is None:
            task = asyncio.get_running_loop().create_task(
                self._populate(key), name=f"icon-fetch:{key}"
            )
            self._in_flight[key.cache_path] = task
            task.add_done_callback(lambda done: self._release(key, done))
        else:
            logger.debug("Icon %s is already being fetched, waiting", key)

        return await asyncio.shield(task)

    async def _populate(self, key: IconKey) -> bool:
        try:
            logger.info("Cache miss for icon '%s', fetching from API...", key)
            content = await asyncio.to_thread(fetch_icon, self.http, key, self.base_url)
            path = await asyncio.to_thread(self._store, key, content)
            logger.info("Fetched %s into %s", key, path)
            return True
        except FetchNotFound as exc:
            logger.warning("%s", exc)
            return False
        except FetchError as exc:
            logger.error("Failed to fetch icon %s: %s", key, exc)
            return False
        except Exception:
            logger.exception("Unexpected error while fetching icon %s", key)
            return False
        finally:
            self._release(key)

    def _store(self, key: IconKey, content: str) -> str:
        try:
            return self.cache.store(key, content)
        except (OSError, ValueError) as exc:
            raise FetchTransportError(f"Could not store icon {key}: {exc}") from exc

    def _release(self, key: IconKey, task: "Optional[asyncio.Task[bool]]" = None) -> None:
        current = self._in_flight.get(key.cache_path)
        if task is None or current is task:
            self._in_flight.pop(key.cache_path, None)
