"""Consumer-facing icon lookup.

Callers ask for an icon by key and presentation parameters and get back the
access path a renderer understands, or ``None`` when the icon could not be
cached. Hosts are expected to show :data:`PLACEHOLDER_SVG` in that case.
"""

from __future__ import annotations

import logging
import os
from typing import Awaitable, Callable, Optional, Protocol, TypeVar

from .config import SETTINGS
from .errors import CancelledByCaller
from .icons.key import IconKey, KeyLike, as_key
from .icons.paths import Tint
from .infrastructure.cache import IconCache
from .infrastructure.coordinator import FetchCoordinator
from .infrastructure.filesystem import FileSystem, LocalFileSystem
from .infrastructure.network import HttpClient, RequestsHttpClient


logger = logging.getLogger(__name__)

T = TypeVar("T")

TextureLoader = Callable[[FileSystem, str], Awaitable[T]]

PLACEHOLDER_SVG = (
    b'<svg xmlns="http://www.w3.org/2000/svg" width="32" height="32" viewBox="0 0 32 32">'
    b'<rect width="32" height="32" fill="#ffffff"/>'
    b"</svg>"
)


class CancelToken(Protocol):
    def is_set(self) -> bool: ...


def _check_cancelled(cancel: Optional[CancelToken], key: IconKey) -> None:
    if cancel is not None and cancel.is_set():
        raise CancelledByCaller(f"Request for icon {key} was cancelled")


class IconService:
    def __init__(
        self,
        *,
        fs: Optional[FileSystem] = None,
        http: Optional[HttpClient] = None,
        base_url: Optional[str] = None,
        cache_dir: Optional[str | os.PathLike[str]] = None,
    ) -> None:
        self.fs = fs if fs is not None else LocalFileSystem(cache_dir or SETTINGS.cache_dir)
        self.http = http if http is not None else RequestsHttpClient()
        self.cache = IconCache(self.fs)
        self.coordinator = FetchCoordinator(self.http, self.cache, base_url=base_url)

    async def ensure_cached(self, key: KeyLike) -> bool:
        return await self.coordinator.ensure_cached(as_key(key))

    async def resolve(
        self,
        key: KeyLike,
        width: float,
        height: float,
        tint: Tint | None = None,
        cancel: Optional[CancelToken] = None,
    ) -> Optional[str]:
        """Return the renderer access path for ``key`` or ``None`` if unavailable.

        ``cancel`` is only consulted once the cache has been populated, so the
        fetch still completes for later requests when this caller gives up.
        Raises :class:`InvalidKeyFormat` for malformed keys and
        :class:`CancelledByCaller` when ``cancel`` is set.
        """

        icon = as_key(key)
        cached = await self.coordinator.ensure_cached(icon)
        _check_cancelled(cancel, icon)

        if not cached:
            logger.debug("No image available for %s", icon)
            return None
        return self.cache.access_path(icon, width, height, tint)

    async def load_texture(
        self,
        key: KeyLike,
        width: float,
        height: float,
        loader: TextureLoader[T],
        tint: Tint | None = None,
        cancel: Optional[CancelToken] = None,
    ) -> Optional[T]:
        """Resolve ``key`` and hand the access path to ``loader``."""

        icon = as_key(key)
        path = await self.resolve(icon, width, height, tint, cancel)
        if path is None:
            return None

        texture = await loader(self.fs, path)
        _check_cancelled(cancel, icon)
        return texture

    def read(self, key: KeyLike) -> Optional[bytes]:
        return self.cache.read(as_key(key))
