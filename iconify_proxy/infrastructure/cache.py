from __future__ import annotations

import logging
import posixpath
from typing import Optional

from ..icons.classify import is_tintable
from ..icons.key import IconKey
from ..icons.paths import Tint, build_access_path
from .filesystem import FileSystem


logger = logging.getLogger(__name__)


class IconCache:
    """Write-once icon store on top of a :class:`FileSystem`.

    Each key owns exactly one of two files: ``<ns>/<name>.svg`` for plain
    icons or ``<ns>/<name>.t.svg`` for tintable ones. File existence is the
    only record of cache state; nothing is held in memory.
    """

    def __init__(self, fs: FileSystem) -> None:
        self.fs = fs

    def is_tintable(self, key: IconKey) -> bool:
        return self.fs.exists(key.cache_tintable_path)

    def is_cached(self, key: IconKey) -> bool:
        return self.fs.exists(key.cache_path) or self.is_tintable(key)

    def cached_path(self, key: IconKey) -> Optional[str]:
        if self.is_tintable(key):
            return key.cache_tintable_path
        if self.fs.exists(key.cache_path):
            return key.cache_path
        return None

    def store(self, key: IconKey, content: str) -> str:
        tintable = is_tintable(content)
        path = key.cache_tintable_path if tintable else key.cache_path
        self.fs.create_directory(posixpath.dirname(path))
        self.fs.write_text(path, content)
        logger.debug("Stored %s at %s (tintable=%s)", key, path, tintable)
        return path

    def read(self, key: IconKey) -> Optional[bytes]:
        path = self.cached_path(key)
        if path is None:
            return None
        return self.fs.read_all(path)

    def access_path(
        self,
        key: IconKey,
        width: float,
        height: float,
        tint: Tint | None = None,
    ) -> str:
        return build_access_path(
            key,
            tintable=self.is_tintable(key),
            width=width,
            height=height,
            tint=tint,
        )
