from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol
from uuid import uuid4


class FileSystem(Protocol):
    """Storage capability the icon cache is written through.

    Paths are relative, ``/``-separated cache paths such as ``mdi/home.svg``.
    """

    def exists(self, path: str) -> bool: ...

    def create_directory(self, path: str) -> None: ...

    def write_text(self, path: str, content: str) -> None: ...

    def read_all(self, path: str) -> bytes: ...


class LocalFileSystem:
    """:class:`FileSystem` rooted at a directory on local disk."""

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self.root = Path(root).resolve()

    def _resolve(self, path: str) -> Path:
        target = (self.root / path).resolve()
        if target != self.root and self.root not in target.parents:
            raise ValueError(f"Path escapes cache root: {path}")
        return target

    def exists(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def create_directory(self, path: str) -> None:
        self._resolve(path).mkdir(parents=True, exist_ok=True)

    def write_text(self, path: str, content: str) -> None:
        # Temp file then rename, so ``exists`` never sees a half-written file.
        target = self._resolve(path)
        tmp_path = target.with_name(f".{target.name}.tmp.{uuid4().hex}")
        try:
            tmp_path.write_text(content, encoding="utf-8")
            os.replace(tmp_path, target)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise

    def read_all(self, path: str) -> bytes:
        return self._resolve(path).read_bytes()
