"""Icon identity: ``namespace:name`` parsing and the paths derived from it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union
from urllib.parse import quote, urlencode

from ..errors import InvalidKeyFormat

SEPARATOR = ":"

# Segments become cache directories and file names.
PATH_UNSAFE = ("/", "\\")

# The API renders at a fixed px size unless told to fill its viewport.
WIDTH_HINT = {"width": "100%"}


def _is_valid_segment(segment: str) -> bool:
    if not segment or segment in (".", ".."):
        return False
    return not any(ch in segment for ch in (SEPARATOR,) + PATH_UNSAFE)


@dataclass(frozen=True)
class IconKey:
    namespace: str
    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.namespace, str) or not isinstance(self.name, str):
            raise InvalidKeyFormat(
                f"Icon must be in the format 'namespace:name', got {self.namespace!r}:{self.name!r}"
            )

        namespace = self.namespace.strip()
        name = self.name.strip()
        if not _is_valid_segment(namespace) or not _is_valid_segment(name):
            raise InvalidKeyFormat(
                f"Icon must be in the format 'namespace:name', got '{self.namespace}:{self.name}'"
            )

        object.__setattr__(self, "namespace", namespace)
        object.__setattr__(self, "name", name)

    @classmethod
    def parse(cls, text: str) -> "IconKey":
        if not isinstance(text, str) or SEPARATOR not in text:
            raise InvalidKeyFormat(f"Icon must be in the format 'namespace:name', got {text!r}")

        parts = text.split(SEPARATOR)
        if len(parts) != 2:
            raise InvalidKeyFormat(f"Icon must be in the format 'namespace:name', got {text!r}")

        return cls(parts[0], parts[1])

    def __str__(self) -> str:
        return f"{self.namespace}{SEPARATOR}{self.name}"

    def remote_url(self, base_url: str) -> str:
        base = base_url.rstrip("/")
        path = f"{quote(self.namespace, safe='')}/{quote(self.name, safe='')}.svg"
        return f"{base}/{path}?{urlencode(WIDTH_HINT)}"

    @property
    def cache_directory(self) -> str:
        return self.namespace

    @property
    def cache_path(self) -> str:
        return f"{self.namespace}/{self.name}.svg"

    @property
    def cache_tintable_path(self) -> str:
        return f"{self.namespace}/{self.name}.t.svg"


KeyLike = Union[IconKey, str]


def as_key(value: KeyLike) -> IconKey:
    """Return ``value`` as an :class:`IconKey`, parsing strings."""

    if isinstance(value, IconKey):
        return value
    return IconKey.parse(value)
