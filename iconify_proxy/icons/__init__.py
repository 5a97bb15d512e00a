"""Icon identity, content classification and access-path building."""

from .classify import TINT_MARKER, is_tintable
from .key import IconKey, KeyLike, as_key
from .paths import MIN_EDGE, Tint, build_access_path, build_path_params, clamp_edge, normalize_tint

__all__ = [
    "TINT_MARKER",
    "is_tintable",
    "IconKey",
    "KeyLike",
    "as_key",
    "MIN_EDGE",
    "Tint",
    "build_access_path",
    "build_path_params",
    "clamp_edge",
    "normalize_tint",
]
