from __future__ import annotations

import re
from typing import Sequence, Union

from .key import IconKey

MIN_EDGE = 32

Tint = Union[str, Sequence[int]]

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def normalize_tint(tint: Tint) -> str:
    """Normalize a tint to lower-case ``#rrggbb`` (``#rrggbbaa`` if translucent).

    Accepts hex strings with or without ``#`` in 3, 6 or 8 digit form, and
    ``(r, g, b)`` or ``(r, g, b, a)`` tuples of 0-255 integers.
    """

    if isinstance(tint, str):
        match = _HEX_RE.match(tint.strip())
        if not match:
            raise ValueError(f"Invalid tint color: {tint!r}")
        digits = match.group(1).lower()
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) == 8 and digits.endswith("ff"):
            digits = digits[:6]
        return f"#{digits}"

    channels = tuple(tint)
    if len(channels) not in (3, 4) or any(
        not isinstance(c, int) or isinstance(c, bool) or not 0 <= c <= 255 for c in channels
    ):
        raise ValueError(f"Invalid tint color: {tint!r}")
    if len(channels) == 4 and channels[3] == 255:
        channels = channels[:3]
    return "#" + "".join(f"{c:02x}" for c in channels)


def clamp_edge(value: float) -> int:
    return max(MIN_EDGE, int(value))


def build_path_params(*, tintable: bool, width: float, height: float, tint: Tint | None = None) -> str:
    params = []
    if tintable and tint is not None:
        params.append(f"color={normalize_tint(tint)}")
    params.append(f"w={clamp_edge(width)}")
    params.append(f"h={clamp_edge(height)}")
    return "?" + "&".join(params)


def build_access_path(
    key: IconKey,
    *,
    tintable: bool,
    width: float,
    height: float,
    tint: Tint | None = None,
) -> str:
    """Build the ``<cache path>?[color=..&]w=..&h=..`` string handed to a renderer.

    A tint is only encoded for tintable icons; plain icons ignore it.
    """

    base = key.cache_tintable_path if tintable else key.cache_path
    return base + build_path_params(tintable=tintable, width=width, height=height, tint=tint)
