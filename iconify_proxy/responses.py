from __future__ import annotations

import io
from typing import Optional

from flask import send_file

from .service import PLACEHOLDER_SVG


def send_svg(data: bytes, *, cache_state: str, access_path: Optional[str] = None):
    response = send_file(io.BytesIO(data), mimetype="image/svg+xml")
    response.headers["X-Icon-Cache"] = cache_state
    if access_path is not None:
        response.headers["X-Icon-Path"] = access_path
    return response


def send_placeholder():
    response = send_svg(PLACEHOLDER_SVG, cache_state="PLACEHOLDER")
    response.headers["Cache-Control"] = "no-store"
    return response
