"""Application package exports."""

from .app import APP_VERSION, app, create_app
from .errors import (
    CancelledByCaller,
    FetchError,
    FetchNotFound,
    FetchTransportError,
    IconError,
    InvalidKeyFormat,
)
from .icons import IconKey, build_access_path, is_tintable
from .service import PLACEHOLDER_SVG, IconService
from . import icons, infrastructure

__version__ = APP_VERSION

__all__ = [
    "APP_VERSION",
    "__version__",
    "app",
    "create_app",
    "CancelledByCaller",
    "FetchError",
    "FetchNotFound",
    "FetchTransportError",
    "IconError",
    "InvalidKeyFormat",
    "IconKey",
    "build_access_path",
    "is_tintable",
    "PLACEHOLDER_SVG",
    "IconService",
    "icons",
    "infrastructure",
]
