"""Infrastructure helpers for fetching, storing and coordinating icons."""

from .cache import IconCache
from .coordinator import FetchCoordinator, fetch_icon
from .filesystem import FileSystem, LocalFileSystem
from .loop import BackgroundLoop
from .network import HttpClient, RequestsHttpClient

__all__ = [
    "IconCache",
    "FetchCoordinator",
    "fetch_icon",
    "FileSystem",
    "LocalFileSystem",
    "BackgroundLoop",
    "HttpClient",
    "RequestsHttpClient",
]
