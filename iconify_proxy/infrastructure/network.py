from __future__ import annotations

import logging
from typing import Callable, Protocol, Tuple

import requests

from ..config import SETTINGS
from ..errors import FetchTransportError


SessionFactory = Callable[[], requests.Session]
HttpResponse = Tuple[int, str]

logger = logging.getLogger(__name__)


class HttpClient(Protocol):
    """HTTP capability: ``get(url) -> (status_code, body_text)``.

    Connection-level failures raise :class:`FetchTransportError`; any
    well-formed response is returned, whatever its status.
    """

    def get(self, url: str) -> HttpResponse: ...


class RequestsHttpClient:
    def __init__(
        self,
        session_factory: SessionFactory | None = None,
        *,
        timeout: float | None = None,
        user_agent: str | None = None,
    ) -> None:
        self._session_factory = session_factory or requests.Session
        self._timeout = SETTINGS.timeout if timeout is None else timeout
        self._user_agent = user_agent or SETTINGS.user_agent
        self._session = self._create_session()

    def _create_session(self) -> requests.Session:
        session = self._session_factory()
        session.headers.update({"User-Agent": self._user_agent})
        return session

    def get(self, url: str) -> HttpResponse:
        # Single attempt; the caller decides whether a later request retries.
        try:
            response = self._session.get(url, timeout=self._timeout)
            return response.status_code, response.text
        except requests.RequestException as exc:
            logger.debug("GET %s failed: %s", url, exc)
            raise FetchTransportError(f"GET {url} failed: {exc}") from exc

    def close(self) -> None:
        self._session.close()
