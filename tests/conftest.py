import threading

import pytest

from iconify_proxy.infrastructure.cache import IconCache
from iconify_proxy.infrastructure.coordinator import FetchCoordinator
from iconify_proxy.infrastructure.filesystem import LocalFileSystem

BASE_URL = "https://icons.test"

PLAIN_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><path fill="#e33" d="M0 0h24v24H0z"/></svg>'
TINTABLE_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><path fill="currentColor" d="M0 0h24v24H0z"/></svg>'


class FakeHttp:
    """Stand-in HTTP capability keyed by ``namespace/name`` fragments.

    ``gate`` starts open; clear it to hold every request until it is set.
    """

    def __init__(self, responses=None, default=(200, PLAIN_SVG)):
        self.responses = dict(responses or {})
        self.default = default
        self.calls = []
        self.gate = threading.Event()
        self.gate.set()
        self._lock = threading.Lock()

    def get(self, url):
        with self._lock:
            self.calls.append(url)
        self.gate.wait(timeout=5)

        result = self.default
        for fragment, response in self.responses.items():
            if f"/{fragment}.svg" in url:
                result = response
                break

        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def http():
    return FakeHttp()


@pytest.fixture
def fs(tmp_path):
    return LocalFileSystem(tmp_path)


@pytest.fixture
def cache(fs):
    return IconCache(fs)


@pytest.fixture
def coordinator(http, cache):
    return FetchCoordinator(http, cache, base_url=BASE_URL)
