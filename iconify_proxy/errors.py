"""Exception taxonomy for icon lookup, fetching and caching."""

from __future__ import annotations


class IconError(Exception):
    """Base class for every error raised by the icon cache."""


class InvalidKeyFormat(IconError, ValueError):
    """The icon identity string is not of the form ``namespace:name``."""


class FetchError(IconError):
    """A single fetch attempt for an icon failed; nothing was cached."""


class FetchNotFound(FetchError):
    """The remote service reports that the icon does not exist."""


class FetchTransportError(FetchError):
    """The request could not be completed or the result could not be stored."""


class CancelledByCaller(IconError):
    """The waiting caller gave up; any shared fetch keeps running."""
