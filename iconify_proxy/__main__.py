"""Run the icon proxy with ``python -m iconify_proxy``."""

from __future__ import annotations

import logging

from .app import app
from .config import SETTINGS

logger = logging.getLogger("iconify-proxy")


def main() -> None:
    logger.info(
        "Serving icons from %s, caching in %s, on port %d",
        SETTINGS.api_url,
        SETTINGS.cache_dir,
        SETTINGS.port,
    )
    app.run(host="0.0.0.0", port=SETTINGS.port, debug=False)


if __name__ == "__main__":
    main()
