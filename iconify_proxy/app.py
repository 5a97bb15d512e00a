from __future__ import annotations

import logging
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Mapping, Optional, Tuple

from flask import Flask, jsonify, request

from .config import SETTINGS, configure_logging
from .icons.key import IconKey
from .icons.paths import MIN_EDGE, normalize_tint
from .infrastructure.loop import BackgroundLoop
from .responses import send_placeholder, send_svg
from .service import IconService

APP_VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def parse_presentation(args: Mapping[str, str]) -> Tuple[int, int, Optional[str]]:
    """Read ``w``, ``h`` and ``color`` query arguments.

    Raises ``ValueError`` for non-numeric sizes or malformed colors.
    """

    width = int(args.get("w") or MIN_EDGE)
    height = int(args.get("h") or MIN_EDGE)
    color = args.get("color") or None
    tint = normalize_tint(color) if color is not None else None
    return width, height, tint


def create_app(
    service: Optional[IconService] = None,
    runner: Optional[BackgroundLoop] = None,
    resolve_timeout: Optional[float] = None,
) -> Flask:
    configure_logging()
    service = service or IconService()
    runner = runner or BackgroundLoop()
    timeout = SETTINGS.resolve_timeout if resolve_timeout is None else resolve_timeout

    app = Flask(__name__)
    app.extensions["iconify"] = service

    def resolve(key: IconKey, width: int, height: int, tint: Optional[str]) -> Optional[str]:
        try:
            return runner.run(
                service.resolve(key, width, height, tint),
                timeout=timeout,
            )
        except FutureTimeoutError:
            logger.warning("Timed out waiting for icon %s", key)
            return None

    @app.route("/icons/<icon>.svg")
    def icon_image(icon: str):
        try:
            key = IconKey.parse(icon)
            width, height, tint = parse_presentation(request.args)
        except ValueError as exc:
            return (str(exc), 400)

        was_cached = service.cache.is_cached(key)
        path = resolve(key, width, height, tint)
        data = service.read(key) if path is not None else None
        if data is None:
            return send_placeholder()
        return send_svg(data, cache_state="HIT" if was_cached else "MISS", access_path=path)

    @app.route("/icons/<icon>/path")
    def icon_path(icon: str):
        try:
            key = IconKey.parse(icon)
            width, height, tint = parse_presentation(request.args)
        except ValueError as exc:
            return jsonify(error=str(exc)), 400

        path = resolve(key, width, height, tint)
        if path is None:
            return jsonify(key=str(key), path=None, error="icon unavailable"), 404
        return jsonify(key=str(key), path=path, tintable=service.cache.is_tintable(key))

    @app.route("/health")
    def health():
        return jsonify(
            ok=True,
            version=APP_VERSION,
            api_url=service.coordinator.base_url,
            in_flight=service.coordinator.in_flight_count,
            cache_dir=str(getattr(service.fs, "root", "")) or None,
        )

    return app


# Expose a module-level Flask application for Gunicorn import paths like ``iconify_proxy.app:app``
# and provide a conventional ``application`` alias for WSGI servers that default to that name.
app = create_app()
application = app
