import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class IconSettings:
    api_url: str
    cache_dir: str
    port: int
    timeout: float
    resolve_timeout: float
    user_agent: str
    log_level: str

    @classmethod
    def from_env(cls) -> "IconSettings":
        return cls(
            api_url=os.getenv("ICONIFY_API_URL", "https://api.iconify.design").rstrip("/"),
            cache_dir=os.getenv("ICON_CACHE_DIR", "./icon-cache"),
            port=int(os.getenv("PORT", "5600")),
            timeout=float(os.getenv("SOURCE_TIMEOUT", "10.0")),
            resolve_timeout=float(os.getenv("RESOLVE_TIMEOUT", "30.0")),
            user_agent=os.getenv("USER_AGENT", "iconify-proxy/1.0"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


SETTINGS = IconSettings.from_env()


def configure_logging() -> logging.Logger:
    logging.basicConfig(level=SETTINGS.log_level)
    return logging.getLogger("iconify-proxy")
