from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger("snippet_share")


@dataclass(slots=True)
class FormSettings:
    """Runtime configuration for the snippet submission form."""

    api_base_url: str = "http://127.0.0.1:8000"
    endpoint: str = "/api/snippets"
    request_timeout: float = 10.0
    navigation_delay: float = 2.0
    home_path: str = "/"

    @property
    def endpoint_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/{self.endpoint.lstrip('/')}"

    @classmethod
    def from_env(cls) -> "FormSettings":
        def _float_env(name: str, default: float) -> float:
            raw = os.getenv(name)
            if not raw:
                return default
            try:
                value = float(raw)
            except ValueError:
                logger.warning("Invalid number for %s: %s", name, raw)
                return default
            if value < 0:
                logger.warning("Negative value for %s: %s", name, raw)
                return default
            return value

        return cls(
            api_base_url=os.getenv("SNIPPETS_API_URL", "http://127.0.0.1:8000"),
            endpoint=os.getenv("SNIPPETS_ENDPOINT", "/api/snippets"),
            request_timeout=_float_env("SNIPPETS_REQUEST_TIMEOUT", 10.0),
            navigation_delay=_float_env("SNIPPETS_NAVIGATION_DELAY", 2.0),
            home_path=os.getenv("SNIPPETS_HOME_PATH", "/"),
        )


__all__ = ["FormSettings"]
