from __future__ import annotations

import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class AppConfig:
    log_level: str = "INFO"
    title: str = "Lunch Menu Recommendation API"

    @classmethod
    def from_env(cls) -> AppConfig:
        return cls(log_level=os.getenv("LUNCHPICK_LOG_LEVEL", "INFO"))


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging for the service."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Request lines from httpx would drown out our own messages
    logging.getLogger("httpx").setLevel(logging.WARNING)
