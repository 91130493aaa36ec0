"""Runtime settings for completion."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class CompletionSettings:
    """Settings shared by the provider and its strategies."""

    # Schema document; None selects the bundled SVG grammar
    schema_path: Optional[str] = None

    # Offer deprecated elements and attributes
    show_deprecated: bool = True

    # Tags scanned between cancellation checks during ancestor resolution
    scan_check_interval: int = 64

    # Logging
    log_level: str = "INFO"


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> CompletionSettings:
    """Load settings from the environment (and a ``.env`` file, if present)."""
    load_dotenv()

    interval_str = os.getenv("SVGSENSE_SCAN_CHECK_INTERVAL", "")
    try:
        interval = int(interval_str) if interval_str else CompletionSettings.scan_check_interval
    except ValueError:
        interval = CompletionSettings.scan_check_interval

    return CompletionSettings(
        schema_path=os.getenv("SVGSENSE_SCHEMA_PATH") or None,
        show_deprecated=_env_flag("SVGSENSE_SHOW_DEPRECATED", True),
        scan_check_interval=max(1, interval),
        log_level=os.getenv("SVGSENSE_LOG_LEVEL", "INFO").upper(),
    )
