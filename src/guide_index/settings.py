from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(slots=True)
class GuideSettings:
    """Where guide files live and how keyword search is sized."""

    guides_dir: str = "data/guides"
    guide_suffix: str = ".md"
    search_top_k: int = 5


@dataclass(slots=True)
class TracingSettings:
    """OpenTelemetry export configuration."""

    service_name: str = "guide-index"
    otlp_endpoint: str | None = None


def load_settings() -> tuple[GuideSettings, TracingSettings]:
    """Load environment-backed settings and return typed config objects.

    Returns:
        Tuple containing guide loading settings and tracing settings.
    """
    load_dotenv()
    return (
        GuideSettings(
            guides_dir=os.getenv("GUIDE_INDEX_GUIDES_DIR", "data/guides"),
            guide_suffix=os.getenv("GUIDE_INDEX_GUIDE_SUFFIX", ".md"),
            search_top_k=int(os.getenv("GUIDE_INDEX_SEARCH_TOP_K", "5")),
        ),
        TracingSettings(
            service_name=os.getenv("GUIDE_INDEX_SERVICE_NAME", "guide-index"),
            otlp_endpoint=os.getenv("GUIDE_INDEX_OTLP_ENDPOINT") or None,
        ),
    )
