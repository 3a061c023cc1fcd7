"""TOML configuration loader for the receipt engine."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .images import JPEG_QUALITY, MAX_DIMENSION
from .quota import DEFAULT_WEEKLY_LIMIT

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]


@dataclass
class GeminiVisionConfig:
    api_key: str = ""
    model: str = "gemini-2.5-flash-lite"


@dataclass
class ClaudeVisionConfig:
    api_key: str = ""
    model: str = "claude-sonnet-4-5-20250929"


@dataclass
class VisionConfig:
    backend: str = "gemini"
    gemini: GeminiVisionConfig = field(default_factory=GeminiVisionConfig)
    claude: ClaudeVisionConfig = field(default_factory=ClaudeVisionConfig)


@dataclass
class ImageConfig:
    max_dimension: int = MAX_DIMENSION
    jpeg_quality: int = JPEG_QUALITY


@dataclass
class OCRConfig:
    languages: str = "eng+chi_sim+chi_tra"


@dataclass
class UsageConfig:
    weekly_limit: int = DEFAULT_WEEKLY_LIMIT


@dataclass
class ReceiptConfig:
    vision: VisionConfig = field(default_factory=VisionConfig)
    image: ImageConfig = field(default_factory=ImageConfig)
    ocr: OCRConfig = field(default_factory=OCRConfig)
    usage: UsageConfig = field(default_factory=UsageConfig)


def load_config(path: str | Path | None = None) -> ReceiptConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    API keys can be overridden via environment variables.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    vis = raw.get("vision", {})
    img = raw.get("image", {})
    ocr = raw.get("ocr", {})
    usg = raw.get("usage", {})

    gemini_cfg = vis.get("gemini", {})
    claude_cfg = vis.get("claude", {})

    # Resolve API keys: config file → environment variable
    gemini_api_key = gemini_cfg.get("api_key", "") or os.environ.get(
        "GEMINI_API_KEY", ""
    )
    claude_api_key = claude_cfg.get("api_key", "") or os.environ.get(
        "ANTHROPIC_API_KEY", ""
    )

    return ReceiptConfig(
        vision=VisionConfig(
            backend=vis.get("backend", "gemini"),
            gemini=GeminiVisionConfig(
                api_key=gemini_api_key,
                model=gemini_cfg.get("model", "gemini-2.5-flash-lite"),
            ),
            claude=ClaudeVisionConfig(
                api_key=claude_api_key,
                model=claude_cfg.get("model", "claude-sonnet-4-5-20250929"),
            ),
        ),
        image=ImageConfig(
            max_dimension=img.get("max_dimension", MAX_DIMENSION),
            jpeg_quality=img.get("jpeg_quality", JPEG_QUALITY),
        ),
        ocr=OCRConfig(
            languages=ocr.get("languages", "eng+chi_sim+chi_tra"),
        ),
        usage=UsageConfig(
            weekly_limit=usg.get("weekly_limit", DEFAULT_WEEKLY_LIMIT),
        ),
    )
