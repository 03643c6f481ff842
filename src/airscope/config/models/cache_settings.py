"""Cache configuration model."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from airscope.shared.constants import CacheConfig, FileSystem


class CacheSettings(BaseModel):
    """Cache backend and lifetime settings."""

    ttl: int = Field(
        default=CacheConfig.DEFAULT_TTL,
        gt=0,
        description="Reading and search cache time-to-live in seconds",
    )
    backend: Literal["memory", "file"] = Field(
        default=FileSystem.CACHE_BACKEND,
        description="Key-value backend (memory, file)",
    )
    directory: Path = Field(
        default=Path.home() / FileSystem.HOME_DIR / FileSystem.CACHE_DIRECTORY,
        description="Directory used by the file backend",
    )


__all__ = ["CacheSettings"]
