"""Pydantic models describing the project's configuration.

These models mirror the structure of ``configs/config.yaml``. Both sections
are required so a missing one fails loudly; the fields inside them carry
defaults.
"""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class PgnConfig(BaseModel):
    include_headers: bool = False
    headers: Dict[str, str] = Field(default_factory=dict)
    fen: Optional[str] = None


class LoggingConfig(BaseModel):
    level: str = "INFO"
    log_dir: Optional[str] = None


class ConfigModel(BaseModel):
    """Complete configuration model."""

    model_config = ConfigDict(extra="forbid")

    pgn: PgnConfig
    logging: LoggingConfig
