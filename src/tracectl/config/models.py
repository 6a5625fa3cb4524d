"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``tracectl.toml`` only holds
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int | None = Field(default=None, gt=0)
    no_color: bool = False
    show_count: bool = True
