"""Pydantic schema for selector configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class SelectorConfig(BaseModel):
    """Validated selector configuration with defaults."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id_key: str = Field(default="id", min_length=1)
    value_key: str = Field(default="value", min_length=1)
    # "value" reproduces flat keying where equal scalars in different groups share a prime.
    prime_keying: Literal["group", "value"] = "group"
    compatibility: Literal["pairwise", "joint"] = "pairwise"
