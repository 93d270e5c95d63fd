"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, aggregen.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

# --- aggregen.toml sections ---


class SelectionConfig(BaseModel):
    """[selection] section."""

    model_config = {"frozen": True}

    reuse_open_connections: bool = True
    allow_self_loops: bool = False
    open_weighting: Literal["uniform", "template"] = "uniform"
    default_weight: float = Field(default=0.0, ge=0.0)


class SearchConfig(BaseModel):
    """[search] section."""

    model_config = {"frozen": True}

    max_solutions: int = 10
    max_steps: int = Field(default=10000, ge=1)
    max_depth: int = Field(default=50, ge=1)
    max_network_size: int = Field(default=64, ge=1)
    attempts: int = Field(default=3, ge=1)
    seed: int | None = None


class StrategyConfig(BaseModel):
    """[strategy] section."""

    model_config = {"frozen": True}

    name: str = "random"


class LibraryConfig(BaseModel):
    """[library] section."""

    model_config = {"frozen": True}

    weight_key: str = Field(default="weight", min_length=1)


class AggConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    selection: SelectionConfig = Field(default_factory=SelectionConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    strategy: StrategyConfig = Field(default_factory=StrategyConfig)
    library: LibraryConfig = Field(default_factory=LibraryConfig)
