"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, graphcheck.toml only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from graphcheck.domain.hamiltonian import SearchLimits
from graphcheck.domain.types import Mode, Strategy


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    mode: Mode = Mode.BOTH
    directed: bool = True


class SearchConfig(BaseModel):
    """[search] section.

    ``max_vertices = 0`` and ``timeout = 0`` mean unbounded.
    """

    model_config = {"frozen": True}

    strategy: Strategy = Strategy.ITERATIVE
    prune: bool = True
    max_vertices: int = Field(default=0, ge=0)
    timeout: float = Field(default=0.0, ge=0.0)

    def limits(self) -> SearchLimits:
        return SearchLimits(
            max_vertices=self.max_vertices or None,
            timeout=self.timeout or None,
        )


class IoConfig(BaseModel):
    """[io] section."""

    model_config = {"frozen": True}

    delimiter: str = ","
    coerce_int: bool = True

    @field_validator("delimiter")
    @classmethod
    def _single_char(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("delimiter must be a single character")
        return value


class GraphcheckConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    graph: GraphConfig = Field(default_factory=GraphConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    io: IoConfig = Field(default_factory=IoConfig)
