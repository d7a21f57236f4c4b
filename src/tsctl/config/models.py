"""Pydantic models for the tsctl.toml sections, with code-baked defaults.

Sparse TOML contract: defaults baked here, tsctl.toml only contains overrides.
An empty (or missing) tsctl.toml is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel


class ArithConfig(BaseModel):
    """[arith] section."""

    model_config = {"frozen": True, "extra": "forbid"}

    # Reject operands that are not normalized instead of computing with them.
    strict: bool = False


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True, "extra": "forbid"}

    show_total_ns: bool = False
