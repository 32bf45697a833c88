"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, valuewrap.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class BinderConfig(BaseModel):
    """[binders] section."""

    model_config = {"frozen": True}

    empty_query_is_absent: bool = True
