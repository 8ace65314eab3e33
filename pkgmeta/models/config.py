"""Configuration Pydantic models for pkgmeta."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from pkgmeta.models.rules import RuleKind


class PkgMetaConfig(BaseModel):
    """Configuration for pkgmeta.

    All fields are optional with None defaults to allow partial configuration.
    Command line options take precedence over configured values.
    """

    model_config = {"extra": "forbid"}

    rule: Optional[RuleKind] = Field(
        default=None,
        description="Rule kind to validate against (core or community).",
    )
    work_dir: Optional[str] = Field(
        default=None,
        description="Directory packages are generated in.",
    )
