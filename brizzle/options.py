"""
Brizzle Options - Per-invocation generator flags
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GeneratorOptions(BaseModel):
    """Flags shared by every generate and destroy command."""

    force: bool = False
    dry_run: bool = Field(False, alias="dryRun")
    uuid: bool = False
    no_timestamps: bool = Field(False, alias="noTimestamps")

    model_config = {"populate_by_name": True, "frozen": True}
