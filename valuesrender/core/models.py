"""Domain models for a render call."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

# Deserialized values document used as the template context.
ValuesMap = dict[str, Any]


class RenderJob(BaseModel):
    """The three files involved in a single render."""

    template_path: Path = Field(..., description="Template file path")
    values_path: Path = Field(..., description="Values (YAML) file path")
    output_path: Path = Field(..., description="Output file path")
