# src/manifest_shell/model.py (Shell Layer)
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class ConversionRecord(BaseModel):
    """One conversion performed during the session."""
    source_path: str = Field(description="The markup document that was converted.")
    component_name: str
    output_path: Optional[str] = Field(default=None, description="Where the component was written, if exported.")
    unit_count: int = 0
    state_field_count: int = 0
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def summary(self) -> str:
        target = self.output_path or "<stdout>"
        return (
            f"{self.component_name}: {self.unit_count} units, "
            f"{self.state_field_count} state fields -> {target}"
        )
