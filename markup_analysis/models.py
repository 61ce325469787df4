from typing import List, Tuple
from pydantic import BaseModel, ConfigDict, Field


class WidgetSignature(BaseModel):
    model_config = ConfigDict(frozen=True)

    markers: Tuple[str, ...] = Field(..., min_length=1, description="Substrings signalling the widget, any one is enough")
    declarations: Tuple[str, ...] = Field(..., description="Testing module entries the widget needs")
    imports: Tuple[str, ...] = Field(..., description="Import statements for those entries")

    def matches(self, markup: str) -> bool:
        """Whether any marker occurs in the markup as a plain substring."""
        return any(marker in markup for marker in self.markers)


class WidgetUsageResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    declarations: List[str] = Field(default_factory=list)
    imports: List[str] = Field(default_factory=list)
