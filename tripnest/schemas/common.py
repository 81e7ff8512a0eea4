from typing import Optional
from pydantic import BaseModel, Field


class ConfigOption(BaseModel):
    """Single configuration option (for dropdowns, enums, etc.)"""

    value: str = Field(..., description="The actual value to use in API calls")
    label: str = Field(..., description="Human-readable display name")
    emoji: Optional[str] = Field(None, description="Icon shown next to the label")
