from pydantic import BaseModel, Field, computed_field, field_validator
from typing import Optional, List
from datetime import datetime
from ..utils.service_helpers import checklist_progress


class ChecklistCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v):
        if not v.strip():
            raise ValueError("Checklist name cannot be empty")
        return v.strip()


class ChecklistUpdate(ChecklistCreate):
    pass


class ChecklistItemCreate(BaseModel):
    text: str = Field(..., min_length=1, max_length=500)

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v):
        if not v.strip():
            raise ValueError("Item text cannot be empty")
        return v.strip()


class ChecklistItemUpdate(BaseModel):
    text: Optional[str] = Field(None, min_length=1, max_length=500)
    checked: Optional[bool] = None


class ChecklistItemResponse(BaseModel):
    id: int
    checklist_id: int
    text: str
    checked: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ChecklistResponse(BaseModel):
    id: int
    trip_id: int
    name: str
    created_at: Optional[datetime] = None
    items: List[ChecklistItemResponse] = []

    class Config:
        from_attributes = True

    @computed_field
    @property
    def total_items(self) -> int:
        return len(self.items)

    @computed_field
    @property
    def checked_items(self) -> int:
        return len([item for item in self.items if item.checked])

    @computed_field
    @property
    def progress(self) -> int:
        return checklist_progress(self.checked_items, self.total_items)
