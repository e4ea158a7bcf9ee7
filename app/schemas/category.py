# app/schemas/category.py
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

# ==================== Category Schemas ====================


class CategoryDTO(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["Chores"])
    description: Optional[str] = Field(None, examples=["Things to do around the house"])


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str
    weight: int
    created_at: datetime
    updated_at: datetime
