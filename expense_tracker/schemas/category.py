# expense_tracker/schemas/category.py
from pydantic import BaseModel, ConfigDict, Field

class CategoryBase(BaseModel):
    name: str = Field(..., description="Display name, e.g. Food")
    type: str = Field(..., description="Free-form tag such as income or expense")

class CategoryCreate(CategoryBase):
    pass

class CategoryRead(CategoryBase):
    category_id: int

    model_config = ConfigDict(from_attributes=True)
