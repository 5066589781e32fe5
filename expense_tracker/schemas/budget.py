# expense_tracker/schemas/budget.py
from pydantic import BaseModel, ConfigDict, Field

class BudgetSet(BaseModel):
    category_id: int = Field(..., alias="categoryId")
    amount: float

    model_config = ConfigDict(populate_by_name=True)

class BudgetRead(BaseModel):
    category_label: str = Field(..., alias="categoryLabel", description="Name of the budgeted category")
    amount: float

    model_config = ConfigDict(populate_by_name=True)
