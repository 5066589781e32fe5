# expense_tracker/schemas/transaction.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class TransactionBase(BaseModel):
    title: str = Field(..., description="E.g. Lunch")
    amount: float
    # Optional here so a missing id is reported as an invalid category
    category_id: Optional[int] = Field(None, alias="categoryId")
    type: str
    date: str = Field(..., description="Caller-supplied date text, no enforced format")

    model_config = ConfigDict(populate_by_name=True)

class TransactionCreate(TransactionBase):
    pass

class TransactionUpdate(TransactionBase):
    """Full replacement: every field is written."""

class TransactionRead(BaseModel):
    transaction_id: int
    title: str
    amount: float
    category_id: Optional[int] = None
    type: str
    date: str

    model_config = ConfigDict(from_attributes=True)
