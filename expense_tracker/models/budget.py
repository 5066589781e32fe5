# expense_tracker/models/budget.py
from sqlalchemy import Column, Integer, Float, DateTime, ForeignKey, UniqueConstraint, func
from expense_tracker.core.database import Base

class Budget(Base):
    __tablename__ = "budget"
    __table_args__ = (
        # One budget per category; the upsert in crud.budget conflicts on this
        UniqueConstraint("category_id", name="uq_budget_category_id"),
        {"sqlite_autoincrement": True},
    )

    budget_id = Column(Integer, primary_key=True, autoincrement=True)
    category_id = Column(Integer, ForeignKey("category.category_id"), nullable=True)
    amount = Column(Float, nullable=False)

    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    # NULL until the row is first updated in place
    updated_at = Column(DateTime, nullable=True, default=None)

    def __repr__(self):
        return f"<Budget id={self.budget_id} category_id={self.category_id} amount={self.amount}>"
