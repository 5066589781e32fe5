# expense_tracker/models/transaction.py
from sqlalchemy import Column, Integer, String, Float, ForeignKey
from expense_tracker.core.database import Base

class Transaction(Base):
    __tablename__ = "transaction"
    __table_args__ = {"sqlite_autoincrement": True}

    transaction_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    amount = Column(Float, nullable=False)
    # Nullable in the schema; writes through the service always check it
    category_id = Column(Integer, ForeignKey("category.category_id"), nullable=True)
    type = Column(String, nullable=False)
    date = Column(String, nullable=False)  # caller-supplied, free-form

    def __repr__(self):
        return f"<Transaction id={self.transaction_id} amount={self.amount} date={self.date}>"
