# expense_tracker/models/category.py
from sqlalchemy import Column, Integer, String
from expense_tracker.core.database import Base

class Category(Base):
    __tablename__ = "category"
    # Ids are never handed out twice, even after the highest row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    category_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    type = Column(String, nullable=False)  # 'income' or 'expense', not enforced

    def __repr__(self):
        return f"<Category id={self.category_id} name={self.name} type={self.type}>"
