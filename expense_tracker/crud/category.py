# expense_tracker/crud/category.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, insert
from expense_tracker.models.category import Category
from typing import List, Optional
from expense_tracker.schemas.category import CategoryCreate

async def get_categories(db: AsyncSession) -> List[Category]:
    result = await db.execute(select(Category))
    return result.scalars().all()

async def get_category_by_id(category_id: int, db: AsyncSession) -> Optional[Category]:
    result = await db.execute(
        select(Category).where(Category.category_id == category_id)
    )
    return result.scalar_one_or_none()

async def create_category(cat_in: CategoryCreate, db: AsyncSession) -> Optional[int]:
    result = await db.execute(
        insert(Category).values(**cat_in.model_dump()).returning(Category.category_id)
    )
    new_id = result.scalar_one_or_none()
    await db.commit()
    return new_id
