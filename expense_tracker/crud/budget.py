# expense_tracker/crud/budget.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from expense_tracker.models.budget import Budget
from expense_tracker.models.category import Category
from typing import List, Tuple
from expense_tracker.schemas.budget import BudgetSet

# Dialects with an INSERT ... ON CONFLICT construct
UPSERT_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": pg_insert,
}

def supports_upsert(db: AsyncSession) -> bool:
    return db.get_bind().dialect.name in UPSERT_INSERTS

async def upsert_budget(budget_in: BudgetSet, db: AsyncSession) -> Tuple[int, bool]:
    """Insert or update the budget of a category in a single statement.

    Conflicts on the unique ``category_id`` turn the insert into an update of
    ``amount``. The update also stamps ``updated_at``, so a row that comes
    back with ``updated_at`` still NULL was just inserted.

    Only dialects listed in ``UPSERT_INSERTS`` are supported, see
    ``supports_upsert``.

    Returns ``(budget_id, created)``.
    """
    dialect_insert = UPSERT_INSERTS[db.get_bind().dialect.name]

    table = Budget.__table__
    stmt = dialect_insert(table).values(
        category_id=budget_in.category_id,
        amount=budget_in.amount,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[table.c.category_id],
        set_={"amount": stmt.excluded.amount, "updated_at": func.now()},
    ).returning(table.c.budget_id, table.c.updated_at)

    result = await db.execute(stmt)
    row = result.one()
    await db.commit()
    return row.budget_id, row.updated_at is None

async def get_budgets_with_labels(db: AsyncSession) -> List[Tuple[str, float]]:
    result = await db.execute(
        select(Category.name, Budget.amount)
        .select_from(Budget)
        .join(Category, Budget.category_id == Category.category_id)
    )
    return result.all()

async def delete_budgets_for_category_name(name: str, db: AsyncSession) -> int:
    category_ids = select(Category.category_id).where(Category.name == name)
    result = await db.execute(
        delete(Budget)
        .where(Budget.category_id.in_(category_ids))
        .execution_options(synchronize_session=False)
    )
    deleted = result.rowcount
    await db.commit()
    return deleted

async def delete_all_budgets(db: AsyncSession) -> int:
    result = await db.execute(delete(Budget).execution_options(synchronize_session=False))
    deleted = result.rowcount
    await db.commit()
    return deleted
