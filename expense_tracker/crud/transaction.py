# expense_tracker/crud/transaction.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, insert, update, delete
from expense_tracker.models.transaction import Transaction
from typing import List, Optional
from expense_tracker.schemas.transaction import TransactionCreate, TransactionUpdate

async def get_transactions(db: AsyncSession) -> List[Transaction]:
    result = await db.execute(select(Transaction))
    return result.scalars().all()

async def create_transaction(tx_in: TransactionCreate, db: AsyncSession) -> Optional[int]:
    result = await db.execute(
        insert(Transaction).values(**tx_in.model_dump()).returning(Transaction.transaction_id)
    )
    new_id = result.scalar_one_or_none()
    await db.commit()
    return new_id

async def update_transaction(transaction_id: int, tx_in: TransactionUpdate, db: AsyncSession) -> int:
    """Overwrite every column of the row; returns the number of rows changed."""
    result = await db.execute(
        update(Transaction)
        .where(Transaction.transaction_id == transaction_id)
        .values(**tx_in.model_dump())
        .execution_options(synchronize_session=False)
    )
    changed = result.rowcount
    await db.commit()
    return changed

async def delete_transaction(transaction_id: int, db: AsyncSession) -> int:
    result = await db.execute(
        delete(Transaction)
        .where(Transaction.transaction_id == transaction_id)
        .execution_options(synchronize_session=False)
    )
    changed = result.rowcount
    await db.commit()
    return changed
