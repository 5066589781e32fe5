# expense_tracker/services/records.py
"""
Record service: validation and writes for categories, transactions and budgets.

Every public method is one operation against the session handed to the
constructor. Storage failures surface as ``StorageError``; a missing
referenced category as ``ValidationError``; a missing target row as
``NotFoundError``.
"""
import logging
from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from expense_tracker.core.db_utils import translate_storage_errors
from expense_tracker.core.exceptions import NotFoundError, StorageError, ValidationError
from expense_tracker.crud import budget as budget_crud
from expense_tracker.crud import category as category_crud
from expense_tracker.crud import transaction as transaction_crud
from expense_tracker.models.category import Category
from expense_tracker.models.transaction import Transaction
from expense_tracker.schemas.budget import BudgetRead, BudgetSet
from expense_tracker.schemas.category import CategoryCreate
from expense_tracker.schemas.transaction import TransactionCreate, TransactionUpdate

logger = logging.getLogger(__name__)

INVALID_CATEGORY = "Invalid category ID"
TRANSACTION_NOT_FOUND = "Transaction not found"


class RecordService:
    def __init__(self, db: AsyncSession, require_budget_category: bool = False):
        self.db = db
        self.require_budget_category = require_budget_category

    async def _ensure_category(self, category_id: Optional[int]) -> Category:
        if category_id is None:
            raise ValidationError(INVALID_CATEGORY)
        category = await category_crud.get_category_by_id(category_id, self.db)
        if category is None:
            logger.info(f"Rejected write referencing unknown category {category_id}")
            raise ValidationError(INVALID_CATEGORY)
        return category

    # ------------------------------------------------------------
    # CATEGORIES
    # ------------------------------------------------------------
    @translate_storage_errors("Error fetching categories")
    async def list_categories(self) -> List[Category]:
        return await category_crud.get_categories(self.db)

    @translate_storage_errors("Error adding category")
    async def create_category(self, cat_in: CategoryCreate) -> int:
        category_id = await category_crud.create_category(cat_in, self.db)
        if category_id is None:
            raise StorageError("Error adding category")
        logger.info(f"Created category {category_id} ({cat_in.name})")
        return category_id

    # ------------------------------------------------------------
    # TRANSACTIONS
    # ------------------------------------------------------------
    @translate_storage_errors("Error creating transaction")
    async def create_transaction(self, tx_in: TransactionCreate) -> int:
        await self._ensure_category(tx_in.category_id)
        transaction_id = await transaction_crud.create_transaction(tx_in, self.db)
        if transaction_id is None:
            raise StorageError("Failed to create transaction")
        logger.info(f"Created transaction {transaction_id}")
        return transaction_id

    @translate_storage_errors("Error fetching transactions")
    async def list_transactions(self) -> List[Transaction]:
        return await transaction_crud.get_transactions(self.db)

    @translate_storage_errors("Error updating transaction")
    async def update_transaction(self, transaction_id: Optional[int], tx_in: TransactionUpdate) -> None:
        # The category is checked before the target row
        await self._ensure_category(tx_in.category_id)
        if transaction_id is None:
            raise NotFoundError(TRANSACTION_NOT_FOUND)
        changed = await transaction_crud.update_transaction(transaction_id, tx_in, self.db)
        if changed == 0:
            raise NotFoundError(TRANSACTION_NOT_FOUND)
        logger.info(f"Updated transaction {transaction_id}")

    @translate_storage_errors("Error deleting transaction")
    async def delete_transaction(self, transaction_id: Optional[int]) -> None:
        if transaction_id is None:
            raise NotFoundError(TRANSACTION_NOT_FOUND)
        deleted = await transaction_crud.delete_transaction(transaction_id, self.db)
        if deleted == 0:
            raise NotFoundError(TRANSACTION_NOT_FOUND)
        logger.info(f"Deleted transaction {transaction_id}")

    # ------------------------------------------------------------
    # BUDGETS
    # ------------------------------------------------------------
    @translate_storage_errors("Error creating/updating budget")
    async def set_budget(self, budget_in: BudgetSet) -> Tuple[int, bool]:
        """Create the category's budget or overwrite its amount.

        Returns ``(budget_id, created)``. The write is a single atomic upsert,
        so concurrent callers for one category never produce two rows.
        """
        if self.require_budget_category:
            await self._ensure_category(budget_in.category_id)
        if not budget_crud.supports_upsert(self.db):
            logger.error(f"Budget upsert unavailable on {self.db.get_bind().dialect.name}")
            raise StorageError("Error creating/updating budget")
        budget_id, created = await budget_crud.upsert_budget(budget_in, self.db)
        action = "Created" if created else "Updated"
        logger.info(f"{action} budget {budget_id} for category {budget_in.category_id}")
        return budget_id, created

    @translate_storage_errors("Error fetching budgets")
    async def list_budgets(self) -> List[BudgetRead]:
        rows = await budget_crud.get_budgets_with_labels(self.db)
        return [BudgetRead(category_label=name, amount=amount) for name, amount in rows]

    @translate_storage_errors("Error deleting budget by category name")
    async def delete_budget_by_category_label(self, label: str) -> int:
        # No match is not an error: nothing is deleted and the call succeeds
        deleted = await budget_crud.delete_budgets_for_category_name(label, self.db)
        logger.info(f"Deleted {deleted} budget(s) for category '{label}'")
        return deleted

    @translate_storage_errors("Error deleting all budgets")
    async def delete_all_budgets(self) -> int:
        deleted = await budget_crud.delete_all_budgets(self.db)
        logger.info(f"Deleted all budgets ({deleted} row(s))")
        return deleted
