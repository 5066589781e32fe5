from fastapi import APIRouter

from expense_tracker.api.routes import categories, transactions, budgets

api_router = APIRouter()

api_router.include_router(categories.router)
api_router.include_router(transactions.router)
api_router.include_router(budgets.router)
