# expense_tracker/api/deps.py
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from expense_tracker.core.database import get_async_session
from expense_tracker.services.records import RecordService

async def get_record_service(
    request: Request,
    db: AsyncSession = Depends(get_async_session),
) -> RecordService:
    """Record service bound to this request's session."""
    settings = request.app.state.settings
    return RecordService(db, require_budget_category=settings.BUDGET_REQUIRE_CATEGORY)
