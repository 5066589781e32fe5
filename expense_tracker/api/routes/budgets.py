# expense_tracker/api/routes/budgets.py
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from typing import List

from expense_tracker.schemas.budget import BudgetRead, BudgetSet
from expense_tracker.services.records import RecordService
from expense_tracker.api.deps import get_record_service

router = APIRouter(prefix="/budgets", tags=["budgets"])

@router.post("", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
async def set_budget(
    budget_in: BudgetSet,
    service: RecordService = Depends(get_record_service),
):
    """
    Create the budget for a category, or overwrite its amount if one exists.

    - **201** when a new budget row was created
    - **200** when the existing budget was updated
    """
    budget_id, created = await service.set_budget(budget_in)
    if created:
        return PlainTextResponse(
            f"Budget Created Successfully with ID: {budget_id}",
            status_code=status.HTTP_201_CREATED,
        )
    return PlainTextResponse("Budget Updated Successfully", status_code=status.HTTP_200_OK)

@router.get("", response_model=List[BudgetRead])
async def read_budgets(service: RecordService = Depends(get_record_service)):
    return await service.list_budgets()

@router.delete("/{category_name}", response_class=PlainTextResponse)
async def delete_budget_by_category_name(
    category_name: str,
    service: RecordService = Depends(get_record_service),
):
    await service.delete_budget_by_category_label(category_name)
    return f"Budget for category '{category_name}' deleted successfully."

@router.delete("", response_class=PlainTextResponse)
async def delete_all_budgets(service: RecordService = Depends(get_record_service)):
    await service.delete_all_budgets()
    return "All budgets deleted successfully."
