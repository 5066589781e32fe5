# expense_tracker/api/routes/categories.py
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from typing import List

from expense_tracker.schemas.category import CategoryCreate, CategoryRead
from expense_tracker.services.records import RecordService
from expense_tracker.api.deps import get_record_service

router = APIRouter(prefix="/categories", tags=["categories"])

@router.get("", response_model=List[CategoryRead])
async def read_categories(service: RecordService = Depends(get_record_service)):
    return await service.list_categories()

@router.post("", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    cat_in: CategoryCreate,
    service: RecordService = Depends(get_record_service),
):
    category_id = await service.create_category(cat_in)
    return f"Category Added Successfully with ID: {category_id}"
