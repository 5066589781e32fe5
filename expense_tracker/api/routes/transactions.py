# expense_tracker/api/routes/transactions.py
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from typing import List, Optional

from expense_tracker.schemas.transaction import (
    TransactionCreate,
    TransactionRead,
    TransactionUpdate,
)
from expense_tracker.services.records import RecordService
from expense_tracker.api.deps import get_record_service

router = APIRouter(prefix="/transactions", tags=["transactions"])

def _parse_transaction_id(raw: str) -> Optional[int]:
    """Ids that are not integers cannot match a row."""
    try:
        return int(raw)
    except ValueError:
        return None

@router.get("", response_model=List[TransactionRead])
async def read_transactions(service: RecordService = Depends(get_record_service)):
    return await service.list_transactions()

@router.post("", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    tx_in: TransactionCreate,
    service: RecordService = Depends(get_record_service),
):
    """
    Record a transaction. The referenced category must already exist,
    otherwise the request is rejected with 400 and nothing is written.
    """
    await service.create_transaction(tx_in)
    return "Transaction Created Successfully"

@router.put("/{transaction_id}", response_class=PlainTextResponse)
async def update_transaction(
    transaction_id: str,
    tx_in: TransactionUpdate,
    service: RecordService = Depends(get_record_service),
):
    """Replace every field of a transaction."""
    await service.update_transaction(_parse_transaction_id(transaction_id), tx_in)
    return "Transaction Updated Successfully"

@router.delete("/{transaction_id}", response_class=PlainTextResponse)
async def delete_transaction(
    transaction_id: str,
    service: RecordService = Depends(get_record_service),
):
    await service.delete_transaction(_parse_transaction_id(transaction_id))
    return "Transaction Deleted Successfully"
