# bank_api/api/routers/transfer.py
from fastapi import APIRouter

from bank_api.schemas.account import TransferRequest

router = APIRouter(tags=["transfer"])

# TODO: move funds once debit/credit semantics are agreed (atomic update, insufficient-funds check)
@router.post("/transfer", response_model=TransferRequest)
async def transfer(body: TransferRequest):
    """Echo the decoded transfer request. No balance is touched."""
    return body
