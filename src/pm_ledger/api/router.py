"""pm_ledger REST API — fund accounts and read balances."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from src.pm_common.database import get_db_session
from src.pm_common.response import ApiResponse, success_response
from src.pm_ledger.application.schemas import DepositRequest
from src.pm_ledger.application.service import LedgerApplicationService

router = APIRouter(prefix="/ledger", tags=["ledger"])

_service = LedgerApplicationService()


@router.post("/deposit")
def deposit(
    body: DepositRequest,
    db: Annotated[Session, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    data = _service.deposit(db, body.identity, body.amount_lamports)
    return success_response(data.model_dump(), getattr(request.state, "request_id", None))


@router.get("/accounts/{identity}")
def get_account(
    identity: str,
    db: Annotated[Session, Depends(get_db_session)],
    request: Request,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
) -> ApiResponse:
    data = _service.get_account(db, identity, limit)
    return success_response(data.model_dump(), getattr(request.state, "request_id", None))
