"""pm_payment REST API — quote and apply royalty-aware payments."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from src.pm_common.database import get_db_session
from src.pm_common.response import ApiResponse, success_response
from src.pm_payment.application.schemas import PaymentRequestBody
from src.pm_payment.application.service import PaymentApplicationService

router = APIRouter(prefix="/payments", tags=["payments"])

_service = PaymentApplicationService()


@router.post("/quote")
def quote_payment(
    body: PaymentRequestBody,
    db: Annotated[Session, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    data = _service.quote(db, body)
    return success_response(data.model_dump(), getattr(request.state, "request_id", None))


@router.post("/apply")
def apply_payment(
    body: PaymentRequestBody,
    db: Annotated[Session, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    data = _service.apply(db, body)
    return success_response(data.model_dump(), getattr(request.state, "request_id", None))
