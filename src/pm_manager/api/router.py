"""pm_manager REST API — payment manager init / read / update / close.

Callers are already-authenticated identities; authority checks compare the
supplied caller against the stored authority.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from src.pm_common.database import get_db_session
from src.pm_common.response import ApiResponse, success_response
from src.pm_manager.application.schemas import InitPaymentManagerRequest, UpdatePaymentManagerRequest
from src.pm_manager.application.service import PaymentManagerService

router = APIRouter(prefix="/payment-managers", tags=["payment-managers"])

_service = PaymentManagerService()


@router.post("", status_code=201)
def init_payment_manager(
    body: InitPaymentManagerRequest,
    db: Annotated[Session, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    data = _service.init(db, body)
    return success_response(data.model_dump(), getattr(request.state, "request_id", None))


@router.get("/{name}")
def get_payment_manager(
    name: str,
    db: Annotated[Session, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    data = _service.get(db, name)
    return success_response(data.model_dump(), getattr(request.state, "request_id", None))


@router.patch("/{name}")
def update_payment_manager(
    name: str,
    body: UpdatePaymentManagerRequest,
    db: Annotated[Session, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    data = _service.update(db, name, body)
    return success_response(data.model_dump(), getattr(request.state, "request_id", None))


@router.delete("/{name}")
def close_payment_manager(
    name: str,
    caller: Annotated[str, Query(min_length=1, max_length=64)],
    db: Annotated[Session, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    _service.close(db, name, caller)
    return success_response({"name": name, "closed": True}, getattr(request.state, "request_id", None))
