
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_client_application, get_server_application
from app.models.application import Application
from app.schemas.coupon import ClientVerifyCouponBody, ErrorResponse, VerificationResponse, VerifyCouponBody
from app.services.verification import VerificationService

router = APIRouter(prefix="", tags=["coupons"])

_error_responses = {
    400: {"model": ErrorResponse, "description": "Unknown coupon code or malformed request"},
    401: {"model": ErrorResponse, "description": "Invalid application credentials"},
}


@router.post(
    "/v1/coupons/{code}/validate",
    response_model=VerificationResponse,
    response_model_exclude_none=True,
    responses=_error_responses,
)
def validate_coupon(
    code: str,
    body: VerifyCouponBody,
    application: Application = Depends(get_server_application),
    db: Session = Depends(get_db),
):
    result = VerificationService.verify_coupon(
        db,
        application,
        code,
        customer=body.customer,
        order=body.order,
        tracking_id=body.tracking_id,
    )
    return VerificationResponse(data=result)


@router.post(
    "/client/v1/coupons/{code}/validate",
    response_model=VerificationResponse,
    response_model_exclude_none=True,
    responses=_error_responses,
)
def client_validate_coupon(
    code: str,
    body: ClientVerifyCouponBody,
    application: Application = Depends(get_client_application),
    db: Session = Depends(get_db),
):
    result = VerificationService.verify_coupon(
        db,
        application,
        code,
        customer=body.customer,
        order=body.order,
        metadata=body.metadata,
    )
    return VerificationResponse(data=result)
