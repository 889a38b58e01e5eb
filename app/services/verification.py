"""Coupon verification: lookup, eligibility, tracking id, discount, result.

Single shot and stateless. The result is a pure function of the coupon and
the request, so re-running a verification with the same tracking id yields
the same answer without any dedupe store.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from app.errors import UnknownCouponCodeError
from app.models.application import Application
from app.schemas.coupon import Customer, Order, VerificationResult, VerifiedOrder
from app.services.coupon_service import CouponService
from app.services.discount_calculator import DiscountCalculator, to_number
from app.services.tracking import TrackingService

logger = logging.getLogger(__name__)


def _reject(application: Application, code: str, reason: str) -> UnknownCouponCodeError:
    # the reason is for logs only; callers get one indistinguishable error
    logger.info(
        "coupon rejected",
        extra={"application": application.name, "code": code, "reason": reason},
    )
    return UnknownCouponCodeError()


class VerificationService:
    """Runs one coupon verification end to end"""

    @staticmethod
    def verify_coupon(
        db: Session,
        application: Application,
        code: str,
        customer: Customer,
        order: Order,
        tracking_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> VerificationResult:
        """Verify ``code`` for ``order`` within ``application``'s coupons.

        ``tracking_id`` is used as-is when given (server flow); otherwise it is
        derived from (code, customer id, order id) (client flow). Raises
        ``UnknownCouponCodeError`` for missing, inactive and product-ineligible
        coupons alike.
        """
        coupon = CouponService.find_active_coupon(db, application, code)
        if coupon is None:
            raise _reject(application, code, "not_found")

        if not DiscountCalculator.is_coupon_applicable(coupon, order):
            raise _reject(application, code, "product_mismatch")

        if tracking_id is None:
            tracking_id = TrackingService.generate_tracking_id(code, customer.id, order.id)

        discount = DiscountCalculator.compute(coupon, order.amount)

        result_metadata = dict(coupon.meta or {})
        result_metadata.update(metadata or {})

        verified_order = VerifiedOrder(
            **order.model_dump(exclude_unset=True),
            total_amount=to_number(discount.total_amount),
            total_discount_amount=to_number(discount.discount_amount),
        )
        result = VerificationResult(
            code=coupon.code,
            discount_type=coupon.discount_type,
            percent_off=to_number(discount.percent_off) if discount.percent_off is not None else None,
            amount_off=to_number(discount.amount_off) if discount.amount_off is not None else None,
            metadata=result_metadata,
            tracking_id=tracking_id,
            valid=True,
            order=verified_order,
        )
        logger.info(
            "coupon verified",
            extra={
                "application": application.name,
                "code": coupon.code,
                "discount_type": coupon.discount_type.value,
                "tracking_id": tracking_id,
                "discount_amount": result.order.total_discount_amount,
            },
        )
        return result
