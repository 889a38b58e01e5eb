
import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.models.application import Application
from app.models.coupon import Coupon
from app.schemas.coupon import CouponCreate

logger = logging.getLogger(__name__)


class CouponService:
    """Tenant-scoped coupon reads, plus the insert used for provisioning"""

    @staticmethod
    def find_active_coupon(db: Session, application: Application, code: str) -> Optional[Coupon]:
        """Active coupon ``code`` owned by ``application``, or None.

        Inactive coupons are reported exactly like missing ones. Codes are
        matched as-is, no case folding or trimming.
        """
        return (
            db.query(Coupon)
            .filter(
                Coupon.application_id == application.id,
                Coupon.code == code,
                Coupon.active == True,  # noqa: E712
            )
            .first()
        )

    @staticmethod
    def create_coupon(db: Session, application: Application, coupon_data: CouponCreate) -> Coupon:
        db_coupon = Coupon(
            application_id=application.id,
            code=coupon_data.code,
            active=coupon_data.active,
            discount_type=coupon_data.discount_type,
            percent_off=coupon_data.percent_off,
            amount_off=coupon_data.amount_off,
            product=coupon_data.product,
            meta=dict(coupon_data.metadata),
        )
        db.add(db_coupon)
        db.commit()
        db.refresh(db_coupon)
        logger.info(
            "coupon created",
            extra={"application": application.name, "code": db_coupon.code, "discount_type": db_coupon.discount_type.value},
        )
        return db_coupon
