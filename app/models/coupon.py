
import enum

from sqlalchemy import Column, Integer, String, Enum, Boolean, JSON, DateTime, Numeric, ForeignKey, Index, UniqueConstraint, func
from sqlalchemy.orm import relationship

from app.database import Base


class DiscountType(str, enum.Enum):
    PERCENT = "Percent"
    AMOUNT = "Amount"
    EFFECT_PERCENT = "EffectPercent"
    EFFECT_AMOUNT = "EffectAmount"


class Coupon(Base):
    __tablename__ = "coupons"

    id = Column(Integer, primary_key=True, index=True)
    application_id = Column(Integer, ForeignKey("applications.id", ondelete="CASCADE"), nullable=False)
    code = Column(String(255), nullable=False)
    active = Column(Boolean, default=True, nullable=False)
    discount_type = Column(
        Enum(DiscountType, name="discount_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    percent_off = Column(Numeric(5, 2), nullable=True)
    amount_off = Column(Numeric(18, 2), nullable=True)
    # restricts the coupon to orders containing this productId
    product = Column(String(255), nullable=True)
    # "metadata" is reserved on declarative classes
    meta = Column("metadata", JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    application = relationship("Application", back_populates="coupons")

    __table_args__ = (
        UniqueConstraint("application_id", "code", name="uq_coupons_application_code"),
        Index("ix_coupons_application_code_active", "application_id", "code", "active"),
    )
