
from sqlalchemy import Column, Integer, String, JSON, DateTime, func
from sqlalchemy.orm import relationship

from app.database import Base


class Application(Base):
    """A tenant. Secret keys are lists so old and new keys overlap during rotation."""

    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True, index=True)
    server_secret_key = Column(JSON, nullable=False, default=list)
    client_secret_key = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    coupons = relationship("Coupon", back_populates="application", cascade="all, delete-orphan")
