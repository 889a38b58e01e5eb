from typing import Any, List, Optional


class CouponApiError(Exception):
    """Base for errors rendered as ``{"statusCode", "code", "message"}``."""

    status_code = 400
    code = "ERR_BAD_REQUEST"
    message = "Bad request"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message

    def to_body(self) -> dict:
        return {"statusCode": self.status_code, "code": self.code, "message": self.message}


class UnknownCouponCodeError(CouponApiError):
    # covers missing, inactive and product-ineligible coupons alike
    status_code = 400
    code = "ERR_UNKNOWN_COUPON_CODE"
    message = "Unknown coupon code"


class AuthenticationError(CouponApiError):
    status_code = 401
    code = "ERR_UNAUTHORIZED"
    message = "Invalid application credentials"


class MalformedRequestError(CouponApiError):
    status_code = 400
    code = "ERR_VALIDATION"
    message = "Request validation failed"

    def __init__(self, errors: Optional[List[Any]] = None, message: Optional[str] = None):
        super().__init__(message)
        self.errors = errors or []

    def to_body(self) -> dict:
        body = super().to_body()
        body["errors"] = self.errors
        return body
