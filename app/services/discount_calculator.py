
from typing import Callable, Dict, NamedTuple, Optional, Union
from decimal import Decimal, localcontext

from app.config import PERCENT_DISCOUNT_ROUNDING_UNIT
from app.models.coupon import Coupon, DiscountType


def D(x) -> Decimal:
    return Decimal(str(x))


def to_number(x: Decimal) -> Union[int, float]:
    """JSON-friendly number: integral values come back as int."""
    if x == x.to_integral_value():
        return int(x)
    return float(x)


def _digits(x: Decimal) -> int:
    # significant digits plus trailing zeros implied by a positive exponent
    sign, digits, exponent = x.as_tuple()
    return len(digits) + max(exponent, 0) + max(-exponent - len(digits), 0)


class DiscountResult(NamedTuple):
    discount_amount: Decimal
    total_amount: Decimal
    percent_off: Optional[Decimal] = None
    amount_off: Optional[Decimal] = None


class _Rule(NamedTuple):
    discount_amount: Decimal
    percent_off: Optional[Decimal] = None
    amount_off: Optional[Decimal] = None


def clamp_discount(discount: Decimal, amount: Decimal) -> Decimal:
    # never below zero, never more than the order is worth
    return max(D(0), min(discount, amount))


def _percent(coupon: Coupon, amount: Decimal, unit: Decimal) -> _Rule:
    percent_off = D(coupon.percent_off or 0)
    # integer division truncates; operands are non-negative so that is a floor
    raw = ((amount * percent_off) // (D(100) * unit)) * unit
    return _Rule(clamp_discount(raw, amount), percent_off=percent_off)


def _amount(coupon: Coupon, amount: Decimal, unit: Decimal) -> _Rule:
    amount_off = D(coupon.amount_off or 0)
    return _Rule(clamp_discount(min(amount_off, amount), amount), amount_off=amount_off)


def _effect(coupon: Coupon, amount: Decimal, unit: Decimal) -> _Rule:
    # recorded for downstream effect accounting, never deducted here
    return _Rule(D(0), amount_off=D(0))


_RULES: Dict[DiscountType, Callable[[Coupon, Decimal, Decimal], _Rule]] = {
    DiscountType.PERCENT: _percent,
    DiscountType.AMOUNT: _amount,
    DiscountType.EFFECT_PERCENT: _effect,
    DiscountType.EFFECT_AMOUNT: _effect,
}

_unhandled = set(DiscountType) - set(_RULES)
if _unhandled:
    raise RuntimeError(f"No discount rule for: {sorted(t.value for t in _unhandled)}")


class DiscountCalculator:
    """Service class to calculate discounts for the four coupon discount types"""

    @staticmethod
    def compute(coupon: Coupon, amount, rounding_unit: Optional[int] = None) -> DiscountResult:
        """Discount and remaining total for ``amount``.

        All arithmetic is exact: the decimal context is widened to fit the
        operands, so ``discount_amount + total_amount == amount`` for any size
        of order.
        """
        if rounding_unit is None:
            rounding_unit = PERCENT_DISCOUNT_ROUNDING_UNIT
        if rounding_unit < 1:
            raise ValueError("rounding_unit must be >= 1")

        amount = D(amount)
        unit = D(rounding_unit)
        operands = [amount, unit, D(coupon.percent_off or 0), D(coupon.amount_off or 0)]
        with localcontext() as ctx:
            ctx.prec = max(28, sum(_digits(x) for x in operands) + 10)
            rule = _RULES[DiscountType(coupon.discount_type)](coupon, amount, unit)
            total_amount = amount - rule.discount_amount
        return DiscountResult(rule.discount_amount, total_amount, rule.percent_off, rule.amount_off)

    @staticmethod
    def is_coupon_applicable(coupon: Coupon, order) -> bool:
        if not coupon.product:
            return True
        return any(item.product_id == coupon.product for item in order.items)
