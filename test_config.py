import pytest
from pydantic import ValidationError

from app import config
from app.schemas.coupon import CouponCreate


def test_rounding_unit_read_from_env(monkeypatch):
    monkeypatch.setenv("PERCENT_DISCOUNT_ROUNDING_UNIT", "50")

    assert config._positive_int("PERCENT_DISCOUNT_ROUNDING_UNIT", 100) == 50


def test_rounding_unit_defaults_when_unset(monkeypatch):
    monkeypatch.delenv("PERCENT_DISCOUNT_ROUNDING_UNIT", raising=False)

    assert config._positive_int("PERCENT_DISCOUNT_ROUNDING_UNIT", 100) == 100


@pytest.mark.parametrize("raw", ["0", "-100", "ten"])
def test_bad_rounding_unit_rejected_at_startup(monkeypatch, raw):
    monkeypatch.setenv("PERCENT_DISCOUNT_ROUNDING_UNIT", raw)

    with pytest.raises(ValueError):
        config._positive_int("PERCENT_DISCOUNT_ROUNDING_UNIT", 100)


def test_loaded_rounding_unit_is_positive():
    assert config.PERCENT_DISCOUNT_ROUNDING_UNIT >= 1


@pytest.mark.parametrize(
    "fields",
    [
        {"discount_type": "Percent", "percent_off": 0.125},
        {"discount_type": "Percent", "percent_off": 100.5},
        {"discount_type": "Amount", "amount_off": 12.345},
        {"discount_type": "Amount", "amount_off": -1},
    ],
)
def test_coupon_offs_beyond_stored_precision_rejected(fields):
    with pytest.raises(ValidationError):
        CouponCreate(code="X", **fields)


def test_coupon_offs_with_two_decimals_accepted():
    coupon = CouponCreate(code="X", discount_type="Amount", amount_off=12.34)

    assert str(coupon.amount_off) == "12.34"
