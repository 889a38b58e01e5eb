"""Deterministic tracking ids binding a (coupon, customer, order) triple.

The client flow derives the id and hands it back to the caller; the server
flow receives the same id for the same triple, so both calls describe one
logical verification. No randomness or clock input goes into the id.
"""

import base64
import hashlib

TRACKING_ID_PREFIX = "trk_"


def _encode_field(value: str) -> bytes:
    # length prefix keeps ("ab", "c") and ("a", "bc") apart
    raw = value.encode("utf-8")
    return len(raw).to_bytes(4, "big") + raw


class TrackingService:

    @staticmethod
    def generate_tracking_id(coupon_code: str, customer_id: str, order_id: str) -> str:
        hasher = hashlib.sha256()
        for field in (coupon_code, customer_id, order_id):
            hasher.update(_encode_field(field))
        token = base64.urlsafe_b64encode(hasher.digest()).rstrip(b"=").decode("ascii")
        return f"{TRACKING_ID_PREFIX}{token}"
