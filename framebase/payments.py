"""
Payment methods offered at checkout, chosen by the visitor's locale.
"""

from dataclasses import dataclass, asdict
from typing import Dict, List


@dataclass(frozen=True)
class PaymentMethod:
    id: str
    label: str
    description: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


PAYMENT_METHODS: Dict[str, PaymentMethod] = {
    "card": PaymentMethod(
        id="card",
        label="Credit / Debit Card",
        description="Visa, Mastercard, Amex supported.",
    ),
    "stripe": PaymentMethod(
        id="stripe",
        label="Stripe",
        description="Secure checkout with Stripe.",
    ),
    "paypal": PaymentMethod(
        id="paypal",
        label="PayPal",
        description="Pay with your PayPal account.",
    ),
    "upi": PaymentMethod(
        id="upi",
        label="UPI",
        description="Instant UPI payments.",
    ),
    "razorpay": PaymentMethod(
        id="razorpay",
        label="Razorpay",
        description="Indian payments via Razorpay.",
    ),
}


def is_indian_region(locale: str) -> bool:
    """Any locale containing "in" (case-insensitive) counts as India."""
    return "in" in locale.lower()


def get_payment_methods_for_locale(locale: str) -> List[PaymentMethod]:
    """Return the three methods offered for a locale, in display order."""
    if is_indian_region(locale):
        return [PAYMENT_METHODS["upi"], PAYMENT_METHODS["razorpay"], PAYMENT_METHODS["card"]]
    return [PAYMENT_METHODS["card"], PAYMENT_METHODS["stripe"], PAYMENT_METHODS["paypal"]]
