"""Unit conversion helpers for appointment-deployments library."""

from decimal import Decimal, InvalidOperation
from typing import Union

from eth_utils import to_wei


def parse_ether(value: Union[str, int, Decimal]) -> int:
    """
    Convert an ether amount to wei without rounding.

    Args:
        value: Decimal ether amount, e.g. "0.0001"

    Returns:
        Amount in wei, e.g. 100000000000000

    Raises:
        ValueError: If value is not a number, is negative, or has
                    more precision than one wei
    """
    if isinstance(value, float):
        raise ValueError("Pass ether amounts as str or Decimal, not float")

    try:
        amount = Decimal(value)
    except InvalidOperation as e:
        raise ValueError(f"Invalid ether amount: {value!r}") from e

    if not amount.is_finite() or amount < 0:
        raise ValueError(f"Invalid ether amount: {value!r}")

    # to_wei would silently truncate sub-wei precision
    _, digits, exponent = amount.as_tuple()
    trailing_zeros = len(digits) - len("".join(map(str, digits)).rstrip("0"))
    if exponent + trailing_zeros < -18:
        raise ValueError(f"Ether amount {value!r} has more than 18 decimal places")

    return to_wei(amount, "ether")
