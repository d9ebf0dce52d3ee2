"""pricing — threshold discounts on a unit price.

Each discount rule looks at one of the original inputs (``value`` or
``quantity``) and, when that input is strictly above the rule's threshold,
subtracts a fixed deduction from the price.  Rules are independent: they are
evaluated against the inputs as given, never against the running result, so
the deductions simply add up.

The default rules come from ``pricing.rules`` in ``config/defaults.yaml``:
more than 50 takes 2 off, more than 100 units takes another 1 off.  They are
rebuilt from the parsed config on every call, so ``config.reset()`` is the
only cache to clear.
"""

from __future__ import annotations

from typing import Optional, Sequence

from calckit.lib.models import DiscountRule, default_discount_rules


def discount(
    value: float,
    quantity: float,
    *,
    rules: Optional[Sequence[DiscountRule]] = None,
) -> float:
    """Return ``value`` after applying every matching discount rule.

    The result is not clamped and may go negative for small prices.

    Args:
        value: Unit price before discounts.
        quantity: Number of units ordered.
        rules: Rules to apply instead of the configured defaults.

    Returns:
        The discounted price.
    """
    inputs = {"value": value, "quantity": quantity}
    result = value
    for rule in default_discount_rules() if rules is None else rules:
        if rule.applies(inputs):
            result = result - rule.deduction
    return result
