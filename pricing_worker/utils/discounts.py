"""
Weekday Discount Lookup

Process-wide, read-only table of discount percentages indexed by weekday
(0 = first day of the pricing week).
"""

# Percent off for weekday 0..6
DISCOUNTS: tuple[int, ...] = (0, 5, 10, 15, 20, 25, 30)

DEFAULT_DISCOUNT = 0


def discount_for(wday: object) -> int:
    """
    Look up the discount percentage for a weekday index.

    Args:
        wday: Weekday index, expected 0-6

    Returns:
        Discount percentage; DEFAULT_DISCOUNT for anything outside the table
    """
    if isinstance(wday, float) and wday.is_integer():
        wday = int(wday)

    if isinstance(wday, bool) or not isinstance(wday, int):
        return DEFAULT_DISCOUNT

    if 0 <= wday < len(DISCOUNTS):
        return DISCOUNTS[wday]

    return DEFAULT_DISCOUNT
