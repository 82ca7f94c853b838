"""
Fixed-point rendering of integer cent amounts.
"""


def format_cents(cents: int, plus_sign: bool = False) -> str:
    """
    Render an integer cent amount as fixed-point decimal.

    Args:
        cents: Amount in cents
        plus_sign: Prefix non-negative amounts with "+"

    Returns:
        String such as "-12.34", "0.05" or "+150.00"
    """
    sign = "+" if plus_sign else ""
    if cents < 0:
        sign = "-"
        cents = -cents
    return f"{sign}{cents // 100}.{cents % 100:02d}"
