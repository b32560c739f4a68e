from decimal import Decimal, ROUND_HALF_UP

RUPEE = "₹"


def _group_indian(digits: str) -> str:
    # 1234567 -> 12,34,567
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_inr(amount) -> str:
    """Format an amount as whole rupees with en-IN digit grouping, e.g. ₹3,05,556."""
    # no context precision limit here, amounts of 1e28 and up stay exact
    value = int(Decimal(str(amount)).to_integral_value(rounding=ROUND_HALF_UP))
    sign = "-" if value < 0 else ""
    return f"{sign}{RUPEE}{_group_indian(str(abs(value)))}"


def format_kw(kw: float) -> str:
    return f"{kw:.2f} kW"


def format_panels(count: int) -> str:
    return f"{count} panels"
