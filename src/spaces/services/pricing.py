"""Display pricing for the booking wizard and emails (INR, 18% GST)."""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

GST_RATE = Decimal("0.18")


@dataclass(frozen=True)
class PriceQuote:
    monthly_rate: Decimal
    months: int
    base_amount: Decimal
    gst_amount: Decimal
    total: Decimal


def quote_price(monthly_rate, months: int) -> PriceQuote:
    rate = Decimal(str(monthly_rate))
    base = rate * months
    gst = base * GST_RATE
    total = (base + gst).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return PriceQuote(
        monthly_rate=rate,
        months=months,
        base_amount=base,
        gst_amount=gst,
        total=total,
    )


def format_inr(amount) -> str:
    """Rupee amount with Indian digit grouping and no decimals: ₹1,18,000."""
    value = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    digits = str(abs(int(value)))
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ",".join(groups + [tail])
    return f"{sign}₹{digits}"
