"""Display formatting for amounts and durations"""


def format_currency(amount: int, symbol: str = "¥") -> str:
    """Format a whole amount with thousands separators, e.g. ¥300,000"""
    value = int(round(amount))
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,}"


def format_duration(months: int) -> str:
    """Format a month count as years and months, e.g. 12y 10m"""
    return f"{months // 12}y {months % 12}m"

