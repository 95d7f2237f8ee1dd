"""Human-readable renderings of minor-unit amounts and distances."""


def format_money(minor: int, currency: str = "EUR") -> str:
    """``1192 -> "11.92 EUR"``."""
    sign = "-" if minor < 0 else ""
    units, cents = divmod(abs(minor), 100)
    return f"{sign}{units}.{cents:02d} {currency}"


def format_distance(meters: int) -> str:
    return f"{meters} m"
