"""
Display formatting shared by receipts, labels and reports.
"""

from datetime import date, datetime


MONTH_LABELS = ("Jan", "Fev", "Mar", "Abr", "Mai", "Jun", "Jul", "Ago", "Set", "Out", "Nov", "Dez")


def format_brl(value: float) -> str:
    """
    Format an amount the way Brazilian receipts show it.

    Example:
        >>> format_brl(4200)
        'R$ 4.200,00'
        >>> format_brl(-1800.5)
        '-R$ 1.800,50'
    """
    sign = "-" if value < 0 else ""
    digits = f"{abs(value):,.2f}"
    digits = digits.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {digits}"


def format_datetime_br(value: datetime) -> str:
    """``dd/mm/yyyy HH:MM``, as shown in the sales history."""
    return value.strftime("%d/%m/%Y %H:%M")


def format_date_br(value: date) -> str:
    return value.strftime("%d/%m/%Y")


def month_label(value: date) -> str:
    return MONTH_LABELS[value.month - 1]


def quarter_label(year: int, quarter: int) -> str:
    return f"T{quarter}/{year}"
