"""Numeric parsing shared by the price store and the ledger."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP


def parse_decimal(value, *, places: str, error_cls, field: str) -> Decimal:
    """
    Coerce ``value`` to a Decimal quantized to ``places`` (e.g. '0.01').

    Floats go through ``str`` so 1.1 stays 1.1 rather than its binary
    expansion. Anything that is not a finite number raises ``error_cls``.
    """
    message = f"{field.capitalize()} must be a number"
    if isinstance(value, bool) or value is None:
        raise error_cls(message)
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value).strip())
        if not number.is_finite():
            raise error_cls(message)
        return number.quantize(Decimal(places), rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError):
        raise error_cls(message)
