"""Number formatting for report summaries."""

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from ground_control.constants import DEFAULT_DECIMAL_PLACES, LAST_REPORT_MARKER

_DECIMAL_PRECISION = 64


def format_fixed(value: float, places: int = DEFAULT_DECIMAL_PLACES) -> str:
    """Render a number with exactly ``places`` decimals, rounding half up.

    Rounds the shortest decimal form of the float rather than its binary
    value, so 12.345 renders as ``12.35``.

    Args:
        value: Number to render.
        places: Digits after the decimal point.

    Returns:
        The formatted number.
    """
    if not math.isfinite(value):
        return f"{value:.{places}f}"
    quantum = Decimal(1).scaleb(-places)
    try:
        with localcontext() as context:
            context.prec = _DECIMAL_PRECISION
            return str(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        # magnitudes beyond the working precision
        return f"{value:.{places}f}"


def completion_marker(is_last_report: bool) -> str:
    """Return the trailing marker for the terminal report of a sequence."""
    return LAST_REPORT_MARKER if is_last_report else ""
