"""
P/L Calculator - realized profit/loss for a single trade.
"""

from typing import Any, Optional, Union

from .trade_record import Direction


def _to_direction(direction: Union[Direction, str]) -> Direction:
    """Anything other than Long is priced as a short."""
    if isinstance(direction, Direction):
        return direction
    return Direction.LONG if direction == Direction.LONG.value else Direction.SHORT


def _parse_number(value: Any) -> float:
    """Parse a raw form value, treating anything unparseable as 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    # NaN fails every comparison, so it cannot stand in for a price
    if number != number:
        return 0.0
    return number


def compute_result(
    direction: Union[Direction, str],
    size: float,
    entry: float,
    exit: float,
    fee: float = 0.0
) -> float:
    """
    Calculate realized P/L.

    Long:  (exit - entry) * size - fee
    Short: (entry - exit) * size - fee
    """
    if _to_direction(direction) == Direction.LONG:
        return (exit - entry) * size - fee
    return (entry - exit) * size - fee


def preview_result(
    direction: Union[Direction, str],
    size: Any,
    entry: Any,
    exit: Any,
    fee: Any = None
) -> Optional[float]:
    """
    Compute a preview from raw form values.

    Returns None when size, entry or exit is missing, unparseable or zero;
    the caller should then leave its result field untouched.
    """
    size = _parse_number(size)
    entry = _parse_number(entry)
    exit = _parse_number(exit)

    if not (size and entry and exit):
        return None

    return compute_result(direction, size, entry, exit, _parse_number(fee))


def format_money(value: float) -> str:
    """
    Two-decimal display string, rounded to the nearest cent rather than
    truncated. Stored values keep full precision.
    """
    return f"{value:.2f}"
