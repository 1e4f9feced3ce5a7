"""
Trade Record - the unit of persisted ledger data.

One closed position with its price/size/fee inputs and realized result.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Dict, Any

from .errors import InvalidTradeError


class Direction(Enum):
    """Trade direction."""
    LONG = "Long"
    SHORT = "Short"


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


@dataclass
class TradeRecord:
    """Complete trade record."""
    # Identification
    id: str = ""
    date: datetime = field(default_factory=datetime.now)
    symbol: str = ""

    # Trade details
    direction: Direction = Direction.LONG
    size: float = 0.0
    entry: float = 0.0
    exit: float = 0.0

    # Risk management
    stop_loss: Optional[float] = None
    take_profit: Optional[float] = None

    # Performance
    fee: float = 0.0
    result: float = 0.0

    notes: str = ""

    def __post_init__(self):
        self.symbol = self.symbol.upper()
        if self.fee is None:
            self.fee = 0.0
        if self.notes is None:
            self.notes = ""
        # Offset-aware dates are stored as naive UTC so every date in a ledger compares
        if self.date.tzinfo is not None:
            self.date = self.date.astimezone(timezone.utc).replace(tzinfo=None)

    def validate(self) -> None:
        """
        Check the invariants a stored record must satisfy.

        Raises:
            InvalidTradeError: size is not positive or fee is negative
        """
        if not self.size > 0:
            raise InvalidTradeError('size', self.size, "must be positive")
        if self.fee < 0:
            raise InvalidTradeError('fee', self.fee, "must not be negative")

    @property
    def is_win(self) -> bool:
        """Break-even (result == 0) counts as a win."""
        return self.result >= 0

    def computed_result(self) -> float:
        """P/L the formula gives for this record's own inputs."""
        # Deferred to avoid circular import
        from .calculator import compute_result

        return compute_result(self.direction, self.size, self.entry, self.exit, self.fee)

    def result_diverges(self, tolerance: float = 1e-9) -> bool:
        """Whether the stored result was overridden away from the formula value."""
        return abs(self.result - self.computed_result()) > tolerance

    def recompute(self) -> 'TradeRecord':
        """Copy of this record with the result re-derived from its inputs."""
        return replace(self, result=self.computed_result())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'date': self.date.isoformat(),
            'symbol': self.symbol,
            'direction': self.direction.value,
            'size': self.size,
            'entry': self.entry,
            'exit': self.exit,
            'stopLoss': self.stop_loss,
            'takeProfit': self.take_profit,
            'fee': self.fee,
            'result': self.result,
            'notes': self.notes,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TradeRecord':
        """
        Create from dictionary.

        Offset-aware dates come back as naive UTC. Raises KeyError, ValueError
        or TypeError when a required field is missing or unusable.
        """
        date = data['date']
        if isinstance(date, str):
            date = datetime.fromisoformat(date)
        if not isinstance(date, datetime):
            raise TypeError(f"Unsupported date value: {date!r}")

        record = cls(
            id=str(data['id']),
            date=date,
            symbol=str(data['symbol']),
            direction=Direction(data['direction']),
            size=float(data['size']),
            entry=float(data['entry']),
            exit=float(data['exit']),
            stop_loss=_optional_float(data.get('stopLoss')),
            take_profit=_optional_float(data.get('takeProfit')),
            fee=float(data.get('fee') or 0),
            result=float(data['result']),
            notes=data.get('notes') or "",
        )
        record.validate()
        return record
