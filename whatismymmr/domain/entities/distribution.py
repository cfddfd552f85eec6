"""Global MMR distribution."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from ..enums import QueueType
from .payload import as_mapping, get_field

# a key that is not a number is kept as the string the service sent
Rating = Union[int, float, str]
DistributionRange = Dict[Rating, Any]


def _rating(key: Any) -> Rating:
    # JSON object keys are strings; "1200" -> 1200, "1200.5" -> 1200.5
    try:
        value = float(key)
    except (TypeError, ValueError):
        return key
    return int(value) if value.is_integer() else value


def is_numeric(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _range_from(data: Any) -> Optional[DistributionRange]:
    mapping = as_mapping(data)
    if mapping is None:
        return None
    return {_rating(k): v for k, v in mapping.items()}


def _range_to(data: DistributionRange) -> Dict[str, Any]:
    return {str(k): v for k, v in data.items()}


@dataclass(frozen=True, slots=True)
class DistributionData:
    """Scaled player counts per rating for each queue type."""

    ranked: Optional[DistributionRange] = None
    normal: Optional[DistributionRange] = None
    aram: Optional[DistributionRange] = None

    @classmethod
    def from_dict(cls, data: Any) -> "DistributionData":
        return cls(
            ranked=_range_from(get_field(data, QueueType.RANKED.value)),
            normal=_range_from(get_field(data, QueueType.NORMAL.value)),
            aram=_range_from(get_field(data, QueueType.ARAM.value)),
        )

    def for_queue(self, queue: QueueType) -> Optional[DistributionRange]:
        return getattr(self, queue.field_name)

    def total_players(self, queue: QueueType) -> int:
        """Sum of the (scaled) player counts of one queue, skipping non-numeric counts."""
        return sum(v for v in (self.for_queue(queue) or {}).values() if is_numeric(v))

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        for queue in QueueType.all_queues():
            data = self.for_queue(queue)
            if data is not None:
                payload[queue.value] = _range_to(data)
        return payload
