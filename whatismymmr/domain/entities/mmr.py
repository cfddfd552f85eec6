"""MMR result for one summoner."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..enums import QueueType
from .payload import as_mapping, get_field
from .queue_data import QueueData, RankedQueueData


@dataclass(frozen=True, slots=True)
class MMRs:
    """Estimates for the ranked, normal and ARAM queues of one summoner."""

    ranked: Optional[RankedQueueData] = None
    normal: Optional[QueueData] = None
    aram: Optional[QueueData] = None

    @classmethod
    def from_dict(cls, data: Any) -> "MMRs":
        """Build from the summoner endpoint payload without validating it.

        A body or queue entry that is not a JSON object is treated as missing.
        """
        ranked = as_mapping(get_field(data, QueueType.RANKED.value))
        normal = as_mapping(get_field(data, QueueType.NORMAL.value))
        aram = as_mapping(get_field(data, QueueType.ARAM.value))
        return cls(
            ranked=RankedQueueData.from_dict(ranked) if ranked is not None else None,
            normal=QueueData.from_dict(normal) if normal is not None else None,
            aram=QueueData.from_dict(aram) if aram is not None else None,
        )

    def for_queue(self, queue: QueueType) -> Optional[QueueData]:
        return getattr(self, queue.field_name)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        for queue in QueueType.all_queues():
            data = self.for_queue(queue)
            if data is not None:
                payload[queue.value] = data.to_dict()
        return payload
