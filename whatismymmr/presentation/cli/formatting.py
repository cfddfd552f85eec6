"""Console rendering of lookup results."""
from __future__ import annotations

import json
from typing import Any, List, Optional

from whatismymmr.domain import DistributionData, MMRs, QueueData, QueueType, Region
from whatismymmr.domain.entities.distribution import is_numeric


def to_json(payload: Any) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def region_label(region: str) -> str:
    """``euw, Europe West`` for a known region, the bare code otherwise."""
    try:
        return f"{region}, {Region(region).friendly}"
    except ValueError:
        return region


def _queue_line(queue: QueueType, data: Optional[QueueData]) -> str:
    if data is None or not data.has_estimate:
        return f"- {queue.queue_name}: no estimate"
    line = f"- {queue.queue_name}: {data.avg} ± {data.err}"
    details: List[str] = []
    if data.closest_rank:
        details.append(f"closest rank {data.closest_rank}")
    if data.percentile is not None:
        details.append(f"percentile {data.percentile}")
    if details:
        line += f" ({', '.join(details)})"
    if data.warn:
        line += " [low confidence]"
    return line


def render_mmrs(name: str, region: str, mmrs: MMRs) -> str:
    lines = [f"Summoner: {name} [{region_label(region)}]"]
    lines.extend(_queue_line(q, mmrs.for_queue(q)) for q in QueueType.all_queues())
    return "\n".join(lines)


def render_distribution(region: str, dist: DistributionData) -> str:
    lines = [f"MMR distribution [{region_label(region)}]"]
    for queue in QueueType.all_queues():
        # ratings or counts the service sent as something other than numbers are left out
        buckets = {
            rating: count
            for rating, count in (dist.for_queue(queue) or {}).items()
            if is_numeric(rating) and is_numeric(count)
        }
        if not buckets:
            lines.append(f"- {queue.queue_name}: no data")
            continue
        peak = max(buckets, key=buckets.get)
        lines.append(
            f"- {queue.queue_name}: {min(buckets)}-{max(buckets)}, "
            f"peak at {peak}, {dist.total_players(queue)} players"
        )
    return "\n".join(lines)
