"""Per-queue MMR estimates as returned by the summoner endpoint."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from .payload import get_field


def _compact(payload: Dict[str, Any]) -> Dict[str, Any]:
    # fields missing from the response stay missing on the way back out
    return {k: v for k, v in payload.items() if v is not None}


def _sequence(items: Any, factory) -> Optional[tuple]:
    # anything but a JSON array counts as absent
    if not isinstance(items, (list, tuple)):
        return None
    return tuple(factory(item) for item in items)


@dataclass(frozen=True, slots=True)
class ReducedTierData:
    """A named tier bracket with its average rating."""
    name: Optional[str] = None
    avg: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ReducedTierData":
        return cls(name=get_field(data, "name"), avg=get_field(data, "avg"))

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"name": self.name, "avg": self.avg})


@dataclass(frozen=True, slots=True)
class TierData(ReducedTierData):
    """A tier bracket with its rating range."""
    min: Optional[float] = None
    max: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TierData":
        return cls(
            name=get_field(data, "name"),
            avg=get_field(data, "avg"),
            min=get_field(data, "min"),
            max=get_field(data, "max"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"name": self.name, "avg": self.avg, "min": self.min, "max": self.max})


@dataclass(frozen=True, slots=True)
class ReducedQueueData:
    """
    A single MMR estimate.

    ``warn`` is set by the service when too few recent games were found for
    the estimate to be trusted. ``timestamp`` is the Unix time (seconds) the
    estimate was computed.
    """
    avg: Optional[float] = None
    err: Optional[float] = None
    warn: Optional[bool] = None
    timestamp: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ReducedQueueData":
        return cls(
            avg=get_field(data, "avg"),
            err=get_field(data, "err"),
            warn=get_field(data, "warn"),
            timestamp=get_field(data, "timestamp"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            "avg": self.avg,
            "err": self.err,
            "warn": self.warn,
            "timestamp": self.timestamp,
        })


@dataclass(frozen=True, slots=True)
class QueueData(ReducedQueueData):
    """Current estimate plus its history, closest rank and percentile."""
    historical: Optional[Tuple[ReducedQueueData, ...]] = None
    closest_rank: Optional[str] = None
    percentile: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "QueueData":
        return cls(**cls._queue_fields(data))

    @staticmethod
    def _queue_fields(data: Mapping[str, Any]) -> Dict[str, Any]:
        return {
            "avg": get_field(data, "avg"),
            "err": get_field(data, "err"),
            "warn": get_field(data, "warn"),
            "timestamp": get_field(data, "timestamp"),
            "historical": _sequence(get_field(data, "historical"), ReducedQueueData.from_dict),
            "closest_rank": get_field(data, "closestRank"),
            "percentile": get_field(data, "percentile"),
        }

    @property
    def has_estimate(self) -> bool:
        """True when the service returned a rating for this queue."""
        return self.avg is not None

    def to_dict(self) -> Dict[str, Any]:
        payload = ReducedQueueData.to_dict(self)
        payload.update(_compact({
            "historical": None if self.historical is None else [h.to_dict() for h in self.historical],
            "closestRank": self.closest_rank,
            "percentile": self.percentile,
        }))
        return payload


@dataclass(frozen=True, slots=True)
class RankedQueueData(QueueData):
    """Ranked queue estimate with the current and historical tier brackets."""
    tier_data: Optional[Tuple[TierData, ...]] = None
    historical_tier_data: Optional[Tuple[TierData, ...]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RankedQueueData":
        return cls(
            **cls._queue_fields(data),
            tier_data=_sequence(get_field(data, "tierData"), TierData.from_dict),
            historical_tier_data=_sequence(get_field(data, "historicalTierData"), TierData.from_dict),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = QueueData.to_dict(self)
        payload.update(_compact({
            "tierData": None if self.tier_data is None else [t.to_dict() for t in self.tier_data],
            "historicalTierData": None
            if self.historical_tier_data is None
            else [t.to_dict() for t in self.historical_tier_data],
        }))
        return payload
