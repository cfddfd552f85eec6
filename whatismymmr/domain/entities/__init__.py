"""Domain entities."""
from .queue_data import ReducedQueueData, QueueData, RankedQueueData, ReducedTierData, TierData
from .mmr import MMRs
from .distribution import DistributionData, DistributionRange

__all__ = [
    'ReducedQueueData',
    'QueueData',
    'RankedQueueData',
    'ReducedTierData',
    'TierData',
    'MMRs',
    'DistributionData',
    'DistributionRange',
]
