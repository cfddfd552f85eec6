"""Domain layer - Response entities, enums and errors."""
from .entities import (
    ReducedQueueData, QueueData, RankedQueueData, ReducedTierData, TierData,
    MMRs, DistributionData, DistributionRange,
)
from .enums import Region, RegionCode, region_code, QueueType
from .errors import WhatIsMyMMRError

__all__ = [
    # Entities
    'ReducedQueueData',
    'QueueData',
    'RankedQueueData',
    'ReducedTierData',
    'TierData',
    'MMRs',
    'DistributionData',
    'DistributionRange',
    # Enums
    'Region',
    'RegionCode',
    'region_code',
    'QueueType',
    # Errors
    'WhatIsMyMMRError',
]
