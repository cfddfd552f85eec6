"""
whatismymmr
===========

Asynchronous client for the whatismymmr.com API: MMR estimates per summoner
and the global MMR distribution, for the NA, EUW, EUNE and KR regions.

Features:
- Layered layout (Domain → Infrastructure → Application → Presentation)
- Shared token-bucket rate limiting (60 requests per minute by default)
- Typed, immutable response entities
- Await results or receive them through a callback

    import asyncio, whatismymmr
    mmrs = asyncio.run(whatismymmr.summoner("Faker", "kr"))
"""

__version__ = "1.0.0"

from .domain import (
    ReducedQueueData, QueueData, RankedQueueData, ReducedTierData, TierData,
    MMRs, DistributionData,
    Region, QueueType,
    WhatIsMyMMRError,
)

from .infrastructure import (
    WhatIsMyMMRClient,
    TokenBucketRateLimiter,
    shared_limiter,
)

from .application import (
    MMRService,
    summoner,
    distribution,
)

from .config import settings

__all__ = [
    # Version info
    '__version__',

    # Domain
    'ReducedQueueData',
    'QueueData',
    'RankedQueueData',
    'ReducedTierData',
    'TierData',
    'MMRs',
    'DistributionData',
    'Region',
    'QueueType',
    'WhatIsMyMMRError',

    # Infrastructure
    'WhatIsMyMMRClient',
    'TokenBucketRateLimiter',
    'shared_limiter',

    # Application
    'MMRService',
    'summoner',
    'distribution',

    # Config
    'settings',
]
