"""Infrastructure API module."""
from .client import WhatIsMyMMRClient, SUMMONER_PATH, DISTRIBUTION_PATH
from .rate_limiter import TokenBucketRateLimiter, shared_limiter

__all__ = [
    'WhatIsMyMMRClient',
    'SUMMONER_PATH',
    'DISTRIBUTION_PATH',
    'TokenBucketRateLimiter',
    'shared_limiter',
]
