"""Infrastructure layer - HTTP client and rate limiting."""
from .api import WhatIsMyMMRClient, TokenBucketRateLimiter, shared_limiter

__all__ = [
    'WhatIsMyMMRClient',
    'TokenBucketRateLimiter',
    'shared_limiter',
]
