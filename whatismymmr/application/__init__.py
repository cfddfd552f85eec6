"""Application layer - Public lookups."""
from .services import MMRService, summoner, distribution, with_callback

__all__ = [
    'MMRService',
    'summoner',
    'distribution',
    'with_callback',
]
