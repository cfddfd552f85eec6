"""Application services."""
from .callbacks import Callback, with_callback
from .mmr_service import MMRService, summoner, distribution

__all__ = [
    'Callback',
    'with_callback',
    'MMRService',
    'summoner',
    'distribution',
]
