"""Domain enumerations."""
from .region import Region, RegionCode, region_code
from .queue_type import QueueType

__all__ = [
    'Region',
    'RegionCode',
    'region_code',
    'QueueType',
]
