"""Public summoner and distribution lookups."""
from __future__ import annotations

from typing import Optional

from whatismymmr.config import settings
from whatismymmr.core.logging import get_logger
from whatismymmr.domain import DistributionData, MMRs, RegionCode
from whatismymmr.infrastructure import WhatIsMyMMRClient
from .callbacks import Callback, with_callback

logger = get_logger(__name__, service="mmr")


class MMRService:
    """Summoner and distribution lookups bound to a caller-owned client."""

    def __init__(self, client: WhatIsMyMMRClient):
        self.client = client

    async def summoner(
        self,
        name: str,
        region: Optional[RegionCode] = None,
        callback: Optional[Callback[MMRs]] = None,
    ) -> MMRs:
        """
        Get the MMR estimates of a summoner.

        Args:
            name: Summoner name, sent unencoded (pre-encode reserved characters)
            region: Region code, defaults to ``settings.DEFAULT_REGION``
            callback: Optional ``(result, error)`` callable, invoked once

        Returns:
            MMRs for the ranked, normal and ARAM queues
        """
        region = region or settings.DEFAULT_REGION
        logger.debug(lambda: f"summoner lookup name={name} region={region}")
        return await with_callback(self.client.get_summoner(name, region), callback)

    async def distribution(
        self,
        region: Optional[RegionCode] = None,
        callback: Optional[Callback[DistributionData]] = None,
    ) -> DistributionData:
        """Get the scaled player counts across all MMRs for each queue type."""
        region = region or settings.DEFAULT_REGION
        logger.debug(lambda: f"distribution lookup region={region}")
        return await with_callback(self.client.get_distribution(region), callback)


async def summoner(
    name: str,
    region: Optional[RegionCode] = None,
    callback: Optional[Callback[MMRs]] = None,
    *,
    client: Optional[WhatIsMyMMRClient] = None,
) -> MMRs:
    """Get the MMR estimates of a summoner.

    Without ``client`` a short-lived one is opened for the call; it still
    draws from the shared rate limiter.
    """
    if client is not None:
        return await MMRService(client).summoner(name, region, callback)
    async with WhatIsMyMMRClient() as owned:
        return await MMRService(owned).summoner(name, region, callback)


async def distribution(
    region: Optional[RegionCode] = None,
    callback: Optional[Callback[DistributionData]] = None,
    *,
    client: Optional[WhatIsMyMMRClient] = None,
) -> DistributionData:
    """Get the global MMR distribution of a region."""
    if client is not None:
        return await MMRService(client).distribution(region, callback)
    async with WhatIsMyMMRClient() as owned:
        return await MMRService(owned).distribution(region, callback)
