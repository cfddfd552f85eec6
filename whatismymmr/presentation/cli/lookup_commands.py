from __future__ import annotations

import sys
from typing import Callable, Optional

import httpx

from whatismymmr.application import MMRService
from whatismymmr.config import settings
from whatismymmr.core.logging import StructuredLogger, get_logger
from whatismymmr.domain import WhatIsMyMMRError
from whatismymmr.infrastructure import WhatIsMyMMRClient
from .formatting import render_distribution, render_mmrs, to_json

EXIT_OK = 0
EXIT_REMOTE_ERROR = 1
EXIT_NETWORK_ERROR = 2

ClientFactory = Callable[[], WhatIsMyMMRClient]


class LookupCommand:
    """Base for commands that run one lookup and print the result."""

    service = "cli"

    def __init__(self, *, json_out: bool = False, client_factory: Optional[ClientFactory] = None) -> None:
        self.logger: StructuredLogger = get_logger(__name__, service=self.service)
        self.json_out = json_out
        self.client_factory: ClientFactory = client_factory or WhatIsMyMMRClient

    async def _guarded(self, lookup) -> int:
        try:
            async with self.client_factory() as client:
                await lookup(MMRService(client))
            return EXIT_OK
        except WhatIsMyMMRError as exc:
            self.logger.warning(lambda: f"remote-error code={exc.code}")
            if self.json_out:
                print(to_json({"error": exc.to_dict()}))
            else:
                print(f"error {exc.code}: {exc.message}", file=sys.stderr)
            return EXIT_REMOTE_ERROR
        except httpx.HTTPError as exc:
            self.logger.error(lambda: f"network-error {exc!r}")
            print(f"network error: {exc}", file=sys.stderr)
            return EXIT_NETWORK_ERROR


class SummonerCommand(LookupCommand):
    service = "summoner"

    async def run(self, name: str, region: Optional[str] = None) -> int:
        region = region or settings.DEFAULT_REGION

        async def _lookup(svc: MMRService) -> None:
            mmrs = await svc.summoner(name, region)
            self.logger.success(lambda: f"summoner-ok {name} [{region}]")
            print(to_json(mmrs.to_dict()) if self.json_out else render_mmrs(name, region, mmrs))

        return await self._guarded(_lookup)


class DistributionCommand(LookupCommand):
    service = "distribution"

    async def run(self, region: Optional[str] = None) -> int:
        region = region or settings.DEFAULT_REGION

        async def _lookup(svc: MMRService) -> None:
            dist = await svc.distribution(region)
            self.logger.success(lambda: f"distribution-ok [{region}]")
            print(to_json(dist.to_dict()) if self.json_out else render_distribution(region, dist))

        return await self._guarded(_lookup)
