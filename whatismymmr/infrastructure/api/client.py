"""whatismymmr.com API client."""
import json
from typing import Any, Optional

import httpx

from whatismymmr.config import settings
from whatismymmr.core.logging import context, get_logger
from whatismymmr.domain import DistributionData, MMRs, Region, RegionCode, WhatIsMyMMRError, region_code
from .rate_limiter import TokenBucketRateLimiter, shared_limiter

logger = get_logger(__name__, service="client")

SUMMONER_PATH = "/api/v1/summoner"
DISTRIBUTION_PATH = "/api/v1/distribution"


class WhatIsMyMMRClient:
    """Asynchronous whatismymmr.com client gated by a token-bucket limiter.

    Every client built with the same rate-limit configuration shares one
    limiter unless another is injected. Use as an async context manager; a
    client used without one opens its session on the first request and must
    then be closed with :meth:`aclose`.
    """

    def __init__(
        self,
        *,
        limiter: Optional[TokenBucketRateLimiter] = None,
        user_agent: Optional[str] = None,
        base_domain: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        self.limiter = limiter or shared_limiter(settings.RATE_LIMIT_TOKENS, settings.RATE_LIMIT_INTERVAL)
        self.user_agent = user_agent or settings.user_agent()
        self.base_domain = base_domain or settings.BASE_DOMAIN
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.session: Optional[httpx.AsyncClient] = None
        self._transport = transport

    async def __aenter__(self):
        self._open()
        return self

    async def __aexit__(self, *_):
        await self.aclose()

    def _open(self) -> httpx.AsyncClient:
        if self.session is None or self.session.is_closed:
            self.session = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
                follow_redirects=False,
                transport=self._transport,
            )
        return self.session

    async def aclose(self) -> None:
        if self.session:
            await self.session.aclose()
            self.session = None

    def get_host(self, region: RegionCode) -> str:
        return f"{region_code(region)}.{self.base_domain}"

    async def fetch(self, region: RegionCode, path: str) -> Any:
        """GET ``path`` on the region's host and decode the JSON body.

        ``path`` (query string included) goes out as given; the library does
        not escape it. A non-200 answer raises :class:`WhatIsMyMMRError` built
        from the body's ``error`` object. If that body is not JSON the
        ``json.JSONDecodeError`` propagates unchanged, as do transport errors.
        """
        session = self._open()
        host = self.get_host(region)
        url = f"https://{host}{path}"

        await self.limiter.acquire()

        with context(host=host, path=path):
            logger.debug(lambda: f"GET {url}")
            response = await session.get(url)
            logger.trace(lambda: f"HTTP {response.status_code}, {len(response.content)} bytes from {url}")

            if response.status_code == 200:
                return response.json()

            logger.warning(lambda: f"HTTP {response.status_code} for {url}")
            body = json.loads(response.text)
            raise WhatIsMyMMRError.from_body(body, status_code=response.status_code)

    # ── Summoner API ───────────────────────────────────────────────────

    async def get_summoner(self, name: str, region: RegionCode = Region.NA) -> MMRs:
        # name is interpolated as-is; callers pre-encode reserved characters
        data = await self.fetch(region, f"{SUMMONER_PATH}?name={name}")
        return MMRs.from_dict(data)

    # ── Distribution API ───────────────────────────────────────────────

    async def get_distribution(self, region: RegionCode = Region.NA) -> DistributionData:
        data = await self.fetch(region, DISTRIBUTION_PATH)
        return DistributionData.from_dict(data)
