"""Region enumeration for whatismymmr.com servers."""
from enum import Enum
from typing import Union


class Region(Enum):
    """Regions served by whatismymmr.com.

    Each value is the subdomain the region's data lives on
    (e.g. ``euw`` -> ``euw.whatismymmr.com``).
    """

    NA = "na"      # North America
    EUW = "euw"    # Europe West
    EUNE = "eune"  # Europe Nordic & East
    KR = "kr"      # Korea

    @property
    def subdomain(self) -> str:
        """Get the host label used for API calls."""
        return self.value

    @property
    def friendly(self) -> str:
        """Get a human-friendly label for console output."""
        names = {
            "na": "North America",
            "euw": "Europe West",
            "eune": "Europe Nordic & East",
            "kr": "Korea",
        }
        return names[self.value]

    @classmethod
    def all_regions(cls) -> list['Region']:
        """Get all available regions."""
        return list(cls)


RegionCode = Union[Region, str]


def region_code(region: RegionCode) -> str:
    """Host label for a region.

    Plain strings are used verbatim, case included; an unknown code simply
    fails host resolution when the request is made.
    """
    if isinstance(region, Region):
        return region.subdomain
    return region
