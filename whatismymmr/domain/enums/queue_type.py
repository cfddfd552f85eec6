"""Queue type enumeration."""
from enum import Enum


class QueueType(Enum):
    """Queue types tracked independently by whatismymmr.com.

    The value is the key the service uses in both the summoner and the
    distribution payloads.
    """

    RANKED = "ranked"
    NORMAL = "normal"
    ARAM = "ARAM"

    @property
    def queue_name(self) -> str:
        """Get human-readable queue name."""
        names = {
            "ranked": "Ranked Solo/Duo",
            "normal": "Normal Draft",
            "ARAM": "ARAM",
        }
        return names[self.value]

    @property
    def field_name(self) -> str:
        """Attribute name on the result entities."""
        return self.value.lower()

    @classmethod
    def all_queues(cls) -> list['QueueType']:
        return list(cls)
