"""Presentation CLI exports."""
from .lookup_commands import (
    DistributionCommand,
    SummonerCommand,
    EXIT_OK,
    EXIT_REMOTE_ERROR,
    EXIT_NETWORK_ERROR,
)

__all__ = [
    "SummonerCommand",
    "DistributionCommand",
    "EXIT_OK",
    "EXIT_REMOTE_ERROR",
    "EXIT_NETWORK_ERROR",
]
