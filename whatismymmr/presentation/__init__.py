"""Presentation layer - command-line front end."""
from .cli import SummonerCommand, DistributionCommand

__all__ = [
    'SummonerCommand',
    'DistributionCommand',
]
