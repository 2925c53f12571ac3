"""Application layer - use cases and orchestration."""

from .commands import GenerateNetCommand
from .dtos import NetOutput

__all__ = [
    "GenerateNetCommand",
    "NetOutput",
]
