"""Application layer - use cases and orchestration."""

from .commands import ComputeLayoutCommand
from .dtos import CanonicalInput, LayoutInput, LayoutInputError, LayoutOutput

__all__ = [
    "CanonicalInput",
    "ComputeLayoutCommand",
    "LayoutInput",
    "LayoutInputError",
    "LayoutOutput",
]
