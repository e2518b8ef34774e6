"""FastAPI dependency injection for layout services."""

from typing import Annotated

from fastapi import Depends

from gridcut.application.commands import ComputeLayoutCommand


def get_compute_command() -> ComputeLayoutCommand:
    """Dependency for ComputeLayoutCommand."""
    return ComputeLayoutCommand()


# Type aliases for cleaner endpoint signatures
ComputeCommandDep = Annotated[ComputeLayoutCommand, Depends(get_compute_command)]
