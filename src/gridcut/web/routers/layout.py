"""Layout computation endpoints."""

from fastapi import APIRouter

from gridcut.application.commands import ComputeLayoutCommand
from gridcut.application.config import config_to_input, load_config_from_dict
from gridcut.application.dtos import LayoutInput, LayoutOutput
from gridcut.application.units import CANONICAL_UNIT, Unit
from gridcut.infrastructure.exporters import result_summary, result_to_dict
from gridcut.web.dependencies import ComputeCommandDep
from gridcut.web.schemas.requests import LayoutFromConfigRequest, LayoutRequest
from gridcut.web.schemas.responses import (
    LayoutDetailSchema,
    LayoutResponseSchema,
    LayoutSummarySchema,
    SizeSchema,
)

router = APIRouter(prefix="/layout", tags=["layout"])


def compute_layout(
    command: ComputeLayoutCommand,
    layout_input: LayoutInput,
    render_limit: int,
) -> LayoutOutput:
    """Run the command and raise LayoutInputError for invalid input."""
    output = command.execute(layout_input, render_limit=render_limit)
    output.raise_for_errors()
    return output


def to_response(output: LayoutOutput) -> LayoutResponseSchema:
    sheet = output.chosen.sheet
    return LayoutResponseSchema(
        unit=CANONICAL_UNIT,
        display_unit=Unit(output.unit).value,
        sheet=SizeSchema(width=sheet.width, height=sheet.height),
        chosen=LayoutDetailSchema.model_validate(result_to_dict(output.chosen)),
        alternate=LayoutSummarySchema.model_validate(result_summary(output.alternate)),
    )


@router.post("", response_model=LayoutResponseSchema)
async def compute(
    request: LayoutRequest,
    command: ComputeCommandDep,
) -> LayoutResponseSchema:
    """Compute the best layout for one piece size on one sheet.

    Args:
        request: Sheet, piece, margin, spacing and unit.
        command: Injected ComputeLayoutCommand.

    Returns:
        Chosen layout with placements and strips, plus the alternate's
        counts. All lengths are in millimetres.
    """
    output = compute_layout(command, request.to_layout_input(), request.render_limit)
    return to_response(output)


@router.post("/from-config", response_model=LayoutResponseSchema)
async def compute_from_config(
    request: LayoutFromConfigRequest,
    command: ComputeCommandDep,
) -> LayoutResponseSchema:
    """Compute a layout from a full configuration document.

    Raises:
        ConfigError: If the configuration does not validate.
    """
    config = load_config_from_dict(request.config)
    output = compute_layout(
        command, config_to_input(config), config.output.render_limit
    )
    return to_response(output)
