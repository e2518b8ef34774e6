"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from gridcut.infrastructure.exporters import ExporterRegistry
from gridcut.web.dependencies import ComputeCommandDep
from gridcut.web.exceptions import ExportError, UnsupportedFormatError
from gridcut.web.routers.layout import compute_layout
from gridcut.web.schemas.requests import LayoutRequest
from gridcut.web.schemas.responses import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}")
async def export_layout(
    format_name: str,
    request: LayoutRequest,
    command: ComputeCommandDep,
) -> Response:
    """Export the chosen layout to any registered format.

    Args:
        format_name: Export format name.
        request: Layout request.
        command: Injected ComputeLayoutCommand.

    Returns:
        Exported document with the exporter's media type.

    Raises:
        UnsupportedFormatError: If format is not registered.
    """
    available = ExporterRegistry.available_formats()
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, available)

    output = compute_layout(command, request.to_layout_input(), request.render_limit)

    exporter = ExporterRegistry.get(format_name)()
    try:
        content = exporter.export_string(output)
    except ValueError as e:
        raise ExportError(str(e), format_name) from e

    filename = f"layout.{exporter.file_extension}"
    return Response(
        content=content,
        media_type=exporter.media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
