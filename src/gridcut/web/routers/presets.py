"""Sheet preset endpoints."""

from fastapi import APIRouter

from gridcut.application.presets import SHEET_PRESETS, SheetPreset, get_preset
from gridcut.web.schemas.responses import PresetListSchema, PresetSchema

router = APIRouter(prefix="/presets", tags=["presets"])


def _to_schema(index: int, preset: SheetPreset) -> PresetSchema:
    return PresetSchema(
        index=index,
        label=preset.label,
        width=preset.width,
        height=preset.height,
        unit=preset.unit.value,
        width_mm=preset.width_mm,
        height_mm=preset.height_mm,
    )


@router.get("", response_model=PresetListSchema)
async def list_presets() -> PresetListSchema:
    """List the stock sheet presets."""
    return PresetListSchema(
        presets=[_to_schema(i, p) for i, p in enumerate(SHEET_PRESETS)]
    )


@router.get("/{name}", response_model=PresetSchema)
async def get_sheet_preset(name: str) -> PresetSchema:
    """Get one preset by label or index.

    Raises:
        PresetNotFoundError: If no preset matches.
    """
    preset = get_preset(name)
    return _to_schema(SHEET_PRESETS.index(preset), preset)
