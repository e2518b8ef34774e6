"""Pydantic schemas for the REST API."""

from gridcut.web.schemas.requests import (
    ConfigValidateRequest,
    LayoutFromConfigRequest,
    LayoutRequest,
)
from gridcut.web.schemas.responses import (
    ErrorResponseSchema,
    ExportFormatsSchema,
    LayoutDetailSchema,
    LayoutResponseSchema,
    LayoutSummarySchema,
    PlacementSchema,
    PresetListSchema,
    PresetSchema,
    SizeSchema,
    StripSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "LayoutFromConfigRequest",
    "LayoutRequest",
    # Responses
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "LayoutDetailSchema",
    "LayoutResponseSchema",
    "LayoutSummarySchema",
    "PlacementSchema",
    "PresetListSchema",
    "PresetSchema",
    "SizeSchema",
    "StripSchema",
    "ValidationResultSchema",
]
