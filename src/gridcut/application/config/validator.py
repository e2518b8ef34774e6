"""Validation structures and layout advisory checks.

Pydantic already rejects structurally invalid configurations. The checks
here flag configurations that are valid but will not produce a useful
layout, such as a margin that swallows the whole sheet.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from gridcut.application.config.adapter import config_to_input
from gridcut.application.config.schema import LayoutConfiguration


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "piece.width")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> ValidationResult:
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> ValidationResult:
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_input_errors(config: LayoutConfiguration) -> ValidationResult:
    """Report input errors the layout command would reject."""
    result = ValidationResult()
    for message in config_to_input(config).validate():
        result.add_error(path="(root)", message=message)
    return result


def check_layout_advisories(config: LayoutConfiguration) -> ValidationResult:
    """Check a configuration for layouts that cannot hold any piece.

    Args:
        config: A LayoutConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing warnings only
    """
    result = ValidationResult()
    layout_input = config_to_input(config)
    unit = config.unit

    usable_w = layout_input.sheet_width - 2 * layout_input.margin
    usable_h = layout_input.sheet_height - 2 * layout_input.margin
    if usable_w <= 0 or usable_h <= 0:
        result.add_warning(
            path="margin",
            message=(
                f"Margin {layout_input.margin:g} {unit.value} leaves no usable "
                "area on the sheet"
            ),
            suggestion="Reduce the margin to less than half the smaller sheet side",
        )
        return result

    pw, ph = layout_input.piece_width, layout_input.piece_height
    if pw <= 0 or ph <= 0:
        result.add_warning(
            path="piece",
            message="Piece has a zero dimension; no pieces will be placed",
            suggestion="Give the piece a positive width and height",
        )
        return result

    fits_normal = pw <= usable_w and ph <= usable_h
    fits_rotated = ph <= usable_w and pw <= usable_h
    if not fits_normal and not fits_rotated:
        result.add_warning(
            path="piece",
            message=(
                "Piece does not fit inside the usable sheet area in either "
                "orientation"
            ),
            suggestion="Use a larger sheet or a smaller piece",
        )

    if layout_input.spacing > 0 and layout_input.spacing >= min(pw, ph):
        result.add_warning(
            path="spacing",
            message="Spacing is at least as large as the smaller piece side",
            suggestion="Check that spacing is the saw kerf, not a piece size",
        )

    return result


def validate_config(config: LayoutConfiguration) -> ValidationResult:
    """Perform full validation of a layout configuration.

    Args:
        config: A LayoutConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = check_input_errors(config)
    if not result.is_valid:
        return result
    return result.merge(check_layout_advisories(config))
