"""Tests for configuration schema, loading, merging and validation."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError as PydanticValidationError

from gridcut.application.config import (
    ConfigError,
    LayoutConfiguration,
    PieceSizeConfig,
    SheetSizeConfig,
    ValidationResult,
    config_to_input,
    load_config,
    load_config_from_dict,
    merge_config_with_cli,
    resolve_preset_size,
    validate_config,
)
from gridcut.application.config.loader import _format_json_path
from gridcut.application.units import Unit

# --- Fixtures ---


@pytest.fixture
def panel_config_data() -> dict[str, Any]:
    return {
        "schema_version": "1.0",
        "unit": "mm",
        "sheet": {"width": 1200, "height": 800},
        "piece": {"width": 200, "height": 150},
        "margin": 10,
        "spacing": 2,
        "backfill": False,
    }


@pytest.fixture
def config_file(tmp_path: Path, panel_config_data: dict[str, Any]) -> Path:
    path = tmp_path / "layout.json"
    path.write_text(json.dumps(panel_config_data))
    return path


# =============================================================================
# Schema
# =============================================================================


class TestLayoutConfigurationSchema:
    """Tests for the Pydantic configuration models."""

    def test_defaults(self) -> None:
        config = LayoutConfiguration()

        assert config.schema_version == "1.0"
        assert config.unit is Unit.INCH
        assert (config.sheet.width, config.sheet.height) == (25.0, 35.5)
        assert (config.piece.width, config.piece.height) == (5.0, 7.0)
        assert config.backfill is True
        assert config.output.format == "summary"
        assert config.output.formats == []
        assert config.output.render_limit == 3000

    def test_explicit_config(self, panel_config_data: dict[str, Any]) -> None:
        config = load_config_from_dict(panel_config_data)

        assert config.unit is Unit.MM
        assert config.sheet.width == 1200
        assert config.piece.height == 150
        assert config.margin == 10

    def test_sheet_preset(self) -> None:
        sheet = SheetSizeConfig(preset="28 x 22")
        assert sheet.preset == "28 x 22"
        assert sheet.width is None

    def test_sheet_preset_and_dimensions_rejected(self) -> None:
        with pytest.raises(PydanticValidationError, match="not both"):
            SheetSizeConfig(preset="28 x 22", width=10)

    def test_sheet_missing_dimension_rejected(self) -> None:
        with pytest.raises(PydanticValidationError, match="required"):
            SheetSizeConfig(width=10)

    def test_unknown_preset_rejected(self) -> None:
        with pytest.raises(PydanticValidationError, match="Unknown sheet preset"):
            SheetSizeConfig(preset="12 x 12")

    def test_zero_piece_allowed(self) -> None:
        assert PieceSizeConfig(width=0, height=0).width == 0

    def test_negative_piece_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            PieceSizeConfig(width=-1)

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            LayoutConfiguration.model_validate({"colour": "red"})

    @pytest.mark.parametrize("version", ["1.0", "1.5"])
    def test_supported_versions(self, version: str) -> None:
        assert LayoutConfiguration(schema_version=version).schema_version == version

    @pytest.mark.parametrize("version", ["2.0", "abc", "1"])
    def test_unsupported_versions(self, version: str) -> None:
        with pytest.raises(PydanticValidationError):
            LayoutConfiguration(schema_version=version)

    def test_unknown_output_format(self) -> None:
        with pytest.raises(PydanticValidationError):
            LayoutConfiguration.model_validate({"output": {"format": "pdf"}})


# =============================================================================
# Loader
# =============================================================================


class TestLoadConfig:
    """Tests for loading configuration files."""

    def test_load_valid_file(self, config_file: Path) -> None:
        config = load_config(config_file)
        assert config.sheet.width == 1200

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == tmp_path / "missing.json"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"unit": "mm",,}')

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] == 1
        assert "Invalid JSON" in str(exc_info.value)

    def test_validation_error_details(self, tmp_path: Path) -> None:
        path = tmp_path / "invalid.json"
        path.write_text(json.dumps({"piece": {"width": -2}}))

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "piece.width"
        assert error.details[0]["value"] == -2
        assert "piece.width" in error.message

    def test_load_from_dict_error(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"unit": "furlong"})
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.path is None

    def test_format_json_path(self) -> None:
        assert _format_json_path(("sheet", "width")) == "sheet.width"
        assert _format_json_path(("output", "formats", 0)) == "output.formats[0]"
        assert _format_json_path((2,)) == "[2]"


# =============================================================================
# Merger
# =============================================================================


class TestMergeConfigWithCli:
    """Tests for CLI override precedence."""

    def test_no_overrides(self, panel_config_data: dict[str, Any]) -> None:
        config = load_config_from_dict(panel_config_data)
        assert merge_config_with_cli(config).model_dump() == config.model_dump()

    def test_value_overrides(self, panel_config_data: dict[str, Any]) -> None:
        config = load_config_from_dict(panel_config_data)
        merged = merge_config_with_cli(
            config,
            piece_width=180,
            margin=0,
            spacing=3,
            backfill=True,
            output_format="ascii",
            render_limit=50,
        )

        assert merged.piece.width == 180
        assert merged.piece.height == 150
        assert merged.margin == 0
        assert merged.spacing == 3
        assert merged.backfill is True
        assert merged.output.format == "ascii"
        assert merged.output.render_limit == 50
        # original untouched
        assert config.piece.width == 200

    def test_unit_override_reinterprets_lengths(
        self, panel_config_data: dict[str, Any]
    ) -> None:
        config = load_config_from_dict(panel_config_data)
        merged = merge_config_with_cli(config, unit="cm")

        assert merged.unit is Unit.CM
        assert merged.sheet.width == 1200

    def test_unknown_unit(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            merge_config_with_cli(LayoutConfiguration(), unit="furlong")
        assert exc_info.value.details[0]["path"] == "unit"

    def test_cli_preset_replaces_dimensions(
        self, panel_config_data: dict[str, Any]
    ) -> None:
        config = load_config_from_dict(panel_config_data)
        merged = merge_config_with_cli(config, preset="44 x 28")

        assert merged.sheet.preset == "44 x 28"
        assert merged.sheet.width is None

    def test_cli_dimensions_replace_preset(self) -> None:
        config = load_config_from_dict({"sheet": {"preset": "28 x 22"}})
        merged = merge_config_with_cli(config, sheet_width=30, sheet_height=20)

        assert merged.sheet.preset is None
        assert (merged.sheet.width, merged.sheet.height) == (30, 20)

    def test_partial_override_keeps_preset_side(self) -> None:
        config = load_config_from_dict({"sheet": {"preset": "28 x 22"}})
        merged = merge_config_with_cli(config, sheet_width=30)

        assert merged.sheet.width == 30
        assert merged.sheet.height == pytest.approx(22)

    def test_invalid_override(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            merge_config_with_cli(LayoutConfiguration(), piece_height=-1)
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "piece.height"

    def test_unknown_cli_preset(self) -> None:
        with pytest.raises(ConfigError):
            merge_config_with_cli(LayoutConfiguration(), preset="nope")


# =============================================================================
# Adapter
# =============================================================================


class TestConfigAdapter:
    """Tests for converting configurations into LayoutInput."""

    def test_explicit_sheet(self, panel_config_data: dict[str, Any]) -> None:
        layout_input = config_to_input(load_config_from_dict(panel_config_data))

        assert layout_input.sheet_width == 1200
        assert layout_input.piece_height == 150
        assert layout_input.spacing == 2
        assert layout_input.backfill is False
        assert layout_input.unit is Unit.MM

    def test_preset_in_config_unit(self) -> None:
        config = load_config_from_dict({"unit": "mm", "sheet": {"preset": "0"}})
        layout_input = config_to_input(config)

        assert layout_input.sheet_width == pytest.approx(711.2)
        assert layout_input.sheet_height == pytest.approx(558.8)

    def test_resolve_preset_size(self) -> None:
        width, height = resolve_preset_size("35.5 x 25", Unit.INCH)
        assert width == pytest.approx(35.5)
        assert height == pytest.approx(25)


# =============================================================================
# Validator
# =============================================================================


class TestValidationResult:
    """Tests for the ValidationResult container."""

    def test_exit_codes(self) -> None:
        assert ValidationResult().exit_code == 0
        assert ValidationResult().add_warning("a", "b").exit_code == 2
        assert ValidationResult().add_error("a", "b").add_warning("c", "d").exit_code == 1

    def test_merge(self) -> None:
        merged = ValidationResult().add_error("a", "b").merge(
            ValidationResult().add_warning("c", "d")
        )
        assert not merged.is_valid
        assert merged.has_warnings


class TestValidateConfig:
    """Tests for semantic configuration checks."""

    def test_clean_config(self, panel_config_data: dict[str, Any]) -> None:
        result = validate_config(load_config_from_dict(panel_config_data))
        assert result.exit_code == 0

    def test_defaults_are_clean(self) -> None:
        assert validate_config(LayoutConfiguration()).exit_code == 0

    def test_non_finite_value_is_error(self) -> None:
        config = LayoutConfiguration(margin=math.inf)
        result = validate_config(config)

        assert result.exit_code == 1
        assert result.errors[0].message == "Margin must be a finite number"

    def test_margin_swallows_sheet(self) -> None:
        config = LayoutConfiguration(margin=20)
        result = validate_config(config)

        assert result.exit_code == 2
        assert [w.path for w in result.warnings] == ["margin"]
        assert "Margin 20 inch" in result.warnings[0].message

    def test_zero_piece(self) -> None:
        config = LayoutConfiguration(piece=PieceSizeConfig(width=0, height=3))
        result = validate_config(config)

        assert [w.path for w in result.warnings] == ["piece"]
        assert "zero dimension" in result.warnings[0].message

    def test_piece_too_large(self) -> None:
        config = LayoutConfiguration(piece=PieceSizeConfig(width=40, height=40))
        result = validate_config(config)

        assert result.exit_code == 2
        assert "either orientation" in result.warnings[0].message

    def test_piece_fits_only_rotated(self) -> None:
        # 30 x 20 piece on a 25 x 35.5 sheet fits only when turned
        config = LayoutConfiguration(piece=PieceSizeConfig(width=30, height=20))
        assert validate_config(config).exit_code == 0

    def test_spacing_too_large(self) -> None:
        config = LayoutConfiguration(spacing=5)
        result = validate_config(config)

        assert [w.path for w in result.warnings] == ["spacing"]
