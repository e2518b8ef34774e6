"""Tests for the gridcut command line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from gridcut.cli.commands import parse_formats
from gridcut.cli.main import app

runner = CliRunner()

PANEL_ARGS = [
    "layout",
    "--sheet-width", "1200",
    "--sheet-height", "800",
    "--piece-width", "200",
    "--piece-height", "150",
    "--margin", "10",
    "--spacing", "2",
    "--unit", "mm",
    "--no-backfill",
]

# --- Fixtures ---


@pytest.fixture
def panel_config(tmp_path: Path) -> Path:
    path = tmp_path / "panels.json"
    path.write_text(
        json.dumps(
            {
                "unit": "mm",
                "sheet": {"width": 1200, "height": 800},
                "piece": {"width": 200, "height": 150},
                "margin": 10,
                "spacing": 2,
                "backfill": False,
            }
        )
    )
    return path


# =============================================================================
# layout command
# =============================================================================


class TestLayoutCommand:
    """Tests for `gridcut layout`."""

    def test_summary(self) -> None:
        result = runner.invoke(app, PANEL_ARGS)

        assert result.exit_code == 0, result.output
        assert "SHEET LAYOUT" in result.output
        assert "Total:       25 pieces" in result.output
        assert "Alternative (rotated): 21 pieces" in result.output

    def test_defaults_in_inches(self) -> None:
        result = runner.invoke(app, ["layout"])

        assert result.exit_code == 0, result.output
        assert "Sheet:       25 x 35.5 inch" in result.output
        assert "Backfill:    on" in result.output

    def test_json_format(self) -> None:
        result = runner.invoke(app, [*PANEL_ARGS, "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["chosen"]["total_count"] == 25
        assert data["display_unit"] == "mm"

    def test_ascii_format(self) -> None:
        result = runner.invoke(app, [*PANEL_ARGS, "-f", "ascii"])

        assert result.exit_code == 0, result.output
        assert "+" + "-" * 78 + "+" in result.output
        assert "# piece" in result.output

    def test_backfill_flag(self) -> None:
        args = [a for a in PANEL_ARGS if a != "--no-backfill"]
        result = runner.invoke(app, [*args, "--backfill"])

        assert result.exit_code == 0, result.output
        assert "Rotated:     3 right, 0 bottom" in result.output
        assert "Total:       28 pieces" in result.output

    def test_preset(self) -> None:
        result = runner.invoke(
            app, ["layout", "--preset", "28 x 22", "--piece-width", "4", "--piece-height", "6"]
        )

        assert result.exit_code == 0, result.output
        assert "Sheet:       28 x 22 inch" in result.output

    def test_preset_conflicts_with_dimensions(self) -> None:
        result = runner.invoke(app, ["layout", "--preset", "0", "--sheet-width", "10"])

        assert result.exit_code == 1
        assert "use either --preset or --sheet-width/--sheet-height" in result.output

    def test_unknown_preset(self) -> None:
        result = runner.invoke(app, ["layout", "--preset", "12 x 12"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_negative_dimension(self) -> None:
        result = runner.invoke(app, ["layout", "--sheet-width=-5"])

        assert result.exit_code == 1
        assert "sheet.width" in result.output

    def test_non_finite_value(self) -> None:
        result = runner.invoke(app, ["layout", "--margin", "inf"])

        assert result.exit_code == 1
        assert "Margin must be a finite number" in result.output

    def test_unknown_unit(self) -> None:
        result = runner.invoke(app, ["layout", "--unit", "furlong"])

        assert result.exit_code == 1
        assert "Unsupported unit 'furlong'" in result.output

    def test_unknown_format(self) -> None:
        result = runner.invoke(app, ["layout", "--format", "pdf"])

        assert result.exit_code == 1
        assert "output.format" in result.output

    def test_output_file(self, tmp_path: Path) -> None:
        target = tmp_path / "layout.svg"
        result = runner.invoke(app, [*PANEL_ARGS, "-f", "svg", "-o", str(target)])

        assert result.exit_code == 0, result.output
        assert f"Wrote svg output to {target}" in result.output
        assert target.read_text().startswith("<svg")

    def test_render_limit(self) -> None:
        result = runner.invoke(app, [*PANEL_ARGS, "-f", "svg", "--render-limit", "4"])

        assert result.exit_code == 0, result.output
        assert result.stdout.count('class="piece"') == 4

    def test_verbose_flag(self) -> None:
        result = runner.invoke(app, ["--verbose", *PANEL_ARGS])
        assert result.exit_code == 0, result.output


class TestLayoutWithConfig:
    """Tests for `gridcut layout --config`."""

    def test_config_file(self, panel_config: Path) -> None:
        result = runner.invoke(app, ["layout", "--config", str(panel_config)])

        assert result.exit_code == 0, result.output
        assert "Total:       25 pieces" in result.output

    def test_cli_overrides_config(self, panel_config: Path) -> None:
        result = runner.invoke(
            app, ["layout", "-c", str(panel_config), "--piece-width", "100"]
        )

        assert result.exit_code == 0, result.output
        assert "Grid:        11 x 5 = 55" in result.output

    def test_missing_config(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["layout", "-c", str(tmp_path / "nope.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_config_output_formats(self, tmp_path: Path) -> None:
        path = tmp_path / "export.json"
        path.write_text(
            json.dumps(
                {
                    "unit": "mm",
                    "sheet": {"width": 500, "height": 500},
                    "piece": {"width": 100, "height": 100},
                    "output": {
                        "formats": ["json"],
                        "output_dir": str(tmp_path / "out"),
                        "project_name": "squares",
                    },
                }
            )
        )
        result = runner.invoke(app, ["layout", "-c", str(path)])

        assert result.exit_code == 0, result.output
        exported = tmp_path / "out" / "squares_json.json"
        assert json.loads(exported.read_text())["chosen"]["total_count"] == 25


class TestMultiFormatExport:
    """Tests for --output-formats."""

    def test_export_formats(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                *PANEL_ARGS,
                "--output-formats", "json,svg",
                "--output-dir", str(tmp_path),
                "--project-name", "panels",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Exported files:" in result.output
        assert (tmp_path / "panels_json.json").exists()
        assert (tmp_path / "panels_svg.svg").exists()
        assert not (tmp_path / "panels_dxf.dxf").exists()

    def test_export_all(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, [*PANEL_ARGS, "--output-formats", "all", "--output-dir", str(tmp_path)]
        )

        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "layout_dxf.dxf",
            "layout_json.json",
            "layout_svg.svg",
        ]

    def test_unknown_export_format(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, [*PANEL_ARGS, "--output-formats", "pdf", "--output-dir", str(tmp_path)]
        )

        assert result.exit_code == 1
        assert "Unknown formats: pdf" in result.output
        assert list(tmp_path.iterdir()) == []

    def test_parse_formats(self) -> None:
        assert parse_formats(" SVG, json ,") == ["svg", "json"]
        assert parse_formats("all") == ["dxf", "json", "svg"]


# =============================================================================
# presets and validate commands
# =============================================================================


class TestPresetsCommand:
    """Tests for `gridcut presets`."""

    def test_lists_presets(self) -> None:
        result = runner.invoke(app, ["presets"])

        assert result.exit_code == 0, result.output
        assert "Preset" in result.output
        assert "28 × 22" in result.output
        assert "37 × 25" in result.output

    def test_display_unit(self) -> None:
        result = runner.invoke(app, ["presets", "--unit", "mm"])

        assert result.exit_code == 0, result.output
        assert "711.2" in result.output

    def test_unknown_unit(self) -> None:
        result = runner.invoke(app, ["presets", "--unit", "furlong"])
        assert result.exit_code == 1


class TestValidateCommand:
    """Tests for `gridcut validate`."""

    def test_valid_config(self, panel_config: Path) -> None:
        result = runner.invoke(app, ["validate", str(panel_config)])

        assert result.exit_code == 0, result.output
        assert "Validation passed. Configuration is valid." in result.output
        assert "sheet 1200 x 800 mm, piece 200 x 150 mm" in result.output

    def test_warnings(self, tmp_path: Path) -> None:
        path = tmp_path / "wide_margin.json"
        path.write_text(json.dumps({"margin": 20}))
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 2
        assert "Validation passed with 1 warning(s)" in result.output
        assert "Suggestion:" in result.output

    def test_schema_error(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"piece": {"width": -1}}))
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "piece.width" in result.output

    def test_json_error(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{")
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
