"""Tests for layout DTOs and ComputeLayoutCommand."""

from __future__ import annotations

import math

import pytest

from gridcut.application import (
    ComputeLayoutCommand,
    LayoutInput,
    LayoutInputError,
    LayoutOutput,
)
from gridcut.application.dtos import DEFAULT_RENDER_LIMIT
from gridcut.application.units import Unit
from gridcut.domain.value_objects import Orientation, Piece, Sheet


class TestLayoutInputValidation:
    """Tests for LayoutInput.validate."""

    def test_defaults_are_valid(self) -> None:
        layout_input = LayoutInput()
        assert layout_input.validate() == []
        assert layout_input.unit is Unit.INCH
        assert layout_input.backfill is True

    def test_zero_piece_is_valid(self) -> None:
        assert LayoutInput(piece_width=0, piece_height=0).validate() == []

    def test_non_positive_sheet(self) -> None:
        errors = LayoutInput(sheet_width=0, sheet_height=-1).validate()
        assert errors == [
            "Sheet width must be positive",
            "Sheet height must be positive",
        ]

    def test_negative_values(self) -> None:
        errors = LayoutInput(
            piece_width=-1, piece_height=-1, margin=-1, spacing=-1
        ).validate()
        assert errors == [
            "Piece width cannot be negative",
            "Piece height cannot be negative",
            "Margin cannot be negative",
            "Spacing cannot be negative",
        ]

    def test_non_finite_values(self) -> None:
        errors = LayoutInput(sheet_width=math.nan, spacing=math.inf).validate()
        assert errors == [
            "Sheet width must be a finite number",
            "Spacing must be a finite number",
        ]

    def test_unknown_unit(self) -> None:
        errors = LayoutInput(unit="furlong").validate()  # type: ignore[arg-type]
        assert len(errors) == 1
        assert errors[0].startswith("Unit must be one of: mm, cm, inch")


class TestLayoutInputConversion:
    """Tests for LayoutInput.to_canonical."""

    def test_inches_to_mm(self) -> None:
        canonical = LayoutInput(
            sheet_width=10,
            sheet_height=20,
            piece_width=1,
            piece_height=2,
            margin=0.5,
            spacing=0.25,
            backfill=False,
            unit=Unit.INCH,
        ).to_canonical()

        assert canonical.sheet.width == pytest.approx(254)
        assert canonical.sheet.height == pytest.approx(508)
        assert canonical.piece.width == pytest.approx(25.4)
        assert canonical.piece.height == pytest.approx(50.8)
        assert canonical.margin == pytest.approx(12.7)
        assert canonical.spacing == pytest.approx(6.35)
        assert canonical.backfill is False

    def test_millimetres_unchanged(self, panel_input: LayoutInput) -> None:
        canonical = panel_input.to_canonical()
        assert canonical.sheet == Sheet(1200, 800)
        assert canonical.piece == Piece(200, 150)


class TestLayoutOutput:
    """Tests for LayoutOutput accessors."""

    def test_failed_output(self) -> None:
        output = LayoutOutput(selection=None, errors=["Sheet width must be positive"])

        assert not output.is_valid
        with pytest.raises(ValueError, match="no result"):
            _ = output.chosen
        with pytest.raises(ValueError):
            _ = output.alternate

    def test_raise_for_errors(self) -> None:
        output = LayoutOutput(selection=None, errors=["a", "b"])

        with pytest.raises(LayoutInputError) as exc_info:
            output.raise_for_errors()
        assert exc_info.value.errors == ["a", "b"]
        assert str(exc_info.value) == "a; b"

    def test_raise_for_errors_noop_when_valid(
        self, compute_command: ComputeLayoutCommand, panel_input: LayoutInput
    ) -> None:
        compute_command.execute(panel_input).raise_for_errors()


class TestComputeLayoutCommand:
    """Tests for ComputeLayoutCommand.execute."""

    def test_valid_input(
        self, compute_command: ComputeLayoutCommand, panel_input: LayoutInput
    ) -> None:
        output = compute_command.execute(panel_input)

        assert output.is_valid
        assert output.errors == []
        assert output.unit is Unit.MM
        assert output.render_limit == DEFAULT_RENDER_LIMIT
        assert output.chosen.total_count == 25
        assert output.chosen.chosen_orientation is Orientation.NORMAL
        assert output.alternate.total_count == 21

    def test_invalid_input_skips_engine(
        self, compute_command: ComputeLayoutCommand
    ) -> None:
        output = compute_command.execute(LayoutInput(sheet_width=-5), render_limit=7)

        assert not output.is_valid
        assert output.selection is None
        assert output.errors == ["Sheet width must be positive"]
        assert output.render_limit == 7

    def test_defaults_in_inches(self, compute_command: ComputeLayoutCommand) -> None:
        # 25 x 35.5 in sheet with 5 x 7 in pieces
        output = compute_command.execute(LayoutInput())

        assert output.chosen.primary_count == 25
        assert output.chosen.chosen_orientation is Orientation.NORMAL

    def test_repeatable(
        self, compute_command: ComputeLayoutCommand, panel_input: LayoutInput
    ) -> None:
        first = compute_command.execute(panel_input)
        second = compute_command.execute(panel_input)
        assert first.selection == second.selection
