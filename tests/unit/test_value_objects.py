"""Tests for layout value objects."""

from __future__ import annotations

import dataclasses

import pytest

from gridcut.domain.value_objects import (
    Orientation,
    Piece,
    Placement,
    Sheet,
    Strip,
)


class TestOrientation:
    """Tests for the Orientation enum."""

    def test_values(self) -> None:
        assert Orientation.NORMAL.value == "normal"
        assert Orientation.ROTATED.value == "rotated"


class TestSheetAndPiece:
    """Tests for Sheet and Piece."""

    def test_sheet_area(self) -> None:
        assert Sheet(1200, 800).area == 960000

    def test_piece_swapped(self) -> None:
        piece = Piece(200, 150)
        assert piece.swapped() == Piece(150, 200)
        assert piece.swapped().swapped() == piece

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Sheet(1, 2).width = 5  # type: ignore[misc]


class TestStrip:
    """Tests for Strip regions."""

    def test_edges_and_area(self) -> None:
        strip = Strip(x=10, y=20, width=30, height=40)
        assert strip.right == 40
        assert strip.bottom == 60
        assert strip.area == 1200
        assert not strip.is_empty

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 5)])
    def test_empty_strip(self, width: float, height: float) -> None:
        strip = Strip(x=0, y=0, width=width, height=height)
        assert strip.is_empty
        assert strip.area == 0.0


class TestPlacement:
    """Tests for Placement geometry."""

    def test_defaults_to_primary(self) -> None:
        assert Placement(0, 0, 10, 10).rotated is False

    def test_touching_edges_do_not_overlap(self) -> None:
        a = Placement(0, 0, 10, 10)
        b = Placement(10, 0, 10, 10)
        c = Placement(0, 10, 10, 10)
        assert not a.overlaps(b)
        assert not a.overlaps(c)

    def test_overlap_detected(self) -> None:
        a = Placement(0, 0, 10, 10)
        b = Placement(5, 5, 10, 10)
        assert a.overlaps(b)
        assert b.overlaps(a)
