"""
Unit tests for mine placement.
"""
import random

import pytest

from minefield import Grid, InvalidConfiguration
from minefield.placement import place_mines, place_mines_at


class TestPlaceMines:
    """Test random placement."""

    @pytest.mark.parametrize(
        "size, count", [(2, 3), (3, 1), (4, 15), (8, 4), (16, 40)]
    )
    def test_exact_mine_count(self, size: int, count: int) -> None:
        """Exactly mine_count cells hold mines."""
        grid = Grid(size)
        place_mines(grid, count, random.Random(size))
        assert sum(cell.has_mine for cell in grid) == count

    def test_seeded_placement_is_reproducible(self) -> None:
        """Same seed gives same layout."""
        first, second = Grid(8), Grid(8)
        place_mines(first, 10, random.Random(7))
        place_mines(second, 10, random.Random(7))
        assert first.mine_positions() == second.mine_positions()

    def test_full_board_rejected(self) -> None:
        """Placement would never terminate on a full board."""
        with pytest.raises(InvalidConfiguration):
            place_mines(Grid(3), 9)

    def test_zero_mines_rejected(self) -> None:
        """At least one mine is required."""
        with pytest.raises(InvalidConfiguration):
            place_mines(Grid(3), 0)


class TestPlaceMinesAt:
    """Test explicit placement."""

    def test_places_at_given_positions(self) -> None:
        """Mines land exactly where requested."""
        grid = Grid(4)
        place_mines_at(grid, [0, 5, 15])
        assert grid.mine_positions() == (0, 5, 15)

    def test_out_of_range_rejected(self) -> None:
        """Positions must be on the board."""
        with pytest.raises(InvalidConfiguration, match="out of range"):
            place_mines_at(Grid(4), [16])

    def test_duplicate_rejected(self) -> None:
        """Positions must be distinct."""
        with pytest.raises(InvalidConfiguration, match="Duplicate"):
            place_mines_at(Grid(4), [3, 3])

    @pytest.mark.parametrize("positions", [[3, 3], [1, 2, 99], [0, 5, -1]])
    def test_rejected_layout_leaves_grid_unchanged(self, positions) -> None:
        """A rejected layout places no mines at all."""
        grid = Grid(4)
        with pytest.raises(InvalidConfiguration):
            place_mines_at(grid, positions)
        assert grid.mine_positions() == ()

    def test_position_already_mined_rejected(self) -> None:
        """Positions already holding a mine count as duplicates."""
        grid = Grid(4)
        place_mines_at(grid, [2])
        with pytest.raises(InvalidConfiguration, match="Duplicate"):
            place_mines_at(grid, [7, 2])
        assert grid.mine_positions() == (2,)
