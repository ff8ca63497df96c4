"""
Unit tests for board configuration and the Minefield value.

Tests configuration validation, the protected region formula,
cell access and consistency checks.
"""
import pytest
import numpy as np
from mines.game import (
    CellType,
    ConfigurationError,
    Difficulty,
    GameConfig,
    Minefield,
    calc_protected_range,
)


# ============================================================================
# Game Configuration Tests
# ============================================================================

class TestGameConfig:
    """Test board configuration validation."""

    def test_easy_mine_count_is_derived(self, easy_config: GameConfig) -> None:
        """8x8 easy board should get 10% of 64 cells as mines."""
        assert easy_config.mine_count == 6

    def test_medium_mine_count_is_derived(
        self, medium_config: GameConfig
    ) -> None:
        """10x10 medium board should get 15 mines."""
        assert medium_config.mine_count == 15

    def test_hard_mine_count_is_derived(self, hard_config: GameConfig) -> None:
        """10x10 hard board should get 20 mines."""
        assert hard_config.mine_count == 20

    def test_explicit_mine_count_wins(self) -> None:
        """An explicit mine count overrides the difficulty."""
        config = GameConfig(6, 6, Difficulty.MEDIUM, mine_count=2)
        assert config.mine_count == 2

    def test_zero_width_raises_error(self) -> None:
        """Width of 0 should raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="dimensions must be positive"):
            GameConfig(0, 9)

    def test_zero_height_raises_error(self) -> None:
        """Height of 0 should raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="dimensions must be positive"):
            GameConfig(9, 0)

    def test_negative_mines_raises_error(self) -> None:
        """Negative mine count should raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="cannot be negative"):
            GameConfig(9, 9, mine_count=-1)

    def test_mines_in_protected_area_raise_error(self) -> None:
        """Mines that only fit inside the protected area are rejected."""
        # 36 cells minus the 2x2 protected center leaves 32
        with pytest.raises(ConfigurationError, match="Too many mines"):
            GameConfig(6, 6, mine_count=33)

    def test_max_mines_is_valid(self) -> None:
        """Filling every unprotected cell is allowed."""
        config = GameConfig(6, 6, mine_count=32)
        assert config.max_mines == 32

    def test_configuration_error_is_value_error(self) -> None:
        """ConfigurationError should be catchable as ValueError."""
        with pytest.raises(ValueError):
            GameConfig(3, 3, mine_count=1)

    def test_config_is_immutable(self, easy_config: GameConfig) -> None:
        """GameConfig should be frozen."""
        with pytest.raises(AttributeError):
            easy_config.width = 20


class TestDifficulty:
    """Test difficulty lookup and densities."""

    @pytest.mark.parametrize("name", ["easy", "EASY", " Easy "])
    def test_parse_ignores_case(self, name: str) -> None:
        """Difficulty names are case-insensitive."""
        assert Difficulty.parse(name) is Difficulty.EASY

    def test_parse_unknown_raises_error(self) -> None:
        """Unknown difficulty names raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Unknown difficulty"):
            Difficulty.parse("impossible")

    def test_densities_increase(self) -> None:
        """Harder levels place more mines."""
        assert Difficulty.EASY.density < Difficulty.MEDIUM.density
        assert Difficulty.MEDIUM.density < Difficulty.HARD.density


# ============================================================================
# Protected Region Tests
# ============================================================================

class TestProtectedRange:
    """Test the centered protected range formula."""

    def test_length_ten(self) -> None:
        """Length 10 gives a size-4 range starting at 3."""
        assert calc_protected_range(10) == range(3, 7)

    def test_length_six(self) -> None:
        """Length 6 gives the minimum size 2, centered."""
        assert calc_protected_range(6) == range(2, 4)

    def test_length_eight(self) -> None:
        """Length 8 gives a size-2 range in the middle."""
        assert calc_protected_range(8) == range(3, 5)

    def test_odd_length_gets_odd_size(self) -> None:
        """Odd lengths get an odd range size so it stays centered."""
        assert calc_protected_range(5) == range(1, 4)
        assert calc_protected_range(15) == range(5, 10)

    @pytest.mark.parametrize("length", range(4, 40))
    def test_size_matches_parity_and_is_centered(self, length: int) -> None:
        """Range size shares the length's parity and is centered."""
        protected = calc_protected_range(length)
        assert len(protected) >= 2
        assert len(protected) % 2 == length % 2
        assert protected.start == length - protected.stop

    @pytest.mark.parametrize("length", [1, 2, 3])
    def test_tiny_lengths_are_fully_protected(self, length: int) -> None:
        """Very short dimensions are clipped to the whole board."""
        assert calc_protected_range(length) == range(0, length)


# ============================================================================
# Minefield Tests
# ============================================================================

class TestMinefield:
    """Test Minefield access and invariants."""

    def test_dimensions(self, corner_minefield: Minefield) -> None:
        """Width and height come from the config."""
        assert corner_minefield.width == 6
        assert corner_minefield.height == 6

    def test_get_cell_type(self, corner_minefield: Minefield) -> None:
        """Cells are addressed as (x, y)."""
        assert corner_minefield.get_cell_type(0, 0) is CellType.MINE
        assert corner_minefield.get_cell_type(1, 0) is CellType.ONE
        assert corner_minefield.get_cell_type(5, 5) is CellType.EMPTY

    def test_is_mine(self, corner_minefield: Minefield) -> None:
        """is_mine is only true for the mine cell."""
        assert corner_minefield.is_mine(0, 0) is True
        assert corner_minefield.is_mine(1, 1) is False

    def test_out_of_bounds_raises_index_error(
        self, corner_minefield: Minefield
    ) -> None:
        """Positions outside the board raise IndexError."""
        with pytest.raises(IndexError):
            corner_minefield.get_cell_type(6, 0)
        with pytest.raises(IndexError):
            corner_minefield.is_mine(0, -1)

    def test_matrix_is_read_only(self, corner_minefield: Minefield) -> None:
        """The matrix cannot be modified in place."""
        with pytest.raises(ValueError):
            corner_minefield.matrix[0, 0] = CellType.EMPTY

    def test_wrong_matrix_shape_raises_error(self) -> None:
        """Matrix shape must match the configuration."""
        matrix = np.full((2, 3), CellType.EMPTY, dtype=object)
        with pytest.raises(ValueError, match="does not match"):
            Minefield(GameConfig(3, 3, mine_count=0), 0, matrix)

    def test_neighbors_of_corner(self, corner_minefield: Minefield) -> None:
        """Corner cells have three neighbors."""
        assert sorted(corner_minefield.neighbors(0, 0)) == [(0, 1), (1, 0), (1, 1)]

    def test_neighbors_of_inner_cell(self, corner_minefield: Minefield) -> None:
        """Inner cells have eight neighbors."""
        assert len(corner_minefield.neighbors(2, 2)) == 8

    def test_protected_cells(self, corner_minefield: Minefield) -> None:
        """Protected cells are the product of both ranges."""
        assert sorted(corner_minefield.protected_cells()) == [
            (2, 2), (2, 3), (3, 2), (3, 3),
        ]

    def test_mine_count(self, ringed_minefield: Minefield) -> None:
        """mine_count counts the mines in the matrix."""
        assert ringed_minefield.mine_count() == 12

    def test_built_board_is_consistent(self, ringed_minefield: Minefield) -> None:
        """Boards with correct counts pass the consistency check."""
        assert ringed_minefield.is_consistent() is True

    def test_wrong_count_is_inconsistent(self, make_minefield) -> None:
        """A stored count that disagrees with the mines is detected."""
        board = make_minefield(4, 4, [(0, 0)])
        matrix = np.array(board.matrix)
        matrix[3, 3] = CellType.TWO
        broken = Minefield(board.config, board.seed, matrix)
        assert broken.is_consistent_at(3, 3) is False
        assert broken.is_consistent() is False

    def test_equality(self, make_minefield) -> None:
        """Boards with the same config, seed and cells are equal."""
        first = make_minefield(5, 5, [(0, 0), (4, 4)], seed=3)
        second = make_minefield(5, 5, [(0, 0), (4, 4)], seed=3)
        other_seed = make_minefield(5, 5, [(0, 0), (4, 4)], seed=4)
        assert first == second
        assert first != other_seed
