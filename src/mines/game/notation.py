"""
Text board format.

Boards are written as a header line ``difficulty|width|height|mineCount``,
a separator line of dashes and one line per row, using ``*`` for mines,
``O`` for empty cells and ``1``-``8`` for numbered cells::

    MEDIUM|6|6|2
    ------
    OO1*1O
    OO1111
    112*1O
    1**21O
    12211O
    OOOOOO

Used for test fixtures and debugging; parser and formatter agree exactly.
"""
from typing import List

import numpy as np

from .board import ConfigurationError, Difficulty, GameConfig, Minefield
from .cell import CellType


HEADER_SEPARATOR = "|"
ROW_SEPARATOR_CHAR = "-"


class BoardFormatError(ValueError):
    """Raised when a text board cannot be parsed."""


def parse_board(text: str, seed: int = 0) -> Minefield:
    """
    Parse a text board into a Minefield.

    The header mine count is kept as the config's mine count and is not
    checked against the grid, so deliberately broken fixtures still load.

    Args:
        text: Board text; surrounding blank lines and indentation are
            ignored.
        seed: Seed recorded on the resulting Minefield.

    Returns:
        The parsed board.

    Raises:
        BoardFormatError: If the text is malformed.
    """
    lines = [line.strip() for line in text.strip().splitlines()]
    if len(lines) < 2:
        raise BoardFormatError("Board needs a header and a separator line")

    config = _parse_header(lines[0])

    separator = lines[1]
    if not separator or set(separator) != {ROW_SEPARATOR_CHAR}:
        raise BoardFormatError(f"Expected a separator line, got {separator!r}")

    rows = lines[2:]
    if len(rows) != config.height:
        raise BoardFormatError(
            f"Expected {config.height} rows, got {len(rows)}"
        )

    matrix: List[List[CellType]] = []
    for y, row in enumerate(rows):
        if len(row) != config.width:
            raise BoardFormatError(
                f"Row {y} has {len(row)} cells, expected {config.width}"
            )
        try:
            matrix.append([CellType.from_symbol(symbol) for symbol in row])
        except ValueError as error:
            raise BoardFormatError(f"Row {y}: {error}") from error

    return Minefield(config=config, seed=seed, matrix=np.array(matrix, dtype=object))


def _parse_header(header: str) -> GameConfig:
    """Parse ``difficulty|width|height|mineCount`` into a GameConfig."""
    parts = header.split(HEADER_SEPARATOR)
    if len(parts) != 4:
        raise BoardFormatError(
            f"Header must be difficulty|width|height|mineCount, got {header!r}"
        )
    name, width, height, mine_count = parts
    try:
        return GameConfig(
            width=int(width),
            height=int(height),
            difficulty=Difficulty.parse(name),
            mine_count=int(mine_count),
        )
    except ValueError as error:
        raise BoardFormatError(f"Invalid header {header!r}: {error}") from error


def format_board(minefield: Minefield) -> str:
    """Write a Minefield in the text board format (no trailing newline)."""
    config = minefield.config
    header = HEADER_SEPARATOR.join(
        [
            config.difficulty.name,
            str(config.width),
            str(config.height),
            str(config.mine_count),
        ]
    )
    lines = [header, ROW_SEPARATOR_CHAR * config.width]
    for y in range(minefield.height):
        lines.append(
            "".join(
                minefield.get_cell_type(x, y).symbol
                for x in range(minefield.width)
            )
        )
    return "\n".join(lines)
