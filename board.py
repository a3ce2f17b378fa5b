from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

MIN_SIZE = 9
MINE_DENSITY_DIVISOR = 6

HIDDEN_GLYPH = "|"
MINE_GLYPH = "*"
EMPTY_GLYPH = " "


class InvalidConfigurationError(ValueError):
    """Raised when a board cannot be built with the requested parameters."""


class MoveResult(Enum):
    """
    Outcome of a single move.

    Only REVEALED is truthy, so callers that just want "did the move
    succeed" can keep treating the result as a bool.
    """
    OUT_OF_BOUNDS = auto()
    HIT_MINE = auto()
    REVEALED = auto()

    def __bool__(self) -> bool:
        return self is MoveResult.REVEALED


@dataclass
class Cell:
    """Represents a single square on the Minesweeper board."""
    row: int
    col: int
    is_mine: bool = False
    is_revealed: bool = False
    adjacent_mines: int = 0

    def display_char(self, reveal_all: bool = False) -> str:
        """
        Character for this cell.

        - '|' : unrevealed
        - ' ' : revealed, 0 adjacent mines
        - '1'..'8' : revealed, that many adjacent mines
        - '*' : mine (only when reveal_all=True)

        With reveal_all the revealed/unrevealed state is ignored.
        """
        if reveal_all:
            if self.is_mine:
                return MINE_GLYPH
        elif not self.is_revealed:
            return HIDDEN_GLYPH

        return EMPTY_GLYPH if self.adjacent_mines == 0 else str(self.adjacent_mines)


class Board:
    """
    Square Minesweeper board.

    Design:
    - Mines are placed *after* the first move so that the first move is always safe.
    - The public API takes 1-based (x, y) = (column, row) coordinates, as typed
      by the player. Storage is a 0-based grid[row][col].
    - The board does not track win/loss; callers derive it from make_move()
      and check_win() each turn.
    """

    def __init__(self, size: int, rng: Optional[random.Random] = None) -> None:
        if not isinstance(size, int) or size < MIN_SIZE:
            raise InvalidConfigurationError(
                f"Board size must be at least {MIN_SIZE}, got {size!r}."
            )

        num_mines = size * size // MINE_DENSITY_DIVISOR
        if num_mines > size * size - 1:
            raise InvalidConfigurationError(
                "Not enough cells to place mines while keeping the first move safe."
            )

        self.size = size
        self.num_mines = num_mines
        self.rng = rng or random.Random()
        self.mines_placed: bool = False

        self.grid: List[List[Cell]] = [
            [Cell(r, c) for c in range(size)] for r in range(size)
        ]

    # ------------------------------------------------------------------
    # Core board / cell helpers
    # ------------------------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return 1 <= x <= self.size and 1 <= y <= self.size

    def get_cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is out of bounds.")
        return self.grid[y - 1][x - 1]

    def _neighbors_of(self, row: int, col: int) -> Iterable[Cell]:
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                nr, nc = row + dr, col + dc
                if 0 <= nr < self.size and 0 <= nc < self.size:
                    yield self.grid[nr][nc]

    def neighbors(self, x: int, y: int) -> Iterable[Cell]:
        """Yield all neighboring cells (up to 8) of the 1-based (x, y)."""
        cell = self.get_cell(x, y)
        return self._neighbors_of(cell.row, cell.col)

    # ------------------------------------------------------------------
    # Mine placement and counts
    # ------------------------------------------------------------------
    def _place_mines(self, exclude_x: int, exclude_y: int) -> None:
        """
        Randomly place num_mines mines, never on (exclude_x, exclude_y).
        Called once, on the first move.
        """
        excluded = (exclude_y - 1, exclude_x - 1)
        all_positions = [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if (r, c) != excluded
        ]

        for r, c in self.rng.sample(all_positions, self.num_mines):
            self.grid[r][c].is_mine = True

        self._compute_adjacent_mine_counts()
        self.mines_placed = True
        logger.debug(
            "Placed %d mines on %dx%d board, first move at (%d, %d)",
            self.num_mines, self.size, self.size, exclude_x, exclude_y,
        )

    def _compute_adjacent_mine_counts(self) -> None:
        """Calculate the number of mines around each cell."""
        for row in self.grid:
            for cell in row:
                if cell.is_mine:
                    cell.adjacent_mines = 0
                    continue
                cell.adjacent_mines = sum(
                    1 for n in self._neighbors_of(cell.row, cell.col) if n.is_mine
                )

    # ------------------------------------------------------------------
    # Game actions
    # ------------------------------------------------------------------
    def make_move(self, x: int, y: int) -> MoveResult:
        """
        Reveal the cell at 1-based (x, y).

        - Out-of-range coordinates change nothing and return OUT_OF_BOUNDS.
        - The first in-range move triggers mine placement around it.
        - A mine returns HIT_MINE and leaves the grid untouched.
        - Anything else flood-fills from (x, y) and returns REVEALED.
        """
        if not self.in_bounds(x, y):
            return MoveResult.OUT_OF_BOUNDS

        if not self.mines_placed:
            self._place_mines(x, y)

        if self.get_cell(x, y).is_mine:
            return MoveResult.HIT_MINE

        self._flood_fill_reveal(x, y)
        return MoveResult.REVEALED

    def _flood_fill_reveal(self, start_x: int, start_y: int) -> None:
        """
        Reveal a region of safe cells with 0 adjacent mines, plus their
        boundary of numbered cells.
        """
        stack: List[Tuple[int, int]] = [(start_y - 1, start_x - 1)]
        opened = 0

        while stack:
            row, col = stack.pop()
            cell = self.grid[row][col]

            if cell.is_revealed or cell.is_mine:
                continue

            cell.is_revealed = True
            opened += 1

            if cell.adjacent_mines == 0:
                for neighbor in self._neighbors_of(row, col):
                    if not neighbor.is_revealed:
                        stack.append((neighbor.row, neighbor.col))

        logger.debug("Revealed %d cell(s) from (%d, %d)", opened, start_x, start_y)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def check_win(self) -> bool:
        """True iff every non-mine cell is revealed."""
        return all(cell.is_revealed for cell in self.iter_cells() if not cell.is_mine)

    def iter_cells(self) -> Iterable[Cell]:
        """Iterate over all cells in row-major order."""
        for row in self.grid:
            for cell in row:
                yield cell

    def revealed_count(self) -> int:
        return sum(1 for cell in self.iter_cells() if cell.is_revealed)

    def safe_cell_count(self) -> int:
        return self.size * self.size - self.num_mines

    # ------------------------------------------------------------------
    # Rendering (terminal front-end can just print(board))
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return self.render()

    def render(self) -> str:
        """
        Render the player's view: counts for revealed cells, '|' for hidden
        ones. Mines are never shown.
        """
        return self._render_grid(reveal_all=False)

    def render_all(self) -> str:
        """Render the whole board with mines as '*', for the end of a game."""
        return self._render_grid(reveal_all=True)

    def _render_grid(self, reveal_all: bool) -> str:
        """
        Header of column indices, then one line per row prefixed by its
        index. Every field is padded to the width of the largest index:

          1 2 3 4 5 6 7 8 9
        1 | | 1
        2 | | 1
        """
        width = len(str(self.size))
        header = " " * width + " " + " ".join(
            str(x).rjust(width) for x in range(1, self.size + 1)
        )

        lines = [header]
        for y, row in enumerate(self.grid, start=1):
            glyphs = " ".join(
                cell.display_char(reveal_all=reveal_all).rjust(width) for cell in row
            )
            lines.append(f"{str(y).rjust(width)} {glyphs}")
        return "\n".join(lines)
