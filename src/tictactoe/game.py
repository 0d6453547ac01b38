"""Board representation and win/tie detection for classic Tic-Tac-Toe."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union


class Player(str, Enum):
    X = "X"
    O = "O"

    @property
    def opponent(self) -> "Player":
        return Player.O if self is Player.X else Player.X


BOARD_SIZE = 9

WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (6, 4, 2),
)


class OccupiedSlotError(ValueError):
    """Raised when a move targets a position that already holds a mark."""

    def __init__(self, position: int, mark: Player):
        super().__init__(f"Position {position} is already occupied by {mark.value}")
        self.position = position
        self.mark = mark


# ---------- Outcomes ----------


@dataclass(frozen=True)
class Win:
    player: Player
    line_index: int

    finished = True

    @property
    def positions(self) -> Tuple[int, int, int]:
        return WINNING_LINES[self.line_index]


@dataclass(frozen=True)
class Tie:
    finished = True


@dataclass(frozen=True)
class InProgress:
    finished = False


Outcome = Union[Win, Tie, InProgress]


# ---------- Board ----------


@dataclass
class Board:
    # None for empty, otherwise the Player holding the slot
    cells: List[Optional[Player]] = field(
        default_factory=lambda: [None] * BOARD_SIZE
    )

    def empty_positions(self) -> List[int]:
        return [i for i, c in enumerate(self.cells) if c is None]

    def is_full(self) -> bool:
        return all(c is not None for c in self.cells)

    def check_win(self, player: Player) -> Optional[Win]:
        """Return the first winning line for ``player`` in table order, if any."""
        for index, line in enumerate(WINNING_LINES):
            if all(self.cells[p] is player for p in line):
                return Win(player, index)
        return None

    def winner(self) -> Optional[Win]:
        return self.check_win(Player.O) or self.check_win(Player.X)

    def is_tie(self) -> bool:
        return self.is_full() and self.winner() is None

    def place(self, position: int, player: Player) -> None:
        current = self.cells[position]
        if current is not None:
            raise OccupiedSlotError(position, current)
        self.cells[position] = player

    def clear(self, position: int) -> None:
        self.cells[position] = None

    def copy(self) -> "Board":
        return Board(cells=self.cells.copy())

    def render(self) -> str:
        rows = []
        for start in range(0, BOARD_SIZE, 3):
            row = self.cells[start : start + 3]
            rows.append("|".join(c.value if c is not None else " " for c in row))
        return "\n".join(rows)


# ---- API used by the session & UI ----


def start_new_game() -> Board:
    return Board()


def player_move(board: Board, position: int, player: Player) -> Outcome:
    """Apply a move and report the resulting outcome.

    A move that completes a line on the last empty slot is a win, not a tie.
    """
    board.place(position, player)
    won = board.check_win(player)
    if won:
        return won
    if board.is_tie():
        return Tie()
    return InProgress()
