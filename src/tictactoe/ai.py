"""Exhaustive minimax search for the Tic-Tac-Toe robot player."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .game import Board, Player

logger = logging.getLogger(__name__)

# Scores are fixed from the robot's point of view, whoever is to move.
WIN_SCORE = 10
LOSS_SCORE = -10
TIE_SCORE = 0


@dataclass(frozen=True)
class SearchResult:
    position: Optional[int]
    score: int


@dataclass
class MinimaxAI:
    """Perfect-play opponent using plain minimax (no pruning, no depth limit).

    Public surface:
      - MinimaxAI(player=Player.X)
      - best_move(board, player) -> SearchResult
      - choose(board) -> position
    """

    player: Player = Player.X
    nodes: int = field(default=0, init=False, repr=False)

    @property
    def human(self) -> Player:
        return self.player.opponent

    # ---- public API ----

    def best_move(self, board: Board, player: Player) -> SearchResult:
        self.nodes = 0
        # Search a private snapshot so callers never observe the probing.
        result = self._minimax(board.copy(), player)
        logger.debug(
            "minimax for %s: position=%s score=%d after %d nodes",
            player.value,
            result.position,
            result.score,
            self.nodes,
        )
        return result

    def choose(self, board: Board) -> Optional[int]:
        return self.best_move(board, self.player).position

    # ---- core search ----

    def _minimax(self, board: Board, player: Player) -> SearchResult:
        self.nodes += 1

        # Terminal checks must fire before the candidate list can be empty
        if board.check_win(self.human):
            return SearchResult(None, LOSS_SCORE)
        if board.check_win(self.player):
            return SearchResult(None, WIN_SCORE)
        available = board.empty_positions()
        if not available:
            return SearchResult(None, TIE_SCORE)

        candidates: List[SearchResult] = []
        for position in available:
            board.cells[position] = player
            reply = self._minimax(board, player.opponent)
            board.clear(position)
            candidates.append(SearchResult(position, reply.score))

        if player is self.player:
            best = max(c.score for c in candidates)
        else:
            best = min(c.score for c in candidates)
        # First candidate in ascending position order wins ties
        return next(c for c in candidates if c.score == best)


def automated_move(board: Board, player: Player = Player.X) -> Optional[int]:
    """Return the robot's optimal position for ``player`` on ``board``."""
    return MinimaxAI(player=player).choose(board)
