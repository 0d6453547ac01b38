"""Game session tying a board to its robot opponent."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .ai import MinimaxAI
from .game import Board, InProgress, Outcome, Player, player_move, start_new_game

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """One human-vs-robot game. Turn order is left to the caller."""

    human: Player = Player.O
    robot: Player = Player.X
    board: Board = field(default_factory=start_new_game)
    move_log: List[Tuple[Player, int]] = field(default_factory=list)
    outcome: Outcome = field(default_factory=InProgress)
    ai: MinimaxAI = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.human is self.robot:
            raise ValueError("Human and robot must play different marks")
        self.ai = MinimaxAI(player=self.robot)

    def reset(self) -> None:
        self.board = start_new_game()
        self.move_log = []
        self.outcome = InProgress()

    def play(self, position: int, player: Player) -> Outcome:
        self.outcome = player_move(self.board, position, player)
        self.move_log.append((player, position))
        logger.debug("%s -> %d\n%s", player.value, position, self.board.render())
        if self.outcome.finished:
            logger.info("game finished: %s", self.outcome)
        return self.outcome

    def robot_move(self) -> Optional[int]:
        position = self.ai.choose(self.board)
        if position is not None:
            self.play(position, self.robot)
        return position

    def play_turn(self, position: int) -> Outcome:
        """Human move followed, if the game goes on, by the robot's reply."""
        self.play(position, self.human)
        if not self.outcome.finished:
            self.robot_move()
        return self.outcome
