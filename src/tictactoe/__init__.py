"""Tic-Tac-Toe package exposing board rules, the minimax robot, and the web application."""

from .ai import MinimaxAI, SearchResult, automated_move
from .game import (
    WINNING_LINES,
    Board,
    InProgress,
    OccupiedSlotError,
    Outcome,
    Player,
    Tie,
    Win,
    player_move,
    start_new_game,
)
from .session import GameSession
from .ui import app

__all__ = [
    "WINNING_LINES",
    "Board",
    "GameSession",
    "InProgress",
    "MinimaxAI",
    "OccupiedSlotError",
    "Outcome",
    "Player",
    "SearchResult",
    "Tie",
    "Win",
    "app",
    "automated_move",
    "player_move",
    "start_new_game",
]
