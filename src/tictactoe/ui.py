"""FastAPI-powered web UI for playing Tic-Tac-Toe against the robot."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import threading

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from .game import OccupiedSlotError, Tie, Win
from .session import GameSession

logger = logging.getLogger(__name__)


@dataclass
class SessionEntry:
    """Container for an active game session and the lock serializing it."""

    session: GameSession
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


SESSIONS: Dict[str, SessionEntry] = {}
app = FastAPI(
    title="Tic-Tac-Toe", description="Play Tic-Tac-Toe against a perfect robot"
)

HUMAN_WIN_MESSAGE = "You win. Congrats!"
ROBOT_WIN_MESSAGE = "The Robot wins. Better luck next time!"
TIE_MESSAGE = "Tie game. That was tough!"


class MoveRequest(BaseModel):
    """Request payload for submitting the human's move."""

    position: int = Field(ge=0, le=8, description="Cell index, row-major 0..8")


def _create_session() -> str:
    """Create a new game session and register it for later access."""

    session_id = uuid.uuid4().hex
    SESSIONS[session_id] = SessionEntry(session=GameSession())
    logger.info("created game %s", session_id)
    return session_id


def _get_entry(game_id: str) -> SessionEntry:
    try:
        return SESSIONS[game_id]
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Game not found") from exc


def _serialize_session(game_id: str, entry: SessionEntry) -> Dict[str, object]:
    with entry.lock:
        session = entry.session
        outcome = session.outcome

        status = "in_progress"
        winner: Optional[str] = None
        line: Optional[int] = None
        positions: List[int] = []
        message: Optional[str] = None
        if isinstance(outcome, Win):
            status = "win"
            winner = outcome.player.value
            line = outcome.line_index
            positions = list(outcome.positions)
            message = (
                HUMAN_WIN_MESSAGE if outcome.player is session.human
                else ROBOT_WIN_MESSAGE
            )
        elif isinstance(outcome, Tie):
            status = "tie"
            message = TIE_MESSAGE

        move_log = [
            {"player": player.value, "position": position}
            for player, position in session.move_log
        ]
        state: Dict[str, object] = {
            "id": game_id,
            "cells": [c.value if c is not None else "" for c in session.board.cells],
            "humanPlayer": session.human.value,
            "robotPlayer": session.robot.value,
            "status": status,
            "winner": winner,
            "winningLine": line,
            "winningPositions": positions,
            "message": message,
            "moveLog": move_log,
        }
        if move_log:
            state["lastMove"] = move_log[-1]
        return state


def _apply_player_move(entry: SessionEntry, position: int) -> None:
    with entry.lock:
        session = entry.session
        if session.outcome.finished:
            raise HTTPException(status_code=400, detail="Game already finished")
        try:
            session.play_turn(position)
        except OccupiedSlotError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.post("/api/game")
def create_game() -> Dict[str, object]:
    game_id = _create_session()
    return _serialize_session(game_id, SESSIONS[game_id])


@app.get("/api/game/{game_id}")
def get_game(game_id: str) -> Dict[str, object]:
    entry = _get_entry(game_id)
    return _serialize_session(game_id, entry)


@app.post("/api/game/{game_id}/move")
def make_move(game_id: str, request: MoveRequest) -> Dict[str, object]:
    entry = _get_entry(game_id)
    _apply_player_move(entry, request.position)
    return _serialize_session(game_id, entry)


@app.post("/api/game/{game_id}/reset")
def reset_game(game_id: str) -> Dict[str, object]:
    entry = _get_entry(game_id)
    with entry.lock:
        entry.session.reset()
    return _serialize_session(game_id, entry)


@app.get("/", response_class=HTMLResponse)
def index() -> str:
    return HTML_PAGE


HTML_PAGE = """<!DOCTYPE html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <title>Tic-Tac-Toe</title>
    <style>
      body {
        font-family: sans-serif;
        display: flex;
        flex-direction: column;
        align-items: center;
        margin-top: 3rem;
      }
      table { border-collapse: collapse; }
      td {
        width: 100px;
        height: 100px;
        border: 2px solid #222;
        text-align: center;
        font-size: 64px;
        cursor: pointer;
      }
      tr:first-child td { border-top: 0; }
      tr:last-child td { border-bottom: 0; }
      td:first-child { border-left: 0; }
      td:last-child { border-right: 0; }
      .endOfGame {
        display: none;
        margin-top: 1.5rem;
        padding: 1rem 2rem;
        background: rgba(205, 133, 63, 0.85);
        color: white;
        border-radius: 6px;
        font-size: 1.4rem;
      }
      button { margin-top: 1.5rem; padding: 0.5rem 1.5rem; font-size: 1rem; }
    </style>
  </head>
  <body>
    <table id=\"board\">
      <tr><td class=\"cell\" id=\"0\"></td><td class=\"cell\" id=\"1\"></td><td class=\"cell\" id=\"2\"></td></tr>
      <tr><td class=\"cell\" id=\"3\"></td><td class=\"cell\" id=\"4\"></td><td class=\"cell\" id=\"5\"></td></tr>
      <tr><td class=\"cell\" id=\"6\"></td><td class=\"cell\" id=\"7\"></td><td class=\"cell\" id=\"8\"></td></tr>
    </table>
    <div class=\"endOfGame\"><div class=\"text\"></div></div>
    <button id=\"replay\">Replay</button>
    <script>
      let gameId = null;
      let state = null;
      const cells = document.querySelectorAll('.cell');

      async function call(method, url, body) {
        const response = await fetch(url, {
          method,
          headers: { 'Content-Type': 'application/json' },
          body: body ? JSON.stringify(body) : undefined,
        });
        const payload = await response.json();
        if (!response.ok) {
          throw new Error(payload.detail || 'Request failed');
        }
        return payload;
      }

      function render() {
        const banner = document.querySelector('.endOfGame');
        cells.forEach((cell, index) => {
          cell.innerText = state.cells[index];
          cell.style.removeProperty('background-color');
        });
        if (state.status === 'win') {
          const color = state.winner === state.humanPlayer ? 'RoyalBlue' : 'OrangeRed';
          state.winningPositions.forEach((index) => {
            cells[index].style.backgroundColor = color;
          });
        } else if (state.status === 'tie') {
          cells.forEach((cell) => { cell.style.backgroundColor = 'lightGreen'; });
        }
        banner.style.display = state.message ? 'block' : 'none';
        banner.querySelector('.text').innerText = state.message || '';
      }

      async function startGame() {
        state = gameId
          ? await call('POST', `/api/game/${gameId}/reset`)
          : await call('POST', '/api/game');
        gameId = state.id;
        render();
      }

      cells.forEach((cell) => {
        cell.addEventListener('click', async () => {
          if (!state || state.status !== 'in_progress' || state.cells[cell.id]) {
            return;
          }
          try {
            state = await call('POST', `/api/game/${gameId}/move`, {
              position: Number(cell.id),
            });
            render();
          } catch (err) {
            console.error(err);
          }
        });
      });

      document.getElementById('replay').addEventListener('click', startGame);
      startGame();
    </script>
  </body>
</html>
"""
