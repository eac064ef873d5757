"""
Text view for a GameEngine.

The view only reads the board and forwards input; all rules live in the
engine. Cells are entered as 1..9 (row-major), matching the numbers shown
on empty squares.
"""
from __future__ import annotations

from typing import Callable, Optional

from .board import SIZE, Board, Mark
from .difficulty import Tier, parse_smarts
from .engine import GameEngine
from .errors import InvalidDifficultyError, OccupiedCellError

GOOD_MOVE_MSG = "Good move!"
TILE_TAKEN_MSG = "Sorry, that tile is taken!"
YOU_WIN_MSG = "You Won, Game Over!"
COMP_WIN_MSG = "Computer Wins, Game Over!"
DRAW_MSG = "This game is a draw. No winner!"
NEW_GAME_MSG = " Want to play a new game?"
START_MSG = "Pick a tile (1-9) to start a new game"
HELP_MSG = "Enter 1-9 to mark a tile, 's <0-100|easy|smart|genius>' for smarts, 'q' to quit"


def render_board(board: Board, highlight=()) -> str:
    """Grid with marks; empty cells show their 1-based number."""
    rows = []
    for r in range(SIZE):
        parts = []
        for c in range(SIZE):
            i = r * SIZE + c
            m = board.cell_at(i)
            text = m.value if m is not Mark.EMPTY else str(i + 1)
            if i in highlight:
                text = f"[{text}]"
            parts.append(text.center(3))
        rows.append("|".join(parts))
    return "\n---+---+---\n".join(rows)


def render_scores(engine: GameEngine) -> str:
    comp = engine.o_wins if engine.computer_mark is Mark.O else engine.x_wins
    you = engine.x_wins if engine.computer_mark is Mark.O else engine.o_wins
    return f"Computer: {comp}  You: {you}  Draws: {engine.draws}"


class ConsoleGame:
    def __init__(
        self,
        engine: GameEngine,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.engine = engine
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.status_msg = START_MSG

    def process_move(self, index: int) -> Optional[str]:
        """Play the human's tile and the computer's reply.

        Returns the game-over message when the game ended, else None.
        """
        engine = self.engine
        try:
            engine.mark_cell(index, engine.human_mark)
        except OccupiedCellError:
            self.status_msg = TILE_TAKEN_MSG
            return None
        self.status_msg = GOOD_MOVE_MSG
        engine.increment_tiles_played()

        if engine.check_for_draw():
            self.status_msg = DRAW_MSG
            return DRAW_MSG
        if engine.check_for_win():
            return self._win_message()

        reply = engine.select_computer_move()
        engine.mark_cell(reply, engine.computer_mark)
        engine.increment_tiles_played()

        if engine.check_for_draw():
            self.status_msg = DRAW_MSG
            return DRAW_MSG
        if engine.check_for_win():
            return self._win_message()
        return None

    def _win_message(self) -> str:
        if self.engine.winning_player is self.engine.human_mark:
            self.status_msg = YOU_WIN_MSG
        else:
            self.status_msg = COMP_WIN_MSG
        return self.status_msg

    def _show(self) -> None:
        rail = self.engine.winning_rail
        highlight = rail.indices if rail is not None else ()
        self.output_fn(render_board(self.engine.board, highlight))
        self.output_fn(self.status_msg)

    def _ask_new_game(self, msg: str) -> bool:
        self.output_fn(render_scores(self.engine))
        try:
            answer = self.input_fn(msg + NEW_GAME_MSG + " [y/N] ").strip().lower()
        except EOFError:
            return False
        if answer in ("y", "yes"):
            self.engine.init_new_game()
            self.status_msg = START_MSG
            return True
        return False

    def _handle_command(self, raw: str) -> bool:
        """Non-move input. Returns False when the player quits."""
        if raw in ("q", "quit", "exit"):
            return False
        if raw.startswith("s"):
            try:
                self.engine.smarts = parse_smarts(raw[1:])
            except InvalidDifficultyError as e:
                self.status_msg = str(e)
            else:
                tier = Tier.from_smarts(self.engine.smarts)
                self.status_msg = f"Computer smarts set to {self.engine.smarts} ({tier.value})"
            return True
        self.status_msg = HELP_MSG
        return True

    def run(self) -> int:
        """Loop until the player quits or declines a new game."""
        self.output_fn(HELP_MSG)
        while True:
            self._show()
            try:
                raw = self.input_fn("> ").strip().lower()
            except EOFError:
                return 0
            if raw.isdigit() and 1 <= int(raw) <= 9:
                msg = self.process_move(int(raw) - 1)
                if msg is not None:
                    self._show()
                    if not self._ask_new_game(msg):
                        return 0
                continue
            if not self._handle_command(raw):
                return 0
