import logging
import tkinter as tk

from game.controls import KEY_HELP, command_for_key, dispatch
from game.puzzle_state import PuzzleState
from gui.board_canvas import BoardCanvas
from gui.helpers import Settings


logger = logging.getLogger(__name__)

TEXT_COLOR = "white"
WIN_COLOR = "#27ae60"
WIN_TEXT = "Solved!"


class RootWindow:
    def __init__(self, window, state : PuzzleState, settings : Settings):
        self._window = window
        self._window.title("Sokoban")
        self._window.resizable(False, False)
        self._window.configure(bg=settings.background_color)

        self._settings : Settings = settings
        self._state : PuzzleState = state

        self._board = BoardCanvas(self._window, settings, state)
        canvas = self._board.get_canvas()
        self._moves_text = canvas.create_text(20, 10, anchor=tk.NW, fill=TEXT_COLOR, font=("Arial", 18), text="")
        canvas.create_text(20, settings.window_height - 10, anchor=tk.SW, fill=TEXT_COLOR, font=("Arial", 12), text=KEY_HELP)
        self._win_text = canvas.create_text(
            settings.window_width // 2,
            settings.window_height // 2,
            anchor=tk.CENTER,
            fill=WIN_COLOR,
            font=("Arial", 48, "bold"),
            text=WIN_TEXT,
            state=tk.HIDDEN,
        )

        self._window.bind("<KeyPress>", self.__handle_key)
        self._state.add_listener(self.render)
        self.render(self._state)

    def render(self, state : PuzzleState) -> None:
        canvas = self._board.get_canvas()
        self._board.draw()
        canvas.itemconfigure(self._moves_text, text=f"Moves: {state.moves}")
        canvas.itemconfigure(self._win_text, state=tk.NORMAL if state.is_over else tk.HIDDEN)
        canvas.tag_raise(self._moves_text)
        canvas.tag_raise(self._win_text)

    def close(self) -> None:
        self._state.remove_listener(self.render)
        self._window.destroy()

    def __handle_key(self, event) -> None:
        command = command_for_key(event.keysym)
        if command is None:
            return
        if dispatch(self._state, command):
            logger.info("Quit requested.")
            self.close()
