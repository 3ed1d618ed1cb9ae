from .state import GameState, new_game, pick_letter, type_word, backspace, clear_guess, submit_guess
from .session import Session
from .store import save_session, load_session

__all__ = [
    "GameState", "new_game", "pick_letter", "type_word", "backspace", "clear_guess",
    "submit_guess", "Session", "save_session", "load_session",
]
