"""
Game controller - routes view events to the game state and re-renders.
"""
from scramble.common import utils
from scramble.models.game_state import ACCEPTED, REJECTED, GameState

logger = utils.setup_logger("GameController")


class GameController:
    """Controller for the single game screen."""

    def __init__(self, state: GameState, view):
        self.state = state
        self.view = view

        # Register view callbacks
        self.view.on_submit = self._on_submit
        self.view.on_restart = self._on_restart
        self.view.on_error_dismissed = self._on_error_dismissed

    def start(self):
        """Start the first game and draw it."""
        self.state.start_game()
        self.view.render(self.state)

    def _on_submit(self, text: str):
        """Callback: the player pressed enter in the word field."""
        self.state.current_input = text
        result = self.state.submit_word(text)
        if result == ACCEPTED:
            logger.debug(f"Accepted '{self.state.used_words[0]}' (score {self.state.score})")
        elif result == REJECTED:
            error = self.state.last_error
            logger.debug(f"Rejected '{text.strip()}': {error.title}")
            self.view.show_error(error.title, error.message)
        self.view.render(self.state)

    def _on_restart(self):
        """Callback: restart button."""
        self.state.start_game()
        self.view.render(self.state)

    def _on_error_dismissed(self):
        """Callback: error dialog closed."""
        self.state.dismiss_error()
        self.view.render(self.state)
