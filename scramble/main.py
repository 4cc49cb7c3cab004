"""
Word Scramble Flet Desktop App
"""
import functools
import sys

import flet as ft

from scramble.common import config, utils
from scramble.common.errors import ScrambleError
from scramble.controllers.game_controller import GameController
from scramble.models.dictionary import Dictionary, check_locale, default_dictionary
from scramble.models.game_state import GameState
from scramble.models.word_catalog import WordCatalog
from scramble.views.game_view import GameView

logger = utils.setup_logger("WordScramble")


def main(page: ft.Page, catalog: WordCatalog, dictionary: Dictionary):
    state = GameState(catalog, dictionary)
    controller = GameController(state, GameView(page))
    controller.start()


def run():
    # The game cannot start without root words or a working dictionary
    try:
        catalog = WordCatalog.load()
        check_locale(config.LOCALE)
        dictionary = default_dictionary()
    except ScrambleError as e:
        logger.error(str(e))
        sys.exit(1)

    ft.run(functools.partial(main, catalog=catalog, dictionary=dictionary))


if __name__ == "__main__":
    run()
