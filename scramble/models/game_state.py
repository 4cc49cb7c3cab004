from collections import namedtuple

from scramble.common import config, utils

logger = utils.setup_logger("GameState")

# submit_word results
ACCEPTED = "ACCEPTED"
REJECTED = "REJECTED"
IGNORED = "IGNORED"

WordError = namedtuple("WordError", ["title", "message"])


class GameState:
    def __init__(self, catalog, dictionary, locale=None):
        self.catalog = catalog
        self.dictionary = dictionary
        self.locale = locale or config.LOCALE
        self.root_word = ""
        self.used_words = [] # Most recent first
        self.current_input = ""
        self.last_error = None

    @property
    def score(self):
        return len(self.used_words)

    def start_game(self):
        self.used_words = []
        self.current_input = ""
        self.last_error = None
        self.root_word = self.catalog.random_word()
        logger.info(f"New game, root word: {self.root_word}")

    def submit_word(self, raw):
        answer = raw.lower().strip()
        if not answer:
            return IGNORED

        # Order matters: only the first failing guard is reported.
        if not self.is_long_enough(answer):
            return self.word_error("A short word", "Enter a word longer than three letters")
        if not self.is_not_root_word(answer):
            return self.word_error("This is the original word", "Enter a word other than the original one")
        if not self.is_possible(answer):
            return self.word_error("Word not possible", f"You can't spell that word from '{self.root_word}'!")
        if not self.is_real(answer):
            return self.word_error("Word not recognized", "You can't just make them up, you know!")
        if not self.is_original(answer):
            return self.word_error("Word used already", "Be more original")

        self.used_words.insert(0, answer)
        self.current_input = ""
        self.last_error = None
        return ACCEPTED

    def word_error(self, title, message):
        self.last_error = WordError(title, message)
        return REJECTED

    def dismiss_error(self):
        self.last_error = None

    # --- Guards ---

    def is_long_enough(self, word):
        return len(word) > config.MIN_WORD_LENGTH

    def is_not_root_word(self, word):
        return word != self.root_word

    def is_possible(self, word):
        letters = list(self.root_word)
        for letter in word:
            if letter not in letters:
                return False
            letters.remove(letter)
        return True

    def is_real(self, word):
        return self.dictionary.is_recognized_word(word, self.locale)

    def is_original(self, word):
        return word not in self.used_words
