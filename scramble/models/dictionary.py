"""
Spellcheck oracles used to decide whether a submitted word is real.

The base check is a bundled English word list with proper nouns left out;
wordfreq can be layered on top to drop words it has never seen.
"""
from typing import Iterable, Optional

from wordfreq import available_languages, zipf_frequency

from scramble.common import config, utils
from scramble.common.errors import DictionaryError

logger = utils.setup_logger("Dictionary")


class Dictionary:
    """Answers whether a word is correctly spelled in a given locale."""

    def is_recognized_word(self, word: str, locale: str) -> bool:
        raise NotImplementedError


class WordListDictionary(Dictionary):
    """Set lookup over a fixed word list. The locale is not used."""

    def __init__(self, words: Iterable[str]):
        self._words = {w.strip().lower() for w in words if w.strip()}

    @classmethod
    def load(cls, path: Optional[str] = None) -> "WordListDictionary":
        """
        Reads one word per line. Capitalized entries are proper nouns
        and are skipped, as is anything that is not purely alphabetic.
        Raises DictionaryError if the file cannot be read.
        """
        path = path or config.DICTIONARY_PATH
        try:
            with open(path, "r", encoding="utf-8") as f:
                words = [w for w in (line.strip() for line in f) if w.isalpha() and w.islower()]
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryError(f"Cannot load dictionary {path}: {e}") from e
        logger.info(f"Loaded {len(words)} dictionary words from {path}")
        return cls(words)

    def __len__(self):
        return len(self._words)

    def is_recognized_word(self, word: str, locale: str) -> bool:
        if not word:
            return False
        return word.lower() in self._words


class WordfreqDictionary(Dictionary):
    """
    Narrows another dictionary to words wordfreq has seen often enough.

    zipf_frequency returns 0 for unknown words. A word is recognized when
    the base dictionary knows it and its Zipf score is at least min_zipf;
    a min_zipf of 0 turns the frequency filter off.
    """

    def __init__(self, base: Dictionary, min_zipf: Optional[float] = None):
        self.base = base
        self.min_zipf = config.MIN_ZIPF if min_zipf is None else min_zipf

    def is_recognized_word(self, word: str, locale: str) -> bool:
        if not word or not word.isalpha():
            return False
        if not self.base.is_recognized_word(word, locale):
            return False
        if self.min_zipf <= 0:
            return True
        return zipf_frequency(word, locale) >= self.min_zipf


def check_locale(locale: str):
    """Raises DictionaryError unless wordfreq has a word list for locale."""
    if locale not in available_languages():
        raise DictionaryError(f"Unsupported dictionary locale '{locale}'")


def default_dictionary() -> Dictionary:
    return WordfreqDictionary(WordListDictionary.load())
