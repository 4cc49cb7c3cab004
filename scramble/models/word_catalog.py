import random

from scramble.common import config, utils
from scramble.common.errors import CatalogError

logger = utils.setup_logger("WordCatalog")


class WordCatalog:
    def __init__(self, words):
        self.words = tuple(words)

    @classmethod
    def load(cls, path=None):
        """
        Reads the root word list: one word per line, blank lines ignored.
        Raises CatalogError if the file cannot be read.
        """
        path = path or config.CATALOG_PATH
        try:
            with open(path, "r", encoding="utf-8") as f:
                words = [line.strip().lower() for line in f if line.strip()]
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogError(path, e) from e
        logger.info(f"Loaded {len(words)} root words from {path}")
        return cls(words)

    def random_word(self, rng=random):
        if not self.words:
            logger.warning(f"Catalog is empty, falling back to '{config.DEFAULT_ROOT_WORD}'")
            return config.DEFAULT_ROOT_WORD
        return rng.choice(self.words)

    def __len__(self):
        return len(self.words)

    def __contains__(self, word):
        return word in self.words

    def __iter__(self):
        return iter(self.words)
