class ScrambleError(Exception):
    """Base class for errors raised by the game."""


class CatalogError(ScrambleError):
    """The root word catalog is missing or unreadable."""

    def __init__(self, path, reason):
        super().__init__(f"Cannot load word catalog {path}: {reason}")
        self.path = path
        self.reason = reason


class DictionaryError(ScrambleError):
    """The dictionary word list or locale cannot be used."""
