"""Exception types raised by the dictionary service."""


class DictionaryError(Exception):
    """Base class for dictionary service errors."""


class StoreUnavailableError(DictionaryError):
    """The word store could not be reached or failed mid-query."""


class WordNotFoundError(DictionaryError):
    """A detail lookup referenced a word id that does not exist."""

    def __init__(self, word_id: int) -> None:
        super().__init__(f"Word {word_id} not found")
        self.word_id = word_id
