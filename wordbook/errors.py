"""Wordbook exceptions."""

__author__ = "Sergey Vartanov"
__email__ = "me@enzet.ru"


class WordbookError(Exception):
    """Base class for all Wordbook errors."""


class AllocationExhaustedError(WordbookError, MemoryError):
    """Memory was exhausted while inserting into the dictionary.

    The dictionary is left exactly as it was before the failed insertion.
    """


class DictionaryDestroyedError(WordbookError):
    """Operation was requested on a destroyed dictionary."""


class MalformedDatasetLineError(WordbookError, ValueError):
    """Dataset line cannot be parsed into a record."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        super().__init__(f"Line {line_number}: {reason}: `{line}`.")

        self.line_number: int = line_number
        """1-based number of the line in the dataset file."""

        self.line: str = line
        """Line without the line terminator."""
