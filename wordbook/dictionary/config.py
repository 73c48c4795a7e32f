"""Configuration of a dictionary dataset."""

from enum import Enum

from pydantic import BaseModel, PositiveInt

from wordbook.dictionary.core import DEFAULT_CAPACITY
from wordbook.language import LanguageConfig


class DatasetFormat(Enum):
    """Format of the dataset file."""

    MONOLINGUAL = "monolingual"
    """File with lines `word definition`."""

    BILINGUAL = "bilingual"
    """File with lines `word_1 word_2 definition_1 | definition_2`."""


class DictionaryConfig(BaseModel):
    """Configuration of a dictionary."""

    file_name: str
    """Name of the dataset file."""

    name: str
    """Dictionary name."""

    capacity: PositiveInt = DEFAULT_CAPACITY
    """Number of hash table buckets."""

    file_format: DatasetFormat = DatasetFormat.MONOLINGUAL
    """Format of the dataset file."""

    from_language: LanguageConfig | None = None
    """Language of words being defined."""

    to_language: LanguageConfig | None = None
    """Language of the second word and definition in bilingual datasets."""
