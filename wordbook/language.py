"""Languages of bilingual dictionaries."""

import re
from dataclasses import dataclass, field
from typing import Self

from iso639 import Lang
from iso639.exceptions import InvalidLanguageValue

__author__ = "Sergey Vartanov"
__email__ = "me@enzet.ru"


LanguageConfig = str
"""ISO 639 language code in `config.json`, e.g. `fr`."""


class LanguageNotFound(ValueError):
    """Language with the given code was not found."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Unknown language code `{code}`.")
        self.code: str = code


@dataclass
class Language:
    """Language of the first or the second word of a word pair."""

    code: str
    """ISO 639 language code."""

    name: str = field(init=False, compare=False)
    """English name used in prompts, e.g. `Greek` instead of
    `Modern Greek (1453-)`."""

    def __post_init__(self) -> None:
        try:
            language: Lang = Lang(self.code)
        except InvalidLanguageValue as error:
            raise LanguageNotFound(self.code) from error
        self.name = re.sub(r" \(.*\)", "", language.name)

    @classmethod
    def from_code(cls, code: LanguageConfig) -> Self:
        """Get language by its code from dictionary configuration."""
        return cls(code)
