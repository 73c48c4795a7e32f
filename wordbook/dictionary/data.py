"""Data for dictionaries."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Self

from wordbook.dictionary.config import DatasetFormat, DictionaryConfig
from wordbook.dictionary.core import BilingualDictionary, Dictionary
from wordbook.dictionary.loader import load
from wordbook.language import Language

CONFIGURATION_FILE_NAME: str = "config.json"


def create_dictionary(config: DictionaryConfig) -> Dictionary:
    """Create empty dictionary for the dataset configuration."""

    match config.file_format:
        case DatasetFormat.BILINGUAL:
            return BilingualDictionary(
                config.capacity,
                (
                    Language.from_code(config.from_language)
                    if config.from_language
                    else None
                ),
                (
                    Language.from_code(config.to_language)
                    if config.to_language
                    else None
                ),
            )
        case _:
            return Dictionary(config.capacity)


def load_dictionary(path: Path, config: DictionaryConfig) -> Dictionary:
    """Create dictionary and fill it from the dataset file.

    :param path: path to the directory with the dataset file
    :param config: dictionary configuration
    """
    dictionary: Dictionary = create_dictionary(config)
    load(dictionary, path / config.file_name, config.file_format)
    return dictionary


@dataclass
class DictionaryData:
    """Manager for the directory with dictionary datasets."""

    path: Path
    """The directory managed by this class."""

    configs: dict[str, DictionaryConfig]
    """Mapping from unique dictionary string identifier to configuration."""

    dictionaries: dict[str, Dictionary]
    """Mapping from unique dictionary string identifier to dictionary."""

    @classmethod
    def from_config(cls, path: Path) -> Self:
        """Initialize dictionaries from a directory.

        :param path: path to the directory with datasets and `config.json`, a
            directory without `config.json` has no dictionaries
        """
        if not path.exists():
            logging.fatal("`%s` doesn't exist.", path)
            raise FileNotFoundError(path)

        config: dict[str, dict] = {}
        if (config_path := path / CONFIGURATION_FILE_NAME).exists():
            with config_path.open(encoding="utf-8") as config_file:
                config = json.load(config_file)
        else:
            logging.warning("No `%s` in `%s`.", CONFIGURATION_FILE_NAME, path)

        configs: dict[str, DictionaryConfig] = {}
        dictionaries: dict[str, Dictionary] = {}
        for id_, data in config.items():
            configs[id_] = DictionaryConfig(**data)
            dictionaries[id_] = load_dictionary(path, configs[id_])
        return cls(path, configs, dictionaries)

    def get_dictionary(self, dictionary_id: str) -> Dictionary | None:
        """Get dictionary by its identifier.

        :param dictionary_id: identifier of the dictionary
        :return: dictionary or `None` if dictionary is not found
        """
        return self.dictionaries.get(dictionary_id)

    def get_name(self, dictionary_id: str) -> str:
        """Get the name of the dictionary."""
        return self.configs[dictionary_id].name

    def destroy(self) -> None:
        """Destroy all dictionaries."""

        for id_, dictionary in self.dictionaries.items():
            if not dictionary.is_destroyed():
                logging.debug("Destroying dictionary `%s`.", id_)
                dictionary.destroy()
