"""Tests for dictionary configuration and languages."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from wordbook.dictionary.config import DatasetFormat, DictionaryConfig
from wordbook.dictionary.core import BilingualDictionary, Dictionary
from wordbook.dictionary.data import DictionaryData, create_dictionary
from wordbook.language import Language, LanguageNotFound


def test_language() -> None:
    """Test language name and code."""

    language: Language = Language.from_code("fr")

    assert language.name == "French"
    assert language.code == "fr"
    assert language == Language("fr")


def test_unknown_language() -> None:
    """Test that unknown language code is rejected."""

    with pytest.raises(LanguageNotFound):
        Language.from_code("zz")


def test_config_defaults() -> None:
    """Test default configuration values."""

    config: DictionaryConfig = DictionaryConfig(
        file_name="dataset.txt", name="Test"
    )

    assert config.capacity == 100
    assert config.file_format == DatasetFormat.MONOLINGUAL
    assert isinstance(create_dictionary(config), Dictionary)


def test_config_wrong_capacity() -> None:
    """Test that capacity should be positive."""

    with pytest.raises(ValidationError):
        DictionaryConfig(file_name="dataset.txt", name="Test", capacity=0)


def test_bilingual_config() -> None:
    """Test bilingual dictionary creation from configuration."""

    dictionary: Dictionary = create_dictionary(
        DictionaryConfig(
            file_name="en_fr.txt",
            name="English-French",
            capacity=10,
            file_format="bilingual",
            from_language="en",
            to_language="fr",
        )
    )

    assert isinstance(dictionary, BilingualDictionary)
    assert dictionary.capacity == 10
    assert dictionary.from_language == Language("en")
    assert dictionary.to_language == Language("fr")


def test_dictionary_data(tmp_path: Path) -> None:
    """Test loading all dictionaries from the directory."""

    (tmp_path / "en.txt").write_text("hello greeting\n", encoding="utf-8")
    (tmp_path / "en_fr.txt").write_text(
        "cat chat animal | animal\n", encoding="utf-8"
    )
    (tmp_path / "config.json").write_text(
        json.dumps(
            {
                "en": {"file_name": "en.txt", "name": "English"},
                "en_fr": {
                    "file_name": "en_fr.txt",
                    "name": "English-French",
                    "file_format": "bilingual",
                    "from_language": "en",
                    "to_language": "fr",
                },
            }
        ),
        encoding="utf-8",
    )

    data: DictionaryData = DictionaryData.from_config(tmp_path)

    english: Dictionary | None = data.get_dictionary("en")
    assert english is not None
    assert "hello" in english
    english_french: Dictionary | None = data.get_dictionary("en_fr")
    assert english_french is not None
    assert ("cat", "chat") in english_french
    assert data.get_name("en_fr") == "English-French"
    assert data.get_dictionary("de") is None

    data.destroy()
    assert english.is_destroyed()
    assert english_french.is_destroyed()


def test_dictionary_data_without_config(tmp_path: Path) -> None:
    """Test directory without configuration file."""
    assert DictionaryData.from_config(tmp_path).dictionaries == {}


def test_dictionary_data_missing_directory(tmp_path: Path) -> None:
    """Test that directory should exist."""

    with pytest.raises(FileNotFoundError):
        DictionaryData.from_config(tmp_path / "missing")
