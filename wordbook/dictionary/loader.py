"""Bulk loading of dictionary datasets from plain text files.

Monolingual dataset has one record per line: a word without whitespace, then
whitespace, then the definition up to the end of the line.  Bilingual dataset
has two words, then two definitions separated by `|`.  There is no escaping
and no quoting.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from wordbook.dictionary.config import DatasetFormat
from wordbook.dictionary.core import BilingualDictionary, Dictionary
from wordbook.errors import MalformedDatasetLineError

__author__ = "Sergey Vartanov"
__email__ = "me@enzet.ru"

WHITESPACE: str = " \t\v\f"
DEFINITION_SEPARATOR: str = "|"


@dataclass
class Record:
    """Monolingual dataset record."""

    word: str
    definition: str


@dataclass
class BilingualRecord:
    """Bilingual dataset record."""

    word: str
    """Word in the first language."""

    counterpart: str
    """Word in the second language."""

    definition: str
    """Definition in the first language."""

    translation: str
    """Definition in the second language."""


def strip_terminator(line: str) -> str:
    """Remove `\\n` or `\\r\\n` from the end of the line."""
    return line.removesuffix("\n").removesuffix("\r")


def split_token(text: str) -> tuple[str, str]:
    """Split the first whitespace-delimited token from the text.

    :return: token and the rest of the text with leading whitespace removed
    """
    text = text.lstrip(WHITESPACE)
    if (matcher := re.search(f"[{WHITESPACE}]", text)) is None:
        return text, ""
    return text[: matcher.start()], text[matcher.start() :].lstrip(WHITESPACE)


def parse_line(line: str, line_number: int) -> Record | None:
    """Parse monolingual dataset line.

    :param line: line with or without line terminator
    :param line_number: 1-based line number for error messages
    :return: record or `None` for a blank line
    """
    line = strip_terminator(line)
    if not line.strip(WHITESPACE):
        return None

    word, definition = split_token(line)
    if not definition:
        raise MalformedDatasetLineError(line_number, line, "no definition")

    return Record(word, definition)


def parse_bilingual_line(
    line: str, line_number: int
) -> BilingualRecord | None:
    """Parse bilingual dataset line.

    :param line: line with or without line terminator
    :param line_number: 1-based line number for error messages
    :return: record or `None` for a blank line
    """
    line = strip_terminator(line)
    if not line.strip(WHITESPACE):
        return None

    word, rest = split_token(line)
    counterpart, definitions = split_token(rest)
    if not definitions:
        raise MalformedDatasetLineError(line_number, line, "no definitions")
    if DEFINITION_SEPARATOR not in definitions:
        raise MalformedDatasetLineError(
            line_number, line, f"no `{DEFINITION_SEPARATOR}` separator"
        )

    definition, translation = definitions.split(DEFINITION_SEPARATOR, 1)
    return BilingualRecord(
        word, counterpart, definition.strip(), translation.strip()
    )


def load_dataset(dictionary: Dictionary, file_path: Path) -> int:
    """Insert all records of the monolingual dataset into the dictionary.

    Malformed lines are reported and skipped.

    :param dictionary: dictionary to fill
    :param file_path: path to the dataset file
    :return: number of inserted records
    """
    logging.info("Loading dataset from `%s`...", file_path)
    count: int = 0

    with file_path.open(
        encoding="utf-8", errors="surrogateescape", newline="\n"
    ) as input_file:
        for line_number, line in enumerate(input_file, start=1):
            try:
                record: Record | None = parse_line(line, line_number)
            except MalformedDatasetLineError as error:
                logging.warning("Skipping line of `%s`. %s", file_path, error)
                continue
            if record is None:
                continue
            dictionary.insert(record.word, record.definition)
            count += 1

    logging.info("%d records loaded from `%s`.", count, file_path)
    return count


def load_bilingual_dataset(
    dictionary: BilingualDictionary, file_path: Path
) -> int:
    """Insert all records of the bilingual dataset into the dictionary.

    Malformed lines are reported and skipped.

    :param dictionary: dictionary to fill
    :param file_path: path to the dataset file
    :return: number of inserted records
    """
    logging.info("Loading bilingual dataset from `%s`...", file_path)
    count: int = 0

    with file_path.open(
        encoding="utf-8", errors="surrogateescape", newline="\n"
    ) as input_file:
        for line_number, line in enumerate(input_file, start=1):
            try:
                record: BilingualRecord | None = parse_bilingual_line(
                    line, line_number
                )
            except MalformedDatasetLineError as error:
                logging.warning("Skipping line of `%s`. %s", file_path, error)
                continue
            if record is None:
                continue
            dictionary.insert(
                (record.word, record.counterpart),
                record.definition,
                record.translation,
            )
            count += 1

    logging.info("%d records loaded from `%s`.", count, file_path)
    return count


def load(
    dictionary: Dictionary, file_path: Path, file_format: DatasetFormat
) -> int:
    """Load dataset of the specified format into the dictionary."""

    match file_format:
        case DatasetFormat.MONOLINGUAL:
            return load_dataset(dictionary, file_path)
        case DatasetFormat.BILINGUAL:
            if not isinstance(dictionary, BilingualDictionary):
                raise TypeError("Bilingual dataset needs bilingual dictionary")
            return load_bilingual_dataset(dictionary, file_path)
        case _:
            raise ValueError(f"unknown file format `{file_format}`")
