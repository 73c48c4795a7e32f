"""Wordbook command loop."""

import argparse
import logging
import sys

from wordbook.dictionary.core import (
    BilingualDictionary,
    Dictionary,
    DictionaryEntry,
    Key,
    key_to_text,
)
from wordbook.dictionary.loader import DEFINITION_SEPARATOR
from wordbook.dictionary.ui import (
    dictionary_to_text,
    entry_to_text,
    search_to_text,
    statistics_to_table,
)
from wordbook.language import Language
from wordbook.ui import Block, Element, Interface, Title

WORD_EXISTS_MESSAGE: str = "Word already exists in the dictionary."
WORD_ADDED_MESSAGE: str = "Word added successfully."
MEANING_ADDED_MESSAGE: str = "Meaning added successfully."


class Wordbook:
    """Interactive access to one dictionary."""

    interface: Interface
    """Interface to interact with the user."""

    dictionary: Dictionary
    """Dictionary to search in and add to."""

    def __init__(
        self, interface: Interface, dictionary: Dictionary, name: str
    ) -> None:
        self.interface: Interface = interface
        self.dictionary: Dictionary = dictionary
        self.name: str = name

    def is_bilingual(self) -> bool:
        """Check whether keys are word pairs."""
        return isinstance(self.dictionary, BilingualDictionary)

    def print(self, elements: list[Element]) -> None:
        """Print elements one by one."""
        for element in elements:
            self.interface.print(element)

    def run(self) -> None:
        """Run the main loop."""

        self.interface.print(Title(self.name))
        self.interface.print(
            Block(
                'Print "help" to see commands or "exit" to quit.', (1, 4, 1, 4)
            )
        )

        while True:
            command: str = self.interface.input("Wordbook > ")

            if command in ("q", "quit", "exit"):
                return

            self.process_command(command)

    def process_command(self, command: str) -> None:
        """Process the user command."""

        if not command.strip():
            return

        parser: argparse.ArgumentParser = argparse.ArgumentParser(
            prog="", exit_on_error=False, add_help=False
        )
        subparsers = parser.add_subparsers(dest="command")

        subparsers.add_parser("help", help="print help message")

        search_parser = subparsers.add_parser(
            "search", help="show all meanings of the word"
        )
        search_parser.add_argument(
            "words", nargs="+", help="word, or two words for word pairs"
        )

        add_parser = subparsers.add_parser(
            "add", help="add the word or a new meaning of the word"
        )
        add_parser.add_argument(
            "words",
            nargs="+",
            help=(
                "word (two words for word pairs) and optional definition, "
                "bilingual definitions are separated with "
                f"`{DEFINITION_SEPARATOR}`"
            ),
        )

        subparsers.add_parser("list", help="show all words in ascending order")
        subparsers.add_parser("stat", help="show hash table statistics")

        arguments: argparse.Namespace
        try:
            arguments = parser.parse_args(command.split())
        except argparse.ArgumentError as e:
            logging.error("Error parsing command: %s.", e)
            return
        except SystemExit:
            return

        match arguments.command:
            case "help":
                parser.print_help(sys.stdout)
            case "search":
                self.search(arguments.words)
            case "add":
                self.add(arguments.words, command)
            case "list":
                self.print(dictionary_to_text(self.dictionary))
            case "stat":
                self.interface.print(statistics_to_table(self.dictionary))

    def get_key(self, words: list[str]) -> Key | None:
        """Get the key from command arguments.

        :return: key or `None` if there are not enough words for the key
        """
        if not self.is_bilingual():
            return words[0]

        if len(words) < 2:
            self.interface.print("Two words are required for a word pair.")
            return None
        return words[0], words[1]

    def search(self, words: list[str]) -> None:
        """Search the word and print all its meanings."""

        if (key := self.get_key(words)) is None:
            return

        entry: DictionaryEntry | None = self.dictionary.search(key)
        self.print(search_to_text(entry, key_to_text(key)))

    def add(self, words: list[str], command: str) -> None:
        """Add the word with a definition, asking for missing parts.

        :param words: command arguments
        :param command: the whole command, the definition is taken from it as
            typed
        """
        if (key := self.get_key(words)) is None:
            return
        word_text: str = key_to_text(key)

        entry: DictionaryEntry | None = self.dictionary.search(key)
        if entry is not None:
            self.print(entry_to_text(entry))
            if not self.interface.confirm(
                f"{WORD_EXISTS_MESSAGE} Add another meaning?"
            ):
                return

        # Skip the command name and the key words.
        skip: int = 3 if self.is_bilingual() else 2
        parts: list[str] = command.split(maxsplit=skip)
        definition: str = parts[skip].strip() if len(parts) > skip else ""

        if isinstance(self.dictionary, BilingualDictionary):
            translation: str
            if DEFINITION_SEPARATOR in definition:
                definition, translation = (
                    part.strip()
                    for part in definition.split(DEFINITION_SEPARATOR, 1)
                )
            else:
                definition = self.ask_definition(
                    word_text, self.dictionary.from_language
                )
                translation = self.ask_definition(
                    word_text, self.dictionary.to_language
                )
            self.dictionary.insert(key, definition, translation)
        else:
            if not definition:
                definition = self.ask_definition(word_text)
            self.dictionary.insert(key, definition)

        self.interface.print(
            WORD_ADDED_MESSAGE if entry is None else MEANING_ADDED_MESSAGE
        )

    def ask_definition(
        self, word_text: str, language: Language | None = None
    ) -> str:
        """Ask user for the definition of the word."""

        prompt: str = f"Enter the meaning for {word_text}"
        if language is not None:
            prompt += f" in {language.name}"
        return self.interface.input(prompt + ": ").strip()
