"""Wordbook entry point."""

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path

import coloredlogs

from wordbook.dictionary.config import DatasetFormat, DictionaryConfig
from wordbook.dictionary.core import DEFAULT_CAPACITY, Dictionary
from wordbook.dictionary.data import DictionaryData, load_dictionary
from wordbook.run import Wordbook
from wordbook.ui import Interface, get_interface

__author__ = "Sergey Vartanov"
__email__ = "me@enzet.ru"

DEFAULT_DATASET: str = "dataset.txt"
DEFAULT_NAME: str = "Wordbook"


def parse_arguments(args: list[str]) -> Namespace:
    """Parse command-line arguments."""

    parser: ArgumentParser = ArgumentParser("Wordbook")
    parser.add_argument(
        "--dataset",
        help=f"path to dataset file (default is `{DEFAULT_DATASET}`)",
        default=DEFAULT_DATASET,
    )
    parser.add_argument(
        "--data",
        help="path to directory with datasets and `config.json`, overrides "
        "`--dataset`",
    )
    parser.add_argument(
        "--dictionary", help="dictionary identifier from `config.json`"
    )
    parser.add_argument(
        "--bilingual",
        help="dataset contains word pairs with two definitions",
        action="store_true",
    )
    parser.add_argument(
        "--from", dest="from_language", help="code of the first language"
    )
    parser.add_argument(
        "--to", dest="to_language", help="code of the second language"
    )
    parser.add_argument(
        "--capacity",
        help=f"number of hash table buckets (default is {DEFAULT_CAPACITY})",
        type=int,
        default=DEFAULT_CAPACITY,
    )
    parser.add_argument(
        "--interface",
        help="interface type",
        choices=["terminal", "rich"],
        default="rich",
    )
    parser.add_argument(
        "--use-input",
        help="use `input()` function instead of `getchar()`",
        action="store_true",
    )
    parser.add_argument(
        "--verbose", help="print debug messages", action="store_true"
    )

    subparser = parser.add_subparsers(dest="command", required=False)

    # Command `execute`.
    execute_parser: ArgumentParser = subparser.add_parser(
        "execute", help="run single Wordbook command"
    )
    execute_parser.add_argument("single_command")

    return parser.parse_args(args)


def load_data(arguments: Namespace) -> tuple[DictionaryData, str]:
    """Load dictionaries and select one of them.

    :return: all dictionaries and identifier of the selected one
    """
    if arguments.data is not None:
        data: DictionaryData = DictionaryData.from_config(Path(arguments.data))
        if not data.dictionaries:
            raise ValueError(f"No dictionaries in `{arguments.data}`.")
        id_: str = (
            arguments.dictionary
            if arguments.dictionary
            else next(iter(data.dictionaries))
        )
        if data.get_dictionary(id_) is None:
            raise ValueError(f"No dictionary `{id_}` in `{arguments.data}`.")
        return data, id_

    dataset_path: Path = Path(arguments.dataset)
    config: DictionaryConfig = DictionaryConfig(
        file_name=dataset_path.name,
        name=DEFAULT_NAME,
        capacity=arguments.capacity,
        file_format=(
            DatasetFormat.BILINGUAL
            if arguments.bilingual
            else DatasetFormat.MONOLINGUAL
        ),
        from_language=arguments.from_language,
        to_language=arguments.to_language,
    )
    dictionary: Dictionary = load_dictionary(dataset_path.parent, config)

    return (
        DictionaryData(
            dataset_path.parent, {"default": config}, {"default": dictionary}
        ),
        "default",
    )


def main() -> None:
    """Wordbook entry point."""

    arguments: Namespace = parse_arguments(sys.argv[1:])

    coloredlogs.install(
        level=logging.DEBUG if arguments.verbose else logging.INFO,
        fmt="%(message)s",
    )
    interface: Interface = get_interface(
        arguments.interface, arguments.use_input
    )

    try:
        data, id_ = load_data(arguments)
    except FileNotFoundError as error:
        logging.fatal(
            "Unable to open file: `%s`.", error.filename or error
        )
        sys.exit(1)
    except ValueError as error:
        logging.fatal(error)
        sys.exit(1)

    try:
        wordbook: Wordbook = Wordbook(
            interface, data.dictionaries[id_], data.get_name(id_)
        )
        match arguments.command:
            case "execute":
                wordbook.process_command(arguments.single_command)
            case _:
                wordbook.run()
    finally:
        data.destroy()


if __name__ == "__main__":
    main()
