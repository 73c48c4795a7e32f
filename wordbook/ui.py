"""Wordbook console user interface.

Dictionary views are built from a few elements (`Text`, `Formatted`,
`Colorized`, `Title`, `Block`, `Table`) and printed by one of the interfaces:
plain terminal output or `rich` console output.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Self
from typing_extensions import override

import readchar
from rich import box
from rich.console import Console
from rich.padding import Padding as RichElementPadding
from rich.panel import Panel as RichElementPanel
from rich.table import Table as RichElementTable
from rich.text import Text as RichElementText

__author__ = "Sergey Vartanov"
__email__ = "me@enzet.ru"

RichCompatible = (
    RichElementText | RichElementPanel | RichElementTable | RichElementPadding
)
CONFIRM_OPTIONS: list[tuple[str, str]] = [("Yes", "y"), ("No", "n")]


def table(columns: list[str], rows: list[list[str]]) -> str:
    """Draw table with simple text."""

    lengths: list[int] = [len(x) for x in columns]
    for row in rows:
        for index in range(len(columns)):
            lengths[index] = max(lengths[index], len(row[index]))

    lines: list[str] = [
        " ".join(cells[i].ljust(lengths[i]) for i in range(len(columns)))
        for cells in [columns] + rows
    ]
    return "\n".join(lines)


class Element:
    """Interface element."""


class Text(Element):
    """Line of text, concatenation of strings and styled parts."""

    def __init__(self, text: str | Element | None = None):
        self.elements: list[Element | str] = [] if text is None else [text]

    def add(self, element: Element | str) -> Self:
        """Chainable method to add element to the text."""
        self.elements.append(element)
        return self


@dataclass
class Formatted(Element):
    """Text with font style, e.g. bold word of the entry."""

    text: str
    format_: str

    def __post_init__(self) -> None:
        assert self.format_ in ["bold", "italic", "underline"]


@dataclass
class Colorized(Element):
    """Text in color, e.g. translation next to the definition."""

    text: str
    color: str


@dataclass
class Block(Element):
    """Paragraph with padding: top, right, bottom, left."""

    text: str
    padding: tuple[int, int, int, int]


@dataclass
class Title(Element):
    """Dictionary name shown at start."""

    text: str


@dataclass
class Table(Element):
    """Table with header row, e.g. hash table statistics."""

    columns: list[str]
    rows: list[list[str]]


class Interface(ABC):
    """User input/output interface."""

    def __init__(self, use_input: bool) -> None:
        self.use_input: bool = use_input

    @abstractmethod
    def print(self, text: Element | str) -> None:
        """Simply print text message."""
        raise NotImplementedError()

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Return user input."""
        raise NotImplementedError()

    @abstractmethod
    def confirm(self, prompt: str) -> bool:
        """Ask a yes or no question, Enter means yes."""
        raise NotImplementedError()


class TerminalInterface(Interface):
    """Simple terminal interface without colors and formatting."""

    @override
    def print(self, text: Element | str) -> None:
        print(self.construct(text))

    def construct(self, element: Element | str) -> str:
        """Construct string from element."""

        if isinstance(element, str):
            return element

        if isinstance(element, Text):
            return "".join(
                self.construct(sub_element) for sub_element in element.elements
            )

        # Terminal output has no margins or styles.
        if isinstance(element, (Block, Formatted, Colorized, Title)):
            return element.text

        if isinstance(element, Table):
            return table(element.columns, element.rows)

        raise ValueError(
            f"Unsupported text type in terminal interface `{type(element)}`."
        )

    @override
    def input(self, prompt: str) -> str:
        return input(prompt)

    def get_char(self) -> str:
        """Return user input character."""
        return input() if self.use_input else readchar.readkey()

    @staticmethod
    def get_option(text: str, key: str) -> Text:
        """Get text of an option."""
        return Text(f"[{key.upper()}] {text}")

    @override
    def confirm(self, prompt: str) -> bool:
        self.print(prompt)

        options_text: Text = Text()
        for index, (text, key) in enumerate(CONFIRM_OPTIONS):
            if index:
                options_text.add("  ")
            options_text.add(self.get_option(text, key))
        self.print(options_text)

        while True:
            char: str = self.get_char().lower()
            if char in ("", "y"):
                return True
            if char == "n":
                return False


class RichInterface(TerminalInterface):
    """Terminal interface with colors and frames."""

    def __init__(self, use_input: bool) -> None:
        super().__init__(use_input)
        self.console: Console = Console(highlight=False)

    @override
    def print(self, text: Element | str) -> None:
        self.console.print(self.construct_rich(text))

    def construct_rich(self, element: Element | str) -> RichCompatible | str:
        """Construct rich element from text."""

        if isinstance(element, str):
            return element

        if isinstance(element, Text):
            result: RichElementText = RichElementText()
            for sub_element in element.elements:
                constructed = self.construct_rich(sub_element)
                if isinstance(constructed, RichElementText):
                    result.append_text(constructed)
                else:
                    result.append(self.construct(sub_element))
            return result

        if isinstance(element, Title):
            return RichElementPanel(element.text)

        if isinstance(element, Formatted):
            return RichElementText(element.text, style=element.format_)

        if isinstance(element, Colorized):
            return RichElementText(element.text, style=element.color)

        if isinstance(element, Block):
            return RichElementPadding(element.text, element.padding)

        if isinstance(element, Table):
            rich_table: RichElementTable = RichElementTable(box=box.ROUNDED)
            for column in element.columns:
                rich_table.add_column(column)
            for row in element.rows:
                rich_table.add_row(*row)
            return rich_table

        assert False, element

    @override
    @staticmethod
    def get_option(text: str, key: str) -> Text:
        return Text().add(Formatted(key.upper(), "bold")).add(" ").add(text)


def get_interface(interface: str, use_input: bool = True) -> Interface:
    """Get interface by its identifier."""

    match interface:
        case "terminal":
            return TerminalInterface(use_input)
        case "rich":
            return RichInterface(use_input)
        case _:
            raise ValueError(f"Unsupported interface: `{interface}`.")
