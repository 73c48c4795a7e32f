"""User interface for dictionaries."""

from wordbook.dictionary.core import Dictionary, DictionaryEntry, to_printable
from wordbook.ui import Colorized, Element, Formatted, Table, Text

SORTED_HEADER: str = "Dictionary Contents (Sorted):"


def entry_to_text(entry: DictionaryEntry) -> list[Element]:
    """Get human-readable representation of the dictionary entry.

    The key is followed by one line per meaning, the newest meaning first.
    """
    result: list[Element] = [
        Text().add(Formatted(entry.get_key_text(), "bold")).add(":")
    ]
    for meaning in entry.meanings:
        text: Text = Text(f"  - {to_printable(meaning.definition)}")
        if meaning.translation is not None:
            text.add(
                Colorized(f" | {to_printable(meaning.translation)}", "#888888")
            )
        result.append(text)

    return result


def search_to_text(entry: DictionaryEntry | None, word: str) -> list[Element]:
    """Get search result or not found message."""

    if entry is None:
        return [Text(f"Word not found: {word}")]
    return entry_to_text(entry)


def dictionary_to_text(dictionary: Dictionary) -> list[Element]:
    """Get all dictionary entries sorted by key."""

    result: list[Element] = [Text(SORTED_HEADER)]
    for entry in dictionary.list_all():
        result.extend(entry_to_text(entry))

    return result


def statistics_to_table(dictionary: Dictionary) -> Table:
    """Get hash table statistics."""

    chain_lengths: list[int] = dictionary.get_chain_lengths()
    return Table(
        ["Parameter", "Value"],
        [
            ["Entries", str(len(dictionary))],
            ["Meanings", str(dictionary.get_meaning_count())],
            ["Buckets", str(dictionary.capacity)],
            ["Empty buckets", str(chain_lengths.count(0))],
            ["Longest chain", str(max(chain_lengths))],
            ["Load factor", f"{dictionary.get_load_factor():.2f}"],
        ],
    )
