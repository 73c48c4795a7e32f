"""Dictionary: hash table of words and their meanings.

Dictionary: fixed number of buckets.
  - Bucket: chain of dictionary entries whose keys hash to the bucket.
      - Dictionary entry: unique word (or word pair) being defined.
          - Meanings: definitions of the word, the newest one first.

The number of buckets is fixed when the dictionary is created.  Collisions
are resolved by linear scan of the chain, so the expected chain length grows
with the load factor.
"""

import logging
from collections import deque
from dataclasses import dataclass
from types import TracebackType
from typing import Self
from typing_extensions import override

from wordbook.errors import AllocationExhaustedError, DictionaryDestroyedError
from wordbook.language import Language

__author__ = "Sergey Vartanov"
__email__ = "me@enzet.ru"


DEFAULT_CAPACITY: int = 100
HASH_MULTIPLIER: int = 31
HASH_MASK: int = 0xFFFFFFFF
PAIR_SEPARATOR: bytes = b"\x00"

Key = str | tuple[str, str]
"""Word, or pair of words for bilingual dictionaries."""

EncodedKey = tuple[bytes, ...]
"""Bytes of every word of the key."""


def key_to_text(key: Key) -> str:
    """Get human-readable key, words of a pair are separated by a slash."""
    if isinstance(key, tuple):
        return " / ".join(to_printable(word) for word in key)
    return to_printable(key)


def encode_text(text: str) -> bytes:
    """Get UTF-8 bytes of the text, surrogates become the original bytes."""
    return text.encode("utf-8", "surrogateescape")


def to_printable(text: str) -> str:
    """Replace bytes that are not valid UTF-8 with replacement characters."""
    return encode_text(text).decode("utf-8", "replace")


def hash_key(data: bytes, capacity: int) -> int:
    """Get bucket index for the key bytes.

    The accumulator wraps around as a 32-bit unsigned integer.  Bytes are
    added as unsigned values from 0 to 255.

    :param data: UTF-8 encoded key, words of a pair are joined with a zero
        byte
    :param capacity: number of buckets
    :return: index of the bucket in `[0, capacity)`
    """
    result: int = 0
    for byte in data:
        result = (result * HASH_MULTIPLIER + byte) & HASH_MASK

    return result % capacity


@dataclass
class Meaning:
    """One definition of a word."""

    definition: str
    """Text of the definition."""

    translation: str | None = None
    """Definition in the second language, only for bilingual dictionaries."""


@dataclass
class DictionaryEntry:
    """Record for one unique key and all its meanings."""

    key: Key
    """Word or word pair being defined."""

    encoded_key: EncodedKey
    """Key bytes used for hashing, comparison, and sorting."""

    meanings: deque[Meaning]
    """Meanings of the key, the most recently added first."""

    def get_key_text(self) -> str:
        """Get human-readable key."""
        return key_to_text(self.key)

    def get_definitions(self) -> list[str]:
        """Get definition texts, the most recently added first."""
        return [meaning.definition for meaning in self.meanings]


def find_entry(
    chain: deque[DictionaryEntry], encoded_key: EncodedKey
) -> DictionaryEntry | None:
    """Find the entry with exactly the same key bytes in the chain.

    Words are compared one by one, so a pair never matches another pair with
    the same concatenation.

    :param chain: bucket chain to scan
    :param encoded_key: bytes of the words to look for
    :return: entry or `None` if there is no such key in the chain
    """
    for entry in chain:
        if entry.encoded_key == encoded_key:
            return entry

    return None


class Dictionary:
    """Word dictionary with fixed number of buckets."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        """Create empty dictionary.

        :param capacity: number of buckets, must be positive
        """
        if capacity <= 0:
            raise ValueError(f"Capacity should be positive, not {capacity}.")

        self.capacity: int = capacity
        self.buckets: list[deque[DictionaryEntry]] | None = [
            deque() for _ in range(capacity)
        ]
        self.__size: int = 0

    def encode_key(self, key: Key) -> EncodedKey:
        """Get key bytes.

        Undecodable bytes read from datasets are kept as surrogates and are
        restored here, so the key bytes are the same as in the file.
        """
        if not isinstance(key, str):
            raise TypeError(f"Key should be a string, not `{key!r}`.")
        return (encode_text(key),)

    def get_chain(self, encoded_key: EncodedKey) -> deque[DictionaryEntry]:
        """Get the bucket chain the key belongs to."""
        return self.get_buckets()[
            hash_key(PAIR_SEPARATOR.join(encoded_key), self.capacity)
        ]

    def get_buckets(self) -> list[deque[DictionaryEntry]]:
        """Get buckets or fail if the dictionary is destroyed."""
        if self.buckets is None:
            raise DictionaryDestroyedError("Dictionary is destroyed.")
        return self.buckets

    def get_bucket_index(self, key: Key) -> int:
        """Get index of the bucket the key belongs to."""
        return hash_key(
            PAIR_SEPARATOR.join(self.encode_key(key)), self.capacity
        )

    def insert(self, key: str, definition: str) -> None:
        """Add a meaning for the word.

        If the word is already in the dictionary, the new meaning is placed
        before all previous ones.  Otherwise, a new entry is created at the
        head of the bucket chain.  Identical meanings are not merged.

        :param key: word to add meaning for
        :param definition: text of the definition
        :raises AllocationExhaustedError: if memory is exhausted, the
            dictionary is left unchanged
        """
        self._insert(key, definition, None)

    def _insert(
        self, key: Key, definition: str, translation: str | None
    ) -> None:
        encoded_key: EncodedKey = self.encode_key(key)
        chain: deque[DictionaryEntry] = self.get_chain(encoded_key)
        entry: DictionaryEntry | None = find_entry(chain, encoded_key)

        # Nothing is linked until all new objects are created.
        try:
            meaning: Meaning = Meaning(definition, translation)
            new_entry: DictionaryEntry | None = (
                None
                if entry is not None
                else DictionaryEntry(key, encoded_key, deque([meaning]))
            )
        except MemoryError as error:
            raise AllocationExhaustedError(
                f"Unable to insert meaning for `{key}`."
            ) from error

        if entry is not None:
            entry.meanings.appendleft(meaning)
        else:
            chain.appendleft(new_entry)
            self.__size += 1

    def search(self, key: Key) -> DictionaryEntry | None:
        """Get the entry for the key.

        :param key: word to look for
        :return: entry with all meanings or `None` if the key is not found
        """
        encoded_key: EncodedKey = self.encode_key(key)
        return find_entry(self.get_chain(encoded_key), encoded_key)

    def __contains__(self, key: Key) -> bool:
        return self.search(key) is not None

    def __len__(self) -> int:
        return self.__size

    def list_all(self) -> list[DictionaryEntry]:
        """Get all entries sorted by key bytes."""

        entries: list[DictionaryEntry] = [
            entry for chain in self.get_buckets() for entry in chain
        ]
        return sorted(entries, key=lambda entry: entry.encoded_key)

    def get_meaning_count(self) -> int:
        """Get total number of meanings of all entries."""
        return sum(
            len(entry.meanings)
            for chain in self.get_buckets()
            for entry in chain
        )

    def get_load_factor(self) -> float:
        """Get ratio of the number of entries to the number of buckets."""
        self.get_buckets()
        return self.__size / self.capacity

    def get_chain_lengths(self) -> list[int]:
        """Get number of entries in each bucket."""
        return [len(chain) for chain in self.get_buckets()]

    def is_destroyed(self) -> bool:
        """Check whether the dictionary was destroyed."""
        return self.buckets is None

    def destroy(self) -> tuple[int, int]:
        """Release all meanings, then all entries, then buckets.

        :return: number of released entries and number of released meanings
        """
        buckets: list[deque[DictionaryEntry]] = self.get_buckets()
        entry_count: int = 0
        meaning_count: int = 0

        for chain in buckets:
            while chain:
                entry: DictionaryEntry = chain.popleft()
                while entry.meanings:
                    entry.meanings.popleft()
                    meaning_count += 1
                entry_count += 1

        self.buckets = None
        self.__size = 0

        logging.debug(
            "Dictionary destroyed: %d entries, %d meanings released.",
            entry_count,
            meaning_count,
        )
        return entry_count, meaning_count

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exception_type: type[BaseException] | None,
        exception: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        if not self.is_destroyed():
            self.destroy()


class BilingualDictionary(Dictionary):
    """Dictionary of word pairs with definitions in two languages."""

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        from_language: Language | None = None,
        to_language: Language | None = None,
    ) -> None:
        """Create empty bilingual dictionary.

        :param capacity: number of buckets, must be positive
        :param from_language: language of the first word and definition
        :param to_language: language of the second word and definition
        """
        super().__init__(capacity)
        self.from_language: Language | None = from_language
        self.to_language: Language | None = to_language

    @override
    def encode_key(self, key: Key) -> EncodedKey:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"Key should be a pair of words, not `{key!r}`.")
        return tuple(encode_text(word) for word in key)

    def insert(  # type: ignore[override]
        self, key: tuple[str, str], definition: str, translation: str
    ) -> None:
        """Add a meaning for the word pair.

        :param key: word and its counterpart in the second language
        :param definition: definition in the first language
        :param translation: definition in the second language
        :raises AllocationExhaustedError: if memory is exhausted, the
            dictionary is left unchanged
        """
        self._insert(key, definition, translation)
