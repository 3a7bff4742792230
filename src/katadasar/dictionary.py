"""
This module contains the root word dictionary used to validate stems.
"""

import threading
from typing import Iterable, Iterator, Protocol


class Dictionary(Protocol):
    """
    Word membership oracle consulted by the stemmer.
    """

    def contains(self, word: str) -> bool:
        ...

    def add(self, word: str) -> None:
        ...


class ArrayDictionary:
    """
    In-memory root word dictionary.

    Reads are plain set lookups; writes are serialized so that the
    dictionary can be shared by stemmers running in several threads.
    """

    def __init__(self, words: Iterable[str] = ()):
        self._words: set[str] = set()
        self._lock = threading.Lock()
        for word in words:
            self.add(word)

    @classmethod
    def from_file(cls, filepath: str) -> "ArrayDictionary":
        """
        Load a dictionary from a text file containing one word per line.
        """

        err_msg = "{} is missing. It seems that your installation is corrupted"
        try:
            with open(filepath, "r", encoding="utf-8") as file:
                words = [w.strip().lower() for w in file.read().split("\n")]
        except FileNotFoundError:
            raise RuntimeError(err_msg.format(filepath)) from None

        return cls(w for w in words if w)

    def contains(self, word: str) -> bool:
        return word in self._words

    def add(self, word: str) -> None:
        """
        Add word to the dictionary. Adding an existing word does nothing.
        """
        if not word:
            return
        with self._lock:
            self._words.add(word)

    def remove(self, word: str) -> None:
        with self._lock:
            self._words.discard(word)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            words = sorted(self._words)
        return iter(words)
