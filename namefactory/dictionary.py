"""
Provides the `DictionaryNameFactory`, which generates names made up of the
characters found in a dictionary.
"""

from __future__ import annotations

import logging
from random import Random

from namefactory.alphabet import Alphabet, extract_alphabet, encode
from namefactory.factory import NameFactory
from namefactory.source import Source, DictionaryError, open_source

log = logging.getLogger(__name__)


class DictionaryNameFactory(NameFactory):
    """
    Generates names from the characters of a dictionary. All identifier
    characters of the dictionary are collected into an alphabet in random
    order, and names are produced by counting in that alphabet. Since there
    are infinitely many such names, the fallback factory is never asked for a
    name; it is only reset along with this one.
    """

    def __init__(self, source: Source | DictionaryNameFactory,
            name_factory: NameFactory,
            valid_identifiers_only: bool = True,
            random: Random | None = None,
            encoding: str = "utf-8"):
        """
        The source can be a URL, a file path or an open text stream, which
        will be closed once it is read. It can also be another dictionary
        name factory, in which case its alphabet is reused, but not its
        position in the sequence of names.
        """
        if name_factory is None:
            raise TypeError("a fallback name factory is required")

        self.name_factory = name_factory
        self.index = 0
        self.alphabet: Alphabet

        if isinstance(source, DictionaryNameFactory):
            self.alphabet = source.alphabet
            return

        reader = open_source(source, encoding)
        try:
            self.alphabet = extract_alphabet(reader,
                valid_identifiers_only=valid_identifiers_only, random=random)
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryError(source) from e

    def reset(self) -> None:
        log.debug("Resetting dictionary name factory at index %d", self.index)
        self.index = 0
        self.name_factory.reset()

    def next_name(self) -> str:
        name = encode(self.alphabet, self.index)
        self.index += 1
        return name
