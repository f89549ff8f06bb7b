"""
This module handles the alphabet of a dictionary: the characters that are
used as digits when turning a counter into a name. It extracts such an
alphabet from a stream of text, and encodes numbers over it.
"""

from __future__ import annotations

import logging
import random as _random
from string import ascii_lowercase
from typing import Iterable, TextIO

log = logging.getLogger(__name__)

LINE_TERMINATORS = "\n\r"


class Alphabet(tuple):
    """
    An immutable, ordered sequence of distinct characters. Since it cannot be
    changed after the fact, the same alphabet can be shared by any number of
    name factories.
    """

    def __new__(cls, chars: Iterable[str]):
        self = super().__new__(cls, chars)
        if not self:
            raise ValueError("an alphabet needs at least one character")
        if len(set(self)) != len(self):
            raise ValueError("an alphabet cannot contain duplicates")
        if not all(isinstance(c, str) and len(c) == 1 for c in self):
            raise ValueError("an alphabet must consist of single characters")
        return self

    def __str__(self) -> str:
        return "".join(self)

    def __repr__(self) -> str:
        return f"Alphabet({str(self)!r})"


DEFAULT_ALPHABET = Alphabet(ascii_lowercase)


def is_eligible(char: str, valid_identifiers_only: bool = True) -> bool:
    """
    Determine whether a character may occur in generated names. A single
    character that is a valid identifier is both a valid start and a valid
    continuation of one.
    """
    # Comment markers and whatever punctuation follows them are filtered out
    # just like any other non-identifier character
    return char not in LINE_TERMINATORS \
        and (char.isidentifier() or not valid_identifiers_only)


def extract_alphabet(reader: TextIO,
        valid_identifiers_only: bool = True,
        random: _random.Random | None = None) -> Alphabet:
    """
    Read a stream of text to the end and collect its eligible characters into
    a shuffled alphabet. The stream is closed afterwards, even if reading
    fails. If there are no eligible characters at all, the lowercase latin
    letters are used, in order.
    """
    chars: set[str] = set()
    with reader:
        while c := reader.read(1):
            if is_eligible(c, valid_identifiers_only):
                chars.add(c)

    if not chars:
        log.debug("No eligible characters in dictionary; using a-z")
        return DEFAULT_ALPHABET

    # Sort first, so that a seeded random source gives reproducible results
    # regardless of set iteration order
    ordered = sorted(chars)
    (random or _random).shuffle(ordered)
    log.debug("Extracted alphabet of %d characters", len(ordered))
    return Alphabet(ordered)


def encode(alphabet: Alphabet, index: int) -> str:
    """
    Convert a non-negative number to a name, using the bijective numeral
    system whose digits are the characters of the alphabet. The least
    significant digit comes first. Every string over the alphabet corresponds
    to exactly one number, so names never repeat and are as short as they can
    be.
    """
    if index < 0:
        raise ValueError(f"cannot encode negative index {index}")

    base = len(alphabet)
    digits = []
    value = index + 1
    while value > 0:
        value, digit = divmod(value - 1, base)
        digits.append(alphabet[digit])
    return "".join(digits)
