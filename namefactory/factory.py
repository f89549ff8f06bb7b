"""
A name factory produces a sequence of fresh names, one at a time. This module
describes the common interface and provides some simple implementations that
are useful as fallbacks for other factories.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from string import ascii_lowercase, ascii_uppercase


class NameFactory(ABC):
    """
    This is the interface that name factories must follow: they produce names
    on request, never handing out the same name twice until they are reset.
    """

    @abstractmethod
    def reset(self) -> None:
        """
        Restart the sequence of names from the beginning.
        """
        return NotImplemented

    @abstractmethod
    def next_name(self) -> str:
        """
        Produce the next name in the sequence.
        """
        return NotImplemented

    def names(self, n: int) -> list[str]:
        """
        Convenience method to produce the next `n` names at once.
        """
        return [self.next_name() for _ in range(n)]


class SimpleNameFactory(NameFactory):
    """
    Generates names like `a`, `b`, ..., `z`, `A`, ..., `Z`, `aa`, `ab`, etc.
    When mixed case is disabled, only lower case letters are used, so that
    the names are also safe on case-insensitive file systems.
    """

    # Names are cached per character set and shared between all instances.
    # The cache only grows, and is not safe for concurrent use from several
    # threads.
    cache: dict[str, list[str]] = {}

    def __init__(self, mixed_case: bool = True):
        self.chars = ascii_lowercase + ascii_uppercase if mixed_case \
            else ascii_lowercase
        self.cached = SimpleNameFactory.cache.setdefault(self.chars, [])
        self.index = 0

    def reset(self) -> None:
        self.index = 0

    def next_name(self) -> str:
        name = self.name(self.index)
        self.index += 1
        return name

    def name(self, index: int) -> str:
        while len(self.cached) <= index:
            self.cached.append(self.new_name(len(self.cached)))
        return self.cached[index]

    def new_name(self, index: int) -> str:
        base = len(self.chars)
        if index < base:
            return self.chars[index]
        return self.name(index // base - 1) + self.chars[index % base]


class NumericNameFactory(NameFactory):
    """
    Generates the names `1`, `2`, `3`, etc.
    """

    def __init__(self) -> None:
        self.index = 0

    def reset(self) -> None:
        self.index = 0

    def next_name(self) -> str:
        self.index += 1
        return str(self.index)


class PrefixingNameFactory(NameFactory):
    """
    Wraps another factory and prepends a fixed prefix to all of its names.
    """

    def __init__(self, name_factory: NameFactory, prefix: str):
        self.name_factory = name_factory
        self.prefix = prefix

    def reset(self) -> None:
        self.name_factory.reset()

    def next_name(self) -> str:
        return self.prefix + self.name_factory.next_name()
