"""
Dictionaries can be read from files, from URLs or from streams that are
already open. This module turns any of those into a text stream.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import urlopen
from typing import BinaryIO, TextIO, Union

log = logging.getLogger(__name__)

Source = Union[str, Path, TextIO, BinaryIO]

URL_SCHEMES = ("http", "https", "ftp", "file")


def is_url(source: str) -> bool:
    return urlparse(source).scheme in URL_SCHEMES


def open_source(source: Source, encoding: str = "utf-8") -> TextIO:
    """
    Open a dictionary for reading. Strings are taken to be URLs if they have a
    recognized scheme, and file paths otherwise. Text streams are returned as
    they are, binary streams are decoded; whoever reads them is responsible
    for closing them.
    """
    if isinstance(source, (io.BufferedIOBase, io.RawIOBase)):
        return io.TextIOWrapper(source, encoding=encoding)
    if not isinstance(source, (str, Path)):
        return source

    try:
        if isinstance(source, str) and is_url(source):
            log.debug("Opening dictionary URL %s", source)
            with urlopen(source) as response:
                return io.StringIO(response.read().decode(encoding))
        else:
            log.debug("Opening dictionary file %s", source)
            return open(source, "r", encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryError(source) from e


# Errors #####################################################################

class DictionaryError(Exception):
    """
    Raised when a dictionary could not be opened or read.
    """

    def __init__(self, source: Source):
        self.source = source

    def __str__(self) -> str:
        assert self.__cause__, "must be caused by another error"
        return (
            f"Could not read dictionary '{self.source}': "
            f"\t{self.__cause__}"
        )
