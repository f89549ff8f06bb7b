"""
Command-line interface for inspecting dictionaries.
"""

from __future__ import annotations

import sys
from random import Random
from typing import Iterable, TextIO

from plumbum import cli  # type: ignore
from namefactory.factory import SimpleNameFactory
from namefactory.dictionary import DictionaryNameFactory
from namefactory.source import DictionaryError
from namefactory.util.log import setup_logging


def write_utf8(lines: Iterable[str], file: TextIO | None = None) -> None:
    """
    Write lines to a text stream, encoded as UTF-8 no matter what the locale
    of the stream is.
    """
    file = file or sys.stdout
    text = "".join(f"{line}\n" for line in lines)
    buffer = getattr(file, "buffer", None)
    if buffer is None:
        file.write(text)
    else:
        file.flush()
        buffer.write(text.encode("utf-8"))
        buffer.flush()


class CLI(cli.Application):
    """
    A utility to inspect the names that a dictionary gives rise to
    """

    PROGNAME = "namefactory"

    @cli.switch(["-v", "--verbose"], help="Log debugging information")
    def _verbose(self):
        setup_logging("DEBUG")

    def main(self, *args):
        if args:
            print(f"Unknown command {args[0]}")
            return 1
        if not self.nested_command:
            self.help()
            return 1


@CLI.subcommand("sample")
class Sampler(cli.Application):
    """
    Print the first names generated from a dictionary file or URL, each
    between brackets
    """

    count = cli.SwitchAttr(["-n", "--count"], cli.Range(0, sys.maxsize),
        default=50, help="Number of names to print")
    seed = cli.SwitchAttr(["--seed"], int, default=None,
        help="Seed for shuffling the alphabet, for reproducible output")
    any_characters = cli.Flag(["--any-characters"], default=False,
        help="Also accept characters that cannot occur in identifiers")
    show_alphabet = cli.Flag(["--alphabet"], default=False,
        help="Print the extracted alphabet instead of names")

    def main(self, DICTIONARY) -> int:
        try:
            factory = DictionaryNameFactory(DICTIONARY, SimpleNameFactory(),
                valid_identifiers_only=not self.any_characters,
                random=None if self.seed is None else Random(self.seed))
        except DictionaryError as e:
            print(e, file=sys.stderr)
            return 1

        if self.show_alphabet:
            write_utf8([str(factory.alphabet)])
        else:
            write_utf8(f"[{name}]" for name in factory.names(self.count))
        return 0


def main():
    setup_logging()
    CLI.run()


if __name__ == '__main__':
    main()
