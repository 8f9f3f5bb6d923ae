"""Interface for ``python -m formtree``."""

from __future__ import annotations

import sys
from argparse import ArgumentParser
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Sequence

from ._version import version
from .errors import ParseError
from .sources import JsonSource, QuerySource


__all__ = ["main"]


def main(args: Sequence[str] | None = None) -> None:
    """Materialize a query string or JSON body and print it as JSON."""
    parser = ArgumentParser(prog="formtree")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("--json", action="store_true", help="treat INPUT as a JSON body")
    _ = parser.add_argument("--indent", type=int, default=None, help="indent the JSON output")
    _ = parser.add_argument("input", nargs="?", default="-", help="query string, or - to read stdin")
    options = parser.parse_args(args)

    raw = sys.stdin.read() if options.input == "-" else options.input
    try:
        source = JsonSource(raw) if options.json else QuerySource(raw.strip())
    except ParseError as error:
        parser.error(str(error))

    _ = sys.stdout.write(source.to_json(indent=options.indent) + "\n")


if __name__ == "__main__":
    main()
