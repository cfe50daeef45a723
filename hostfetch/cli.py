#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.text import Text

from . import __version__
from .fetcher import Fetcher


def build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Exposes:
      -c / --color   : style labels with rich (terminal only)
      -v / --verbose : debug logging to stderr (shows swallowed host-query failures)
      -V / --version : print the version and exit
    """
    p = argparse.ArgumentParser(
        prog="hostfetch",
        description="Print a short summary of this host: user, OS, kernel, engine, uptime, CPU and memory.",
    )
    p.add_argument(
        "-c", "--color",
        action="store_true",
        help="Colorize labels when writing to a terminal.",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log host-query failures to stderr.",
    )
    p.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s | %(name)s: %(message)s",
            handlers=[logging.StreamHandler(sys.stderr)],
        )


def styled_lines(lines: List[str]) -> List[Text]:
    """Identity line highlighted, 'Label: ' prefixes bold, everything else plain."""
    out: List[Text] = []
    for i, line in enumerate(lines):
        if i == 0:
            out.append(Text(line, style="bold cyan"))
            continue
        label, sep, value = line.partition(": ")
        if sep:
            t = Text()
            t.append(label + sep, style="bold blue")
            t.append(value)
            out.append(t)
        else:
            out.append(Text(line))
    return out


def render(fetcher: Fetcher, color: bool = False) -> None:
    if not color:
        print(fetcher.fetch())
        return
    console = Console(highlight=False, soft_wrap=True)
    if not console.is_terminal:
        print(fetcher.fetch())
        return
    for text in styled_lines(fetcher.lines()):
        console.print(text)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Console entrypoint used by the `hostfetch` script and `python -m hostfetch`.
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        render(Fetcher(), color=args.color)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
