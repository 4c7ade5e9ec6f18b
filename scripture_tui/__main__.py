"""Entry point for scripture-tui."""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console

from scripture_tui.config import Config, get_config
from scripture_tui.data.canon import CorpusError, list_books, load_corpus
from scripture_tui.lookup import lookup

logger = logging.getLogger(__name__)

REFERENCE_HELP = """\
reference:
  <Book>                                   individual book
  <Book>:<Chapter>                         individual chapter of a book
  <Book>:<Chapter>:<Verse>[,<Verse>]...    individual verse(s) of a chapter
  <Book>:<Chapter>-<Chapter>               range of chapters in a book
  <Book>:<Chapter>:<Verse>-<Verse>         range of verses in a chapter
  <Book>:<Chapter>:<Verse>-<Chapter>:<Verse>
                                           range of chapters and verses
  /<Search>                                all verses that match a pattern
  <Book>/<Search>                          matching verses in a book
  <Book>:<Chapter>/<Search>                matching verses in a chapter
"""


def _non_negative(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="scripture-tui",
        description="Read scripture from your terminal.",
        epilog=REFERENCE_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-A", dest="after", type=_non_negative, metavar="NUM",
                        help="number of verses of context after matching verses")
    parser.add_argument("-B", dest="before", type=_non_negative, metavar="NUM",
                        help="number of verses of context before matching verses")
    parser.add_argument("-C", dest="chapter", action="store_true",
                        help="show matching verses in context of the chapter")
    parser.add_argument("-l", dest="list_books", action="store_true", help="list books")
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="open the interactive reader, showing REFERENCE first")
    parser.add_argument("-w", "--width", type=int, metavar="COLS",
                        help="maximum line width (default: terminal width)")
    parser.add_argument("--corpus", metavar="PATH", help="corpus JSON file")
    parser.add_argument("--no-pager", action="store_true", help="write to stdout without paging")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("reference", nargs="*", help="reference to look up")
    return parser


def apply_args(config: Config, args: argparse.Namespace, console_width: int) -> Config:
    """Override config values with command line flags."""
    if args.after is not None:
        config.context_after = args.after
    if args.before is not None:
        config.context_before = args.before
    if args.chapter:
        config.whole_chapter = True
    if args.corpus:
        config.corpus_path = args.corpus
    if args.no_pager:
        config.use_pager = False
    config.max_line_width = args.width or config.max_line_width or console_width
    return config


def print_lines(console: Console, lines, use_pager: bool) -> None:
    """Write rendered lines, through the pager when attached to a terminal."""
    if use_pager and console.is_terminal:
        with console.pager(styles=True):
            for line in lines:
                console.print(line, soft_wrap=True)
    else:
        for line in lines:
            console.print(line, soft_wrap=True)


def main(argv: Optional[List[str]] = None) -> int:
    """Run scripture-tui."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    console = Console(highlight=False)
    config = apply_args(get_config(), args, console.width)
    try:
        config.validate()
    except ValueError as exc:
        parser.error(str(exc))

    try:
        corpus = load_corpus(config.corpus_path)
    except (CorpusError, OSError) as exc:
        print(f"scripture-tui: {exc}", file=sys.stderr)
        return 1

    if args.list_books:
        for line in list_books(corpus):
            print(line)
        return 0

    reference = " ".join(args.reference)
    if args.interactive or not reference:
        from scripture_tui.app import ReaderApp

        ReaderApp(corpus, config, reference).run()
        return 0

    result = lookup(reference, corpus, config)
    if result.success:
        print_lines(console, result.lines, config.use_pager)
    elif result.query is None:
        print(f"scripture-tui: {result.message}", file=sys.stderr)
    else:
        print(result.message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
