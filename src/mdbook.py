"""
mdBook preprocessor host

Implements the mdBook preprocessor protocol so webinclude can run inside
`mdbook build`:

    [preprocessor.webinclude]
    command = "mdbook-webinclude"

    [preprocessor.webinclude.headers]
    Authorization = "token abc"

mdBook first calls `mdbook-webinclude supports <renderer>`, then pipes
`[context, book]` JSON to stdin and reads the processed book from stdout.
Every chapter's content is one content unit.
"""

import json
import sys
from argparse import ArgumentParser
from typing import Any, Dict, List, Optional

from .config import appsettings
from .lib import Expander, __version__
from .lib.errors import WebIncludeError
from .lib.headers import headers_fromBookConfig
from .lib.log import LOG


def parser_make() -> ArgumentParser:
    """Command line for the preprocessor and its supports subcommand"""
    parser = ArgumentParser(
        prog="mdbook-webinclude",
        description="mdBook preprocessor expanding {{#webinclude}} directives",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command")
    supports = subparsers.add_parser("supports", help="Check whether a renderer is supported")
    supports.add_argument("renderer", type=str)
    return parser


def renderer_supports(renderer: str) -> bool:
    """Every renderer is supported: expansion only rewrites markdown"""
    return True


def items_expand(items: List[Any], expander: Expander) -> int:
    """
    Expand chapter content in place, recursing into sub_items

    Args:
        items: Book items (Chapter, Separator, PartTitle)
        expander: Expander for the run

    Returns:
        Number of chapters expanded
    """
    count = 0
    for item in items:
        if not isinstance(item, dict) or "Chapter" not in item:
            continue
        chapter = item["Chapter"]
        LOG(f"Expanding chapter {chapter.get('name', '?')}", level=2)
        chapter["content"] = expander.expand(chapter.get("content", ""))
        count += 1 + items_expand(chapter.get("sub_items", []), expander)
    return count


def book_process(
    context: Dict[str, Any], book: Dict[str, Any], expander: Optional[Expander] = None
) -> Dict[str, Any]:
    """
    Expand every chapter of an mdBook book

    Args:
        context: Preprocessor context (holds the book configuration)
        book: Book JSON object, modified in place
        expander: Expander to use; built from the context headers if None

    Returns:
        The processed book
    """
    if expander is None:
        headers = headers_fromBookConfig(context.get("config"), appsettings.preprocessor_name)
        expander = Expander(headers=headers)

    # mdBook < 0.5 calls the top-level list "sections", newer versions "items"
    key = "items" if "items" in book else "sections"
    count = items_expand(book.get(key, []), expander)
    LOG(f"Expanded {count} chapter(s)", level=1)
    return book


def main(argv: Optional[List[str]] = None) -> int:
    """
    Answer a supports query, or read [context, book] JSON from stdin
    and write the expanded book to stdout.
    """
    options = parser_make().parse_args(argv)

    if options.command == "supports":
        return 0 if renderer_supports(options.renderer) else 1

    context, book = json.load(sys.stdin)
    try:
        book = book_process(context, book)
    except WebIncludeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    json.dump(book, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
