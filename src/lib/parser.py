"""
Parser for {{#webinclude <url> [<span>]}} arguments

Turns the argument payload of a directive token into a typed Directive.

Span mini-language (line numbers are 1-based and inclusive on input,
converted to 0-based half-open ranges):

    (none)      whole file                  Full()
    5           line 5 only                 Bounded(4, 5)
    2:4         lines 2 to 4                Bounded(1, 4)
    :3          lines 1 to 3                To(3)
    2:          line 2 to end               From(1)
    intro       ANCHOR: intro block         AnchorSelection("intro")

Example:
    >>> includePath_parse("https://example.com/lib.rs 2:4")
    WebInclude(url='https://example.com/lib.rs', selection=RangeSelection(line_range=Bounded(start=1, end=4)))
"""

import re
from typing import Optional
from urllib.parse import urlsplit

from ..models.directives import (
    AnchorSelection,
    Bounded,
    Directive,
    Escaped,
    From,
    Full,
    RangeSelection,
    Selection,
    To,
    WebInclude,
)
from ..models.parser import LinkMatch
from .errors import MalformedURLError

SCHEME_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9+.-]*")
LINE_NUMBER_PATTERN = re.compile(r"[0-9]+")


def lineNumber_parse(value: Optional[str]) -> Optional[int]:
    """
    Parse an unsigned decimal line number

    Unlike int(), rejects signs, whitespace and underscores.

    Args:
        value: Field text, possibly None

    Returns:
        Integer value, or None if value is not a plain digit run
    """
    if value is None or not LINE_NUMBER_PATTERN.fullmatch(value):
        return None
    return int(value)


def url_validate(url: str) -> str:
    """
    Check that url is absolute

    Requires a scheme and either a network location or a path, the same
    shape a URL parser accepts for http(s), file or data URLs.

    Args:
        url: Candidate URL

    Returns:
        url unchanged

    Raises:
        MalformedURLError: If url is relative or unparseable
    """
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise MalformedURLError(url) from e

    if not parts.scheme or not SCHEME_PATTERN.fullmatch(parts.scheme):
        raise MalformedURLError(url)
    if not (parts.netloc or parts.path):
        raise MalformedURLError(url)
    if parts.scheme.lower() in ("http", "https") and not parts.netloc:
        raise MalformedURLError(url)
    return url


def span_parse(span: Optional[str]) -> Selection:
    """
    Parse the optional span following the URL

    Only the first two ':' fields are consulted; a third is ignored. A
    first field that is neither empty nor a number names an anchor.

    Args:
        span: Span text, or None when the directive has no span

    Returns:
        RangeSelection or AnchorSelection
    """
    parts = (span or "").split(":", 2)

    first = parts[0]
    start_number = lineNumber_parse(first)
    if start_number is not None:
        # line numbers start at 1
        start: Optional[int] = max(start_number - 1, 0)
    elif first == "":
        start = None
    else:
        return AnchorSelection(first)

    has_end = len(parts) > 1
    end = lineNumber_parse(parts[1]) if has_end else None

    if start is not None:
        if not has_end:
            return RangeSelection(Bounded(start, start + 1))
        if end is not None:
            return RangeSelection(Bounded(start, end))
        return RangeSelection(From(start))

    if end is not None:
        return RangeSelection(To(end))
    return RangeSelection(Full())


def includePath_parse(args: str) -> WebInclude:
    """
    Parse a webinclude argument payload

    The target runs up to the first whitespace; anything after it is the
    span (surrounding whitespace stripped).

    Args:
        args: Payload between the directive kind and the closing }}

    Returns:
        WebInclude directive

    Raises:
        MalformedURLError: If the target is not an absolute URL
    """
    pieces = re.split(r"\s", args, maxsplit=1)
    url = url_validate(pieces[0])
    span = pieces[1].strip() if len(pieces) > 1 else None
    return WebInclude(url=url, selection=span_parse(span))


def link_parse(link: LinkMatch) -> Directive:
    """
    Parse a token located by the tokenizer

    Args:
        link: LinkMatch from links_find()

    Returns:
        Escaped for escaped tokens, WebInclude otherwise

    Raises:
        MalformedURLError: If the target is not an absolute URL
    """
    if link.kind is None:
        return Escaped()
    return includePath_parse(link.args or "")
