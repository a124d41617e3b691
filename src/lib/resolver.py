"""
Resource resolution for directive tokens

Turns one LinkMatch into its replacement text: escaped tokens lose their
backslash, webinclude tokens are fetched and narrowed to their selection.
"""

from typing import Callable, Mapping, Optional

from ..models.directives import (
    AnchorSelection,
    Escaped,
    RangeSelection,
    Selection,
    WebInclude,
)
from ..models.parser import LinkMatch
from .errors import FetchTransportError, NonUTF8BodyError, ResolveError
from .extract import anchor_extract, range_extract
from .fetch import url_fetch

FetchFn = Callable[[str, Mapping[str, str]], str]


def selection_apply(body: str, selection: Selection) -> str:
    """Narrow a fetched body to the selected lines"""
    if isinstance(selection, RangeSelection):
        return range_extract(body, selection.line_range)
    if isinstance(selection, AnchorSelection):
        return anchor_extract(body, selection.name)
    raise TypeError(f"Unknown selection: {selection!r}")


def link_render(
    link: LinkMatch,
    headers: Optional[Mapping[str, str]] = None,
    fetch: FetchFn = url_fetch,
) -> str:
    """
    Produce the replacement text for a directive token

    Args:
        link: Token located by links_find()
        headers: Header table attached to every fetch
        fetch: Fetch collaborator (url, headers) -> body

    Returns:
        Replacement text (not yet re-expanded)

    Raises:
        ResolveError: Fetch failed, chained to the FetchError
        MalformedURLError: Directive target is not an absolute URL
    """
    directive = link.directive

    if isinstance(directive, Escaped):
        # omit the escape char
        return link.link_text[1:]

    if isinstance(directive, WebInclude):
        url = directive.url
        try:
            body = fetch(url, headers or {})
        except FetchTransportError as e:
            raise ResolveError(f"Could not query URL {url} ({link.link_text})") from e
        except NonUTF8BodyError as e:
            raise ResolveError(f"Expected UTF-8 in {url} ({link.link_text})") from e
        return selection_apply(body, directive.selection)

    raise TypeError(f"Unknown directive: {directive!r}")
