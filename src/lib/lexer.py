r"""
Directive tokenizer for {{#webinclude ...}} syntax

Scans raw text for two token shapes, leftmost first, never overlapping:

- Escaped token: a backslash before {{#...}}, ending at the first }} on
  the same line. Rendered literally without the backslash.
- Directive token: {{, optional whitespace, #kind, whitespace, an argument
  payload without closing braces, }}.

Only the "webinclude" kind is yielded; other kinds ({{#include ...}},
{{#playground ...}}) are consumed by the scan and skipped so that other
preprocessors still see them.

Example:
    >>> [m.link_text for m in links_find("a {{#webinclude http://x 2}} b")]
    ['{{#webinclude http://x 2}}']
"""

import re
from typing import Iterator, Optional

from ..models.directives import DIRECTIVE_KIND, ESCAPE_CHAR
from ..models.parser import LinkMatch

# Compiled once at import; shared read-only by every scan
LINK_PATTERN = re.compile(
    r"""
    \\\{\{\#.*?\}\}         # escaped link
    |                       # or
    \{\{\s*                 # link opening parens and whitespace
    \#([a-zA-Z0-9_]+)       # link type
    \s+                     # separating whitespace
    ([^}]+)                 # link target and space separated span
    \}\}                    # link closing parens
    """,
    re.VERBOSE,
)


def link_fromMatch(match: "re.Match[str]") -> Optional[LinkMatch]:
    """
    Build a LinkMatch from a pattern match

    Args:
        match: Match of LINK_PATTERN

    Returns:
        LinkMatch for escaped and webinclude tokens, None for other kinds
    """
    kind, args = match.group(1), match.group(2)
    text = match.group(0)

    if kind is None:
        if not text.startswith(ESCAPE_CHAR):
            return None
    elif kind != DIRECTIVE_KIND:
        return None

    return LinkMatch(
        start_index=match.start(),
        end_index=match.end(),
        kind=kind,
        args=args,
        link_text=text,
    )


def links_find(contents: str) -> Iterator[LinkMatch]:
    """
    Lazily yield directive tokens in document order

    Args:
        contents: Text to scan

    Yields:
        LinkMatch for every escaped or webinclude token
    """
    for match in LINK_PATTERN.finditer(contents):
        link = link_fromMatch(match)
        if link is not None:
            yield link
