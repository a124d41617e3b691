"""
Scanner-specific data models

Type-safe structures for tokenizer output.
"""

from dataclasses import dataclass
from typing import Optional

from .directives import Directive


@dataclass
class LinkMatch:
    """
    A directive token located in source text

    Yielded by links_find() for every escaped or webinclude token. Lives only
    for one scan pass.

    Attributes:
        start_index: Offset of the first character of the token
        end_index: Offset just past the closing }}
        kind: Directive kind ("webinclude"), None for escaped tokens
        args: Argument payload between the kind and the closing }}
        link_text: The literal token text, used as fallback output

    Example:
        For source "see {{#webinclude http://x 2}}" :
        LinkMatch(start_index=4, end_index=30, kind="webinclude",
                  args="http://x 2", link_text="{{#webinclude http://x 2}}")
    """
    start_index: int
    end_index: int
    kind: Optional[str]
    args: Optional[str]
    link_text: str

    @property
    def directive(self) -> Directive:
        """
        Parsed directive for this token

        Parsing happens on access so that a malformed URL raises inside the
        caller's per-directive error handling rather than during the scan.

        Raises:
            MalformedURLError: If the target is not an absolute URL
        """
        from ..lib.parser import link_parse
        return link_parse(self)
