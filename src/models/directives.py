"""
Directive, selection and line range models

Closed sets of immutable variants describing what a {{#webinclude}} token
asks for. Consumers dispatch over the variants with isinstance() and treat
anything else as a programming error.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Bounded:
    """Lines [start, end) - an inverted range selects nothing"""
    start: int
    end: int


@dataclass(frozen=True)
class From:
    """Lines [start, ...)"""
    start: int


@dataclass(frozen=True)
class To:
    """Lines [0, end)"""
    end: int


@dataclass(frozen=True)
class Full:
    """Every line"""


LineRange = Union[Bounded, From, To, Full]


@dataclass(frozen=True)
class RangeSelection:
    """
    Select a range of lines from the fetched body

    Attributes:
        line_range: 0-based line range (end exclusive)
    """
    line_range: LineRange


@dataclass(frozen=True)
class AnchorSelection:
    """
    Select the lines between ANCHOR: name and ANCHOR_END: name

    Attributes:
        name: Anchor name as written in the span
    """
    name: str


Selection = Union[RangeSelection, AnchorSelection]


@dataclass(frozen=True)
class Escaped:
    r"""A backslash-escaped token (\{{#...}}) rendered literally"""


@dataclass(frozen=True)
class WebInclude:
    """
    Include (part of) a remote resource

    Attributes:
        url: Absolute URL to fetch
        selection: Which part of the body to keep

    Example:
        {{#webinclude https://example.com/a.rs 2:4}} ->
        WebInclude(url="https://example.com/a.rs",
                   selection=RangeSelection(Bounded(1, 4)))
    """
    url: str
    selection: Selection


Directive = Union[Escaped, WebInclude]


# Directive kind owned by this preprocessor; other {{#kind ...}} tokens are left alone
DIRECTIVE_KIND: str = "webinclude"

ESCAPE_CHAR: str = "\\"
