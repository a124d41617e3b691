"""
Models package for webinclude

Contains data structures and type definitions for the expansion pipeline.
"""

from .state import ProgramState, pipeline
from .directives import (
    AnchorSelection,
    Bounded,
    Directive,
    DIRECTIVE_KIND,
    ESCAPE_CHAR,
    Escaped,
    From,
    Full,
    LineRange,
    RangeSelection,
    Selection,
    To,
    WebInclude,
)
from .parser import LinkMatch

__all__ = [
    "ProgramState",
    "pipeline",
    "AnchorSelection",
    "Bounded",
    "Directive",
    "DIRECTIVE_KIND",
    "ESCAPE_CHAR",
    "Escaped",
    "From",
    "Full",
    "LineRange",
    "RangeSelection",
    "Selection",
    "To",
    "WebInclude",
    "LinkMatch",
]
