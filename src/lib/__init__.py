"""
webinclude - Recursive remote include preprocessor

Expands {{#webinclude <url> [<span>]}} directives in text documents.
"""

__version__ = "1.0.0"

from .expander import Expander, replace_all
from .extract import anchor_extract, range_extract
from .lexer import links_find
from .parser import includePath_parse, span_parse
from .log import LOG, state_connectToLogger

__all__ = [
    "Expander",
    "replace_all",
    "anchor_extract",
    "range_extract",
    "links_find",
    "includePath_parse",
    "span_parse",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
