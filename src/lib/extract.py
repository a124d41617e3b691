"""
Line range and anchor extraction

Selects the part of a fetched body that a directive asked for, either by
line range or by a named ANCHOR: / ANCHOR_END: block.

Example:
    >>> range_extract("a\\nb\\nc\\n", Bounded(1, 3))
    'b\\nc'
    >>> anchor_extract("x\\nANCHOR: foo\\nA\\nANCHOR_END: foo\\n", "foo")
    'A'
"""

import re
from typing import List

from ..models.directives import Bounded, From, Full, LineRange, To

# Compiled once at import; shared read-only by every extraction
ANCHOR_START = re.compile(r"ANCHOR:\s*(?P<anchor_name>[\w-]+)")
ANCHOR_END = re.compile(r"ANCHOR_END:\s*(?P<anchor_name>[\w-]+)")


def lines_split(text: str) -> List[str]:
    r"""
    Split text on newline characters

    A trailing newline does not produce an empty last line, and a trailing
    carriage return is dropped from each line (\r\n endings).

    Args:
        text: Text to split

    Returns:
        List of lines without terminators ([] for empty text)
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def range_extract(text: str, line_range: LineRange) -> str:
    """
    Take a range of lines from text

    Bounds past the end of the text are clamped; an inverted range yields
    an empty string. Never raises for a valid LineRange.

    Args:
        text: Full text
        line_range: 0-based range, end exclusive

    Returns:
        Selected lines joined with newlines
    """
    lines = lines_split(text)

    if isinstance(line_range, Bounded):
        selected = lines[line_range.start:line_range.end]
    elif isinstance(line_range, From):
        selected = lines[line_range.start:]
    elif isinstance(line_range, To):
        selected = lines[:line_range.end]
    elif isinstance(line_range, Full):
        selected = lines
    else:
        raise TypeError(f"Unknown line range: {line_range!r}")

    return "\n".join(selected)


def anchor_extract(text: str, anchor_name: str) -> str:
    """
    Take the lines between ANCHOR: anchor_name and ANCHOR_END: anchor_name

    Marker lines are never part of the result. Inside the block, open
    markers of any name are skipped; close markers of other anchors are
    kept as ordinary content. If the close marker is missing, everything
    up to end of input is returned; if the open marker is missing, "".

    Args:
        text: Full text
        anchor_name: Name of the anchor block

    Returns:
        Block lines joined with newlines
    """
    retained: List[str] = []
    collecting = False

    for line in lines_split(text):
        if not collecting:
            start = ANCHOR_START.search(line)
            if start and start.group("anchor_name") == anchor_name:
                collecting = True
            continue

        end = ANCHOR_END.search(line)
        if end and end.group("anchor_name") == anchor_name:
            break
        if ANCHOR_START.search(line):
            continue
        retained.append(line)

    return "\n".join(retained)
