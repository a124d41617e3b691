"""
Recursive substitution of {{#webinclude}} directives

The Expander walks the tokens of a text left to right, copies the text
between tokens verbatim, and splices in each token's replacement. Fetched
content is expanded again, one level deeper, until max_depth is reached.

A token that fails to resolve is logged together with its cause chain and
left in the output literally; siblings carry on.

Usage:
    expander = Expander(headers={"Authorization": "token abc"})
    page = expander.expand(source)
"""

from typing import Dict, List, Mapping, Optional

from ..config import appsettings
from .errors import DepthExceededError, MalformedURLError, WebIncludeError
from .lexer import links_find
from .log import ERROR, LOG, WARN
from .resolver import FetchFn, link_render
from .fetch import url_fetch


class Expander:
    """
    Depth-bounded recursive expander for one document run

    Holds the read-only header table and the counters for the run; the
    recursion depth is threaded explicitly through expand().
    """

    def __init__(
        self,
        headers: Optional[Mapping[str, str]] = None,
        max_depth: Optional[int] = None,
        fetch: FetchFn = url_fetch,
        strict: Optional[bool] = None,
    ) -> None:
        """
        Initialize the expander

        Args:
            headers: Header table attached to every fetch
            max_depth: Recursion cap (default appsettings.max_depth)
            fetch: Fetch collaborator (url, headers) -> body
            strict: Let MalformedURLError abort the run
                    (default appsettings.strict_mode)
        """
        self.headers: Dict[str, str] = dict(headers or {})
        self.max_depth = appsettings.max_depth if max_depth is None else max_depth
        self.fetch = fetch
        self.strict = appsettings.strict_mode if strict is None else strict
        self.counters: Dict[str, int] = {
            "resolved": 0,
            "escaped": 0,
            "failed": 0,
            "depth_exceeded": 0,
        }

    def expand(self, text: str, depth: int = 0) -> str:
        """
        Replace every directive in text with its resolved content

        Args:
            text: Text to expand
            depth: Current recursion depth (0 for a top-level document)

        Returns:
            Expanded text; everything outside directive spans is unchanged

        Raises:
            MalformedURLError: Only in strict mode
        """
        previous_end_index = 0
        replaced: List[str] = []

        for link in links_find(text):
            replaced.append(text[previous_end_index:link.start_index])

            try:
                new_content = link_render(link, self.headers, self.fetch)
            except WebIncludeError as e:
                if self.strict and isinstance(e, MalformedURLError):
                    raise
                self.failure_log(link.link_text, e)
                # keep the raw {{#...}} token in the output
                previous_end_index = link.start_index
                continue

            if link.kind is None:
                # unescaped text is literal, never scanned again
                self.counters["escaped"] += 1
                replaced.append(new_content)
            elif depth < self.max_depth:
                self.counters["resolved"] += 1
                replaced.append(self.expand(new_content, depth + 1))
            else:
                self.counters["resolved"] += 1
                self.counters["depth_exceeded"] += 1
                ERROR(str(DepthExceededError(depth, link.link_text)))
                replaced.append(new_content)
            previous_end_index = link.end_index

        replaced.append(text[previous_end_index:])
        return "".join(replaced)

    def failure_log(self, link_text: str, error: BaseException) -> None:
        """Log a failed directive and every exception in its cause chain"""
        self.counters["failed"] += 1
        ERROR(f'Error updating "{link_text}", {error}')
        cause = error.__cause__
        while cause is not None:
            WARN(f"Caused By: {cause}")
            cause = cause.__cause__


def replace_all(
    text: str,
    depth: int = 0,
    headers: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Expand text with a fresh Expander and the default fetch collaborator

    Args:
        text: Content unit to expand
        depth: Starting recursion depth
        headers: Header table for every fetch

    Returns:
        Expanded text
    """
    LOG(f"Expanding {len(text)} characters at depth {depth}", level=3)
    return Expander(headers=headers).expand(text, depth)
