"""
Exception hierarchy for webinclude

Per-directive errors (fetch and resolve failures) are caught by the expander,
logged with their cause chain, and leave the original token in place.
MalformedURLError is per-directive too unless strict mode is on.
"""


class WebIncludeError(Exception):
    """Base class for all webinclude errors"""


class MalformedURLError(WebIncludeError):
    """Directive target is not an absolute URL"""

    def __init__(self, url: str) -> None:
        super().__init__(f"Invalid URL format: {url!r}")
        self.url = url


class FetchError(WebIncludeError):
    """Fetch collaborator failed to return a body"""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class FetchTransportError(FetchError):
    """Connection, protocol or HTTP status failure"""


class NonUTF8BodyError(FetchError):
    """Response body is not valid UTF-8"""


class ResolveError(WebIncludeError):
    """A directive could not be turned into replacement text"""


class DepthExceededError(WebIncludeError):
    """Recursion cap reached while expanding fetched content"""

    def __init__(self, depth: int, link_text: str) -> None:
        super().__init__(
            f"Stack depth exceeded ({depth}) while expanding {link_text}. "
            "Check for cyclic includes"
        )
        self.depth = depth
        self.link_text = link_text


class HeaderConfigError(WebIncludeError):
    """Header configuration could not be read"""
