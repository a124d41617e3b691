"""
Remote fetch for webinclude directives

Blocking GET with requests; one request per directive, no caching and no
retry. Failures are reported as FetchTransportError or NonUTF8BodyError.
"""

from typing import Mapping, Optional

import requests

from ..config import appsettings
from .errors import FetchTransportError, NonUTF8BodyError
from .log import LOG


def url_fetch(
    url: str,
    headers: Optional[Mapping[str, str]] = None,
    timeout: Optional[float] = None,
) -> str:
    """
    Fetch url and return its body as text

    Args:
        url: Absolute URL
        headers: Request headers to attach (name -> value)
        timeout: Seconds to wait; defaults to appsettings.request_timeout

    Returns:
        Complete response body decoded as UTF-8

    Raises:
        FetchTransportError: Connection failure, unencodable header or HTTP status >= 400
        NonUTF8BodyError: Body is not valid UTF-8
    """
    if timeout is None:
        timeout = appsettings.request_timeout

    LOG(f"Fetching {url}", level=2)
    # http.client raises UnicodeEncodeError (a ValueError) for non-latin-1 header values
    try:
        resp = requests.get(url, headers=dict(headers or {}), timeout=timeout)
        resp.raise_for_status()
    except (requests.RequestException, ValueError) as e:
        raise FetchTransportError(url, f"{type(e).__name__}: {e}") from e

    try:
        body = resp.content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise NonUTF8BodyError(url, f"Body of {url} is not valid UTF-8: {e}") from e

    LOG(f"Fetched {len(body)} characters from {url}", level=3)
    return body
