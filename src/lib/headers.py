"""
Header table configuration

Builds the read-only name -> value table attached to every fetch of a run.
Sources, later ones winning:

1. [preprocessor.webinclude.headers] in the book configuration (TOML)
2. WEBINCLUDE_HEADERS from the environment (AppSettings.headers)
3. NAME=VALUE overrides from the command line

Non-string values are skipped, never an error.
"""

import tomllib
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from ..config import appsettings
from .errors import HeaderConfigError
from .log import LOG


def headers_fromTable(table: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """
    Keep the string-valued entries of a header table

    Args:
        table: Raw configuration table, or None

    Returns:
        New dict of header name -> value
    """
    headers: Dict[str, str] = {}
    if not isinstance(table, Mapping):
        return headers

    for key, value in table.items():
        if isinstance(value, str):
            headers[str(key)] = value
        else:
            LOG(f"Skipping header {key!r}: value is not a string", level=2)
    return headers


def headers_fromBookConfig(
    config: Optional[Mapping[str, Any]], name: Optional[str] = None
) -> Dict[str, str]:
    """
    Read preprocessor.<name>.headers from a parsed book configuration

    Args:
        config: Book configuration mapping (book.toml or mdbook context)
        name: Preprocessor table name (default appsettings.preprocessor_name)

    Returns:
        Header table ({} when the table is absent)
    """
    name = name or appsettings.preprocessor_name
    table: Any = config or {}
    for key in ("preprocessor", name, "headers"):
        if not isinstance(table, Mapping):
            return {}
        table = table.get(key)
    return headers_fromTable(table)


def headerOverride_parse(override: str) -> Tuple[str, str]:
    """
    Split a NAME=VALUE command line override

    Raises:
        HeaderConfigError: If there is no '=' or the name is empty
    """
    name, sep, value = override.partition("=")
    name = name.strip()
    if not sep or not name:
        raise HeaderConfigError(f"Expected NAME=VALUE header, got {override!r}")
    return name, value.strip()


def headers_load(
    config_file: Optional[Path] = None, overrides: Iterable[str] = ()
) -> Dict[str, str]:
    """
    Assemble the header table for a run

    Args:
        config_file: Optional TOML book configuration
        overrides: NAME=VALUE strings

    Returns:
        Merged header table

    Raises:
        HeaderConfigError: Unreadable configuration file or bad override
    """
    headers: Dict[str, str] = {}

    if config_file is not None:
        try:
            with open(config_file, "rb") as f:
                config = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise HeaderConfigError(f"Could not read {config_file}: {e}") from e
        headers.update(headers_fromBookConfig(config))
        LOG(f"Loaded {len(headers)} header(s) from {config_file}", level=2)

    headers.update(headers_fromTable(appsettings.headers))

    for override in overrides:
        name, value = headerOverride_parse(override)
        headers[name] = value

    return headers
