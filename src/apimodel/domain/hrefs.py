"""Href derivation helpers — pure functions over strings.

Href layout::

    {scheme}://{host}[:{port}]/{href_type}/v{version}/{resource}[{sub-path}]

Link hrefs append a link path and an optional query string, then substitute
``{placeholder}`` variables. Substitution runs on the finished string,
*after* query encoding, so a placeholder inside a query value arrives
percent-encoded and is left alone.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

# Characters left unescaped in query keys and values, on top of the
# RFC 3986 unreserved set that quote() never escapes.
_QUERY_SAFE = "!*'()"


def normalize_path(path: str | None) -> str:
    """Return *path* with a leading ``/``; empty stays empty.

    Examples:
        >>> normalize_path("_batch")
        '/_batch'
        >>> normalize_path("/{id}")
        '/{id}'
        >>> normalize_path("")
        ''
    """
    if not path:
        return ""
    return path if path.startswith("/") else f"/{path}"


def scheme_for(use_https: bool) -> str:
    return "https" if use_https else "http"


def base_url(host: str, *, use_https: bool = False, port: int | None = None) -> str:
    """Return ``scheme://host[:port]``; the port segment is omitted when unset."""
    port_segment = f":{port}" if port is not None else ""
    return f"{scheme_for(use_https)}://{host}{port_segment}"


def resource_path(href_type: str, version: int, name: str) -> str:
    return f"/{href_type}/v{version}/{name}"


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def encode_query(params: Mapping[str, Any]) -> str:
    """Encode *params* as ``key=value&...`` with percent-encoding.

    Booleans render as ``true``/``false``, ``None`` as an empty value, and
    lists/tuples as one ``key=value`` pair per item.

    Examples:
        >>> encode_query({"version": True})
        'version=true'
        >>> encode_query({"tag": ["a", "b c"]})
        'tag=a&tag=b%20c'
    """
    pairs: list[str] = []
    for key, value in params.items():
        encoded_key = quote(str(key), safe=_QUERY_SAFE)
        items = value if isinstance(value, (list, tuple)) else [value]
        for item in items:
            pairs.append(f"{encoded_key}={quote(_stringify(item), safe=_QUERY_SAFE)}")
    return "&".join(pairs)


def substitute_path_variables(href: str, variables: Mapping[str, Any]) -> str:
    """Replace every ``{name}`` occurrence in *href* with its variable value.

    Placeholders without a matching variable are left as-is.
    """
    for name, value in variables.items():
        href = href.replace(f"{{{name}}}", _stringify(value))
    return href
