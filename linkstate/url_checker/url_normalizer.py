# -*- coding: utf-8 -*-
from urllib.parse import urlsplit

DEFAULT_PORTS = {"http": 80, "https": 443}


def is_http_url(url: str) -> bool:
    """
    Check whether the URL uses the http or https scheme.

    :param url: URL string.
    :return: True for http/https URLs.
    """
    return url.strip().lower().startswith(("http://", "https://"))


def normalize_url(url: str) -> str:
    """
    Canonicalize a URL for redirect loop detection.

    Rebuilds the URL as scheme://host[:port]path[?query] with the default
    port and the trailing slash removed, then lowercases it. The fragment is
    dropped. Input that cannot be parsed is only trimmed and lowercased.

    :param url: URL string.
    :return: Normalized URL.
    """
    simplified = url.strip().lower()
    try:
        parts = urlsplit(simplified)
        port = parts.port
    except ValueError:
        return simplified

    if not parts.scheme or not parts.netloc:
        return simplified

    host = parts.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    if port is not None and port != DEFAULT_PORTS.get(parts.scheme):
        host = f"{host}:{port}"

    normalized = f"{parts.scheme}://{host}{parts.path.rstrip('/')}"
    if parts.query:
        normalized = f"{normalized}?{parts.query}"
    return normalized
