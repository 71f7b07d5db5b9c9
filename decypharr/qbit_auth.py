"""Identifying the arr behind a request to the qBittorrent-compatible API."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from typing import Iterable, MutableMapping, Optional, Union
from urllib.parse import urlsplit


@dataclass
class ArrCredentials:
    """Connection details of an arr instance that talks to this client."""

    name: str
    host: str = ""
    token: str = ""
    source: str = ""
    selected_debrid: str = ""


def validate_service_url(url: str) -> None:
    """Raise ValueError unless ``url`` is an http(s) URL or a ``host:port`` pair."""
    if url == "":
        raise ValueError("URL cannot be empty")

    parts = urlsplit(url)
    if parts.scheme and parts.netloc:
        if parts.scheme not in ("http", "https"):
            raise ValueError("URL scheme must be http or https")
        return

    if ":" in url and "://" not in url:
        try:
            parts = urlsplit("http://" + url)
            port = parts.port
        except ValueError as exc:
            raise ValueError(f"invalid host:port format: {exc}") from exc
        if not parts.netloc:
            raise ValueError("host is required in host:port format")
        if port is None:
            raise ValueError("port is required in host:port format")
        return

    raise ValueError(f"invalid URL format: {url}")


def decode_auth_header(header: str) -> tuple[str, str]:
    """Split an ``Authorization`` value holding base64 ``host:token`` into its parts.

    A header that is not exactly two space-separated words yields two empty
    strings; undecodable content raises ValueError.
    """
    words = header.split(" ")
    if len(words) != 2:
        return "", ""
    try:
        raw = base64.b64decode(words[1], validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 in authorization header: {exc}") from exc
    bearer = raw.decode("utf-8", errors="replace")
    colon = bearer.rfind(":")
    if colon == -1:
        raise ValueError("authorization value has no host:token separator")
    return bearer[:colon], bearer[colon + 1:]


def split_hashes(value: Union[str, Iterable[str], None]) -> list[str]:
    """Return trimmed hashes from a ``|``-separated string or a list of form values."""
    if not value:
        return []
    items = value.split("|") if isinstance(value, str) else list(value)
    return [item.strip() for item in items]


def resolve_arr(
    arrs: MutableMapping[str, ArrCredentials],
    category: str,
    authorization: str,
) -> Optional[ArrCredentials]:
    """Find or create the arr for ``category`` using the request's credentials.

    The arr is stored in ``arrs`` and returned only when its host is a valid
    service URL; otherwise None is returned and nothing is added.
    """
    try:
        host, token = decode_auth_header(authorization)
        decoded = True
    except ValueError:
        host, token, decoded = "", "", False

    arr = arrs.get(category)
    if arr is None:
        arr = ArrCredentials(name=category)

    if decoded:
        host = host.strip()
        if host:
            arr.host = host
        token = token.strip()
        if token:
            arr.token = token
    arr.source = "auto"

    try:
        validate_service_url(arr.host)
    except ValueError:
        return None

    arrs[arr.name] = arr
    return arr