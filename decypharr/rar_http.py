"""Random access to a remote file through HTTP range requests."""

from __future__ import annotations

import random
import time
from typing import Callable, Optional, TypeVar

import requests

T = TypeVar("T")


class RarError(Exception):
    """Base error for archive access."""


class NetworkError(RarError):
    """A transient network failure; operations raising it are retried."""


class HttpFile:
    """A remote file read in arbitrary byte ranges.

    The total size is fetched with a HEAD request when the object is created.
    """

    def __init__(
        self,
        url: str,
        session: Optional[requests.Session] = None,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        timeout: float = 30.0,
    ) -> None:
        self.url = url
        self.session = session if session is not None else requests.Session()
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.timeout = timeout
        try:
            self.file_size = self._with_retry(self._fetch_size)
        except NetworkError as exc:
            raise NetworkError(f"failed to get file size: {exc}") from exc

    def _with_retry(self, operation: Callable[[], T]) -> T:
        last: Optional[NetworkError] = None
        for attempt in range(self.max_retries + 1):
            if attempt:
                delay = self.retry_delay * (1 << (attempt - 1))
                time.sleep(delay + random.uniform(0, delay / 4))
            try:
                return operation()
            except NetworkError as exc:
                last = exc
        raise NetworkError(f"after {self.max_retries} retries: {last}") from last

    def _fetch_size(self) -> int:
        try:
            resp = self.session.head(self.url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise NetworkError(str(exc)) from exc
        if resp.status_code != 200:
            raise NetworkError(f"unexpected status code: {resp.status_code}")
        length = resp.headers.get("Content-Length", "")
        if not length:
            raise NetworkError("content length not provided")
        try:
            return int(length.strip())
        except ValueError as exc:
            raise NetworkError(str(exc)) from exc

    def read_at(self, size: int, offset: int) -> bytes:
        """Read up to ``size`` bytes at ``offset``; an empty result means end of file."""
        if size <= 0:
            return b""
        if self.file_size > 0:
            remaining = self.file_size - offset
            if remaining <= 0:
                return b""
            size = min(size, remaining)

        def fetch() -> bytes:
            headers = {"Range": f"bytes={offset}-{offset + size - 1}"}
            try:
                resp = self.session.get(self.url, headers=headers, timeout=self.timeout)
            except requests.RequestException as exc:
                raise NetworkError(str(exc)) from exc
            if resp.status_code == 206:
                return resp.content[:size]
            if resp.status_code == 200:
                data = resp.content
                if len(data) <= offset:
                    return b""
                return data[offset:offset + size]
            if resp.status_code == 416:
                return b""
            raise NetworkError(f"unexpected status code: {resp.status_code}")

        return self._with_retry(fetch)