"""Build version information."""

from __future__ import annotations

from dataclasses import dataclass

VERSION = ""
CHANNEL = ""


@dataclass(frozen=True)
class Info:
    version: str
    channel: str

    def __str__(self) -> str:
        return f"{self.version}-{self.channel}"


def get_info() -> Info:
    """Return the version and release channel of this build."""
    return Info(version=VERSION, channel=CHANNEL)