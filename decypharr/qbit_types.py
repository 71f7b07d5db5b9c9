"""Data shapes of the qBittorrent-compatible API."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


@dataclass
class BuildInfo:
    """Versions of the libraries the emulated client claims to be built with."""

    libtorrent: str = ""
    bitness: int = 0
    boost: str = ""
    openssl: str = ""
    qt: str = ""
    zlib: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def build_info() -> BuildInfo:
    """Return the build information reported by ``/app/buildInfo``."""
    return BuildInfo(
        libtorrent="1.2.11.0",
        bitness=64,
        boost="1.75.0",
        openssl="1.1.1i",
        qt="5.15.2",
        zlib="1.2.11",
    )


@dataclass
class TorrentCategory:
    """A category and the folder its downloads are saved to."""

    name: str
    save_path: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "savePath": self.save_path}


@dataclass
class TorrentProperties:
    """Generic properties of one torrent; zero values are left out of the JSON."""

    addition_date: int = 0
    comment: str = ""
    completion_date: int = 0
    created_by: str = ""
    creation_date: int = 0
    dl_limit: int = 0
    dl_speed: int = 0
    dl_speed_avg: int = 0
    eta: int = 0
    last_seen: int = 0
    nb_connections: int = 0
    nb_connections_limit: int = 0
    peers: int = 0
    peers_total: int = 0
    piece_size: int = 0
    pieces_have: int = 0
    pieces_num: int = 0
    reannounce: int = 0
    save_path: str = ""
    seeding_time: int = 0
    seeds: int = 0
    seeds_total: int = 0
    share_ratio: int = 0
    time_elapsed: int = 0
    total_downloaded: int = 0
    total_downloaded_session: int = 0
    total_size: int = 0
    total_uploaded: int = 0
    total_uploaded_session: int = 0
    total_wasted: int = 0
    up_limit: int = 0
    up_speed: int = 0
    up_speed_avg: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name)
        }