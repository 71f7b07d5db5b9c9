"""Torrent records as reported through the qBittorrent-compatible API."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field, fields
from typing import Any


def _json(key: str, omitempty: bool = False, **kwargs: Any) -> Any:
    return field(metadata={"json": key, "omitempty": omitempty}, **kwargs)


def _to_dict(obj: Any) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for f in fields(obj):
        key = f.metadata.get("json")
        if key is None:
            continue
        value = getattr(obj, f.name)
        if f.metadata.get("omitempty") and not value:
            continue
        if isinstance(value, list):
            value = [v.to_dict() if hasattr(v, "to_dict") else v for v in value]
        result[key] = value
    return result


def _from_dict(cls: Any, data: dict[str, Any]) -> dict[str, Any]:
    kwargs = {}
    for f in fields(cls):
        key = f.metadata.get("json")
        if key is not None and key in data:
            kwargs[f.name] = data[key]
    return kwargs


@dataclass
class TorrentFile:
    """One file inside a torrent."""

    index: int = _json("index", True, default=0)
    name: str = _json("name", True, default="")
    size: int = _json("size", True, default=0)
    progress: int = _json("progress", True, default=0)
    priority: int = _json("priority", True, default=0)
    is_seed: bool = _json("is_seed", True, default=False)
    piece_range: list[int] = _json("piece_range", True, default_factory=list)
    availability: float = _json("availability", True, default=0.0)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TorrentFile":
        return cls(**_from_dict(cls, data))


@dataclass
class Torrent:
    """A torrent as the download client reports it."""

    id: str = _json("id", default="")
    debrid_id: str = _json("debrid_id", default="")
    debrid: str = _json("debrid", default="")
    torrent_path: str = ""
    files: list[TorrentFile] = _json("files", True, default_factory=list)

    added_on: int = _json("added_on", True, default=0)
    amount_left: int = _json("amount_left", default=0)
    auto_tmm: bool = _json("auto_tmm", default=False)
    availability: float = _json("availability", True, default=0.0)
    category: str = _json("category", True, default="")
    completed: int = _json("completed", default=0)
    completion_on: int = _json("completion_on", True, default=0)
    content_path: str = _json("content_path", default="")
    dl_limit: int = _json("dl_limit", default=0)
    dlspeed: int = _json("dlspeed", default=0)
    downloaded: int = _json("downloaded", default=0)
    downloaded_session: int = _json("downloaded_session", default=0)
    eta: int = _json("eta", default=0)
    fl_piece_prio: bool = _json("f_l_piece_prio", True, default=False)
    force_start: bool = _json("force_start", True, default=False)
    hash: str = _json("hash", default="")
    last_activity: int = _json("last_activity", True, default=0)
    magnet_uri: str = _json("magnet_uri", True, default="")
    max_ratio: int = _json("max_ratio", True, default=0)
    max_seeding_time: int = _json("max_seeding_time", True, default=0)
    name: str = _json("name", True, default="")
    num_complete: int = _json("num_complete", True, default=0)
    num_incomplete: int = _json("num_incomplete", True, default=0)
    num_leechs: int = _json("num_leechs", True, default=0)
    num_seeds: int = _json("num_seeds", True, default=0)
    priority: int = _json("priority", True, default=0)
    progress: float = _json("progress", default=0.0)
    ratio: int = _json("ratio", True, default=0)
    ratio_limit: int = _json("ratio_limit", True, default=0)
    save_path: str = _json("save_path", default="")
    seeding_time_limit: int = _json("seeding_time_limit", True, default=0)
    seen_complete: int = _json("seen_complete", True, default=0)
    seq_dl: bool = _json("seq_dl", default=False)
    size: int = _json("size", True, default=0)
    state: str = _json("state", True, default="")
    super_seeding: bool = _json("super_seeding", default=False)
    tags: str = _json("tags", True, default="")
    time_active: int = _json("time_active", True, default=0)
    total_size: int = _json("total_size", True, default=0)
    tracker: str = _json("tracker", True, default="")
    up_limit: int = _json("up_limit", True, default=0)
    uploaded: int = _json("uploaded", True, default=0)
    uploaded_session: int = _json("uploaded_session", True, default=0)
    upspeed: int = _json("upspeed", True, default=0)
    source: str = _json("source", True, default="")

    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def is_ready(self) -> bool:
        """True once nothing is left to fetch and the local path is known."""
        return (self.amount_left <= 0 or self.progress == 1) and self.torrent_path != ""

    def discord_context(self) -> str:
        return (
            f"\n\t\t**Name:** {self.name}"
            f"\n\t\t**Arr:** {self.category}"
            f"\n\t\t**Hash:** {self.hash}"
            f"\n\t\t**MagnetURI:** {self.magnet_uri}"
            f"\n\t\t**Debrid:** {self.debrid}"
            "\n\t"
        )

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Torrent":
        kwargs = _from_dict(cls, data)
        if "files" in kwargs:
            kwargs["files"] = [TorrentFile.from_dict(f) for f in kwargs["files"] or []]
        return cls(**kwargs)