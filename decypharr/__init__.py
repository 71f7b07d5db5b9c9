"""qBittorrent-compatible data shapes, arr request helpers, HTTP range reads and symlink repair checks."""

__version__ = "0.1.0"