"""File checks used when looking for broken symlinked media."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, replace
from typing import Iterable


@dataclass
class ContentFile:
    """A media file known to an arr, possibly a symlink into a mount."""

    path: str
    target_path: str = ""
    is_symlink: bool = False


def file_is_symlinked(path: str) -> bool:
    """True if ``path`` itself is a symbolic link."""
    try:
        return stat.S_ISLNK(os.lstat(path).st_mode)
    except OSError:
        return False


def get_symlink_target(path: str) -> str:
    """Return the absolute target of a symlink, or "" if ``path`` is not one."""
    if not file_is_symlinked(path):
        return ""
    try:
        target = os.readlink(path)
    except OSError:
        return ""
    if not os.path.isabs(target):
        target = os.path.join(os.path.dirname(path), target)
    return os.path.normpath(target)


def file_is_readable(path: str) -> bool:
    """True if ``path`` resolves to a regular file whose first bytes can be read."""
    try:
        info = os.stat(path)
        if not stat.S_ISREG(info.st_mode):
            return False
        with open(path, "rb") as handle:
            return len(handle.read(1024)) > 0
    except OSError:
        return False


def collect_files(files: Iterable[ContentFile]) -> dict[str, list[ContentFile]]:
    """Group symlinked files by the directory their target lives in.

    Returned entries are copies marked as symlinks, with ``target_path`` set
    to the target's file name; files that are not symlinks are left out.
    """
    parents: dict[str, list[ContentFile]] = {}
    for file in files:
        target = get_symlink_target(file.path)
        if not target:
            continue
        directory, name = os.path.split(target)
        parent = os.path.normpath(directory) if directory else "."
        parents.setdefault(parent, []).append(
            replace(file, is_symlink=True, target_path=name)
        )
    return parents


def find_broken_files(files: Iterable[ContentFile]) -> list[ContentFile]:
    """Return the symlinked files that can no longer be read."""
    return [
        file
        for group in collect_files(files).values()
        for file in group
        if not file_is_readable(file.path)
    ]