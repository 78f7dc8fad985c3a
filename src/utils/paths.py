from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

"""Lexical path resolution for typed command arguments.

Nothing here touches the filesystem: a path is resolved against the current
directory of the session and normalized purely from its text.
"""

PARENT = ".."
CURRENT = "."


@dataclass(frozen=True)
class PathStyle:
    """Lexical rules for one family of paths."""

    name: str
    separator: str
    alt_separator: Optional[str]
    has_drives: bool
    forbidden_chars: str

    def unify(self, path: str) -> str:
        if self.alt_separator:
            return path.replace(self.alt_separator, self.separator)
        return path

    def is_drive_designator(self, path: str) -> bool:
        return (
            self.has_drives and len(path) == 2 and path[0].isalpha() and path[1] == ":"
        )

    def drive_of(self, path: str) -> str:
        if self.has_drives and len(path) >= 2 and path[0].isalpha() and path[1] == ":":
            return path[:2]
        return ""


WINDOWS = PathStyle(
    name="windows",
    separator="\\",
    alt_separator="/",
    has_drives=True,
    forbidden_chars='/*?"<>|',
)
POSIX = PathStyle(
    name="posix",
    separator="/",
    alt_separator=None,
    has_drives=False,
    forbidden_chars='*?"<>|',
)


def host_style() -> PathStyle:
    return WINDOWS if os.name == "nt" else POSIX


def style_from_name(name: str) -> PathStyle:
    """Map a configured style name ('auto', 'windows', 'posix') to a PathStyle."""
    key = (name or "auto").strip().lower()
    if key == "windows":
        return WINDOWS
    if key == "posix":
        return POSIX
    if key == "auto":
        return host_style()
    raise ValueError(f"Unknown path style: {name}")


def normalize(path: str, style: Optional[PathStyle] = None) -> str:
    """Collapse separators, '.' and '..' segments of a path.

    A '..' removes the nearest preceding real segment. Past the drive or root
    anchor it is dropped, so the result never contains a '..' segment. An
    unanchored path made only of '..' collapses to an empty string.

    Examples (Windows style):
        "C:\\Users\\.."        -> "C:\\"
        "C:\\a\\b\\..\\..\\c"  -> "C:\\c"
        "..\\.."               -> ""
    """
    style = style or host_style()
    sep = style.separator
    path = style.unify(path)

    drive = style.drive_of(path)
    rest = path[len(drive):]
    rooted = bool(drive) or rest.startswith(sep)

    segments: list[str] = []
    for segment in rest.split(sep):
        if segment in ("", CURRENT):
            continue
        if segment == PARENT:
            if segments:
                segments.pop()
            continue
        segments.append(segment)

    body = sep.join(segments)
    if drive:
        return drive + sep + body
    if rooted:
        return sep + body
    return body


def resolve(
    raw: str, current_dir: Optional[str], style: Optional[PathStyle] = None
) -> Optional[str]:
    """Turn a typed path into a canonical absolute path.

    Args:
        raw: Path as typed by the user (already stripped of quotes)
        current_dir: Current directory of the session, None if there is none
        style: Path style, host style by default

    Returns:
        The normalized absolute path, or None when a relative path can not be
        anchored because there is no current directory
    """
    style = style or host_style()
    sep = style.separator
    path = style.unify(raw)

    # a drive root is always fully specified
    if style.is_drive_designator(path):
        return path + sep

    if style.drive_of(path) or (not style.has_drives and path.startswith(sep)):
        anchored = path
    elif path.startswith(sep):
        if current_dir is None:
            return None
        anchored = style.drive_of(current_dir) + sep + path.lstrip(sep)
    else:
        if current_dir is None:
            return None
        anchored = join(current_dir, path, style)

    return normalize(anchored, style)


def join(base: str, name: str, style: Optional[PathStyle] = None) -> str:
    style = style or host_style()
    sep = style.separator
    return style.unify(base).rstrip(sep) + sep + name.lstrip(sep)


def is_root(path: str, style: Optional[PathStyle] = None) -> bool:
    """True for a drive root ('C:\\') or the filesystem root ('/')."""
    style = style or host_style()
    normalized = normalize(path, style)
    drive = style.drive_of(normalized)
    return normalized == drive + style.separator


def parent(path: str, style: Optional[PathStyle] = None) -> str:
    """Parent directory of a canonical path; a root is its own parent."""
    style = style or host_style()
    return normalize(join(path, PARENT, style), style)


def base_name(path: str, style: Optional[PathStyle] = None) -> str:
    style = style or host_style()
    return normalize(path, style).rstrip(style.separator).rsplit(style.separator, 1)[-1]


def is_within(path: str, ancestor: str, style: Optional[PathStyle] = None) -> bool:
    """True when path equals ancestor or lies somewhere below it."""
    style = style or host_style()
    sep = style.separator
    candidate = normalize(path, style)
    root = normalize(ancestor, style)
    if style.has_drives:
        candidate, root = candidate.lower(), root.lower()
    if candidate == root:
        return True
    return candidate.startswith(root.rstrip(sep) + sep)
