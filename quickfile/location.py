"""Hierarchical location values addressing remote directories and files.

A :class:`Location` is a URI-like value: a scheme, an optional authority and
a normalized POSIX path. Normalization happens once at construction so that
equality is plain comparison of the normalized fields.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from urllib.parse import quote, urlsplit

DEFAULT_SCHEME = "file"


def normalize_path(path: str) -> str:
    """Collapse separators, ``.`` and ``..`` segments of a POSIX path."""
    if not path:
        return "/"
    normalized = posixpath.normpath(path)
    # normpath keeps a leading "//" per POSIX; treat it as root.
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")
    return normalized


def split_extension(segment: str) -> tuple[str, str]:
    """Split one path segment into ``(stem, ext)`` at its final dot.

    The extension keeps its leading dot. A segment without a dot has an empty
    extension, and a dotfile such as ``.gitignore`` has an empty stem.
    """
    idx = segment.rfind(".")
    if idx < 0:
        return segment, ""
    return segment[:idx], segment[idx:]


@dataclass(frozen=True)
class Location:
    """Normalized address of one node in the remote tree."""

    path: str
    scheme: str = DEFAULT_SCHEME
    authority: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", normalize_path(self.path))
        object.__setattr__(self, "scheme", (self.scheme or DEFAULT_SCHEME).lower())

    @classmethod
    def parse(cls, text: str) -> Location:
        """Build a location from a plain path or a ``scheme://authority/path`` URI."""
        raw = text.strip()
        if "://" not in raw:
            return cls(raw)
        parts = urlsplit(raw)
        return cls(parts.path, scheme=parts.scheme, authority=parts.netloc)

    def join(self, name: str) -> Location:
        """Return the child location named ``name`` below this one."""
        return Location(
            posixpath.join(self.path, name.lstrip("/")),
            scheme=self.scheme,
            authority=self.authority,
        )

    @property
    def parent(self) -> Location:
        return Location(posixpath.dirname(self.path), scheme=self.scheme, authority=self.authority)

    @property
    def name(self) -> str:
        """Final path segment, empty for the root."""
        return posixpath.basename(self.path)

    @property
    def stem(self) -> str:
        return split_extension(self.name)[0]

    @property
    def ext(self) -> str:
        return split_extension(self.name)[1]

    @property
    def is_root(self) -> bool:
        return self.path == "/"

    def uri(self) -> str:
        """Full URI form, for example ``file:///workspace/src``."""
        return f"{self.scheme}://{self.authority}{quote(self.path, safe='/')}"

    def __str__(self) -> str:
        if self.scheme == DEFAULT_SCHEME and not self.authority:
            return self.path
        return self.uri()


__all__ = ["DEFAULT_SCHEME", "Location", "normalize_path", "split_extension"]
