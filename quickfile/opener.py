"""Open collaborators invoked once navigation reaches a leaf.

``EditorOpener`` runs ``$EDITOR`` on a local path mirroring the remote
location; ``PrintOpener`` writes the location to a stream so the picker can
be used from shell pipelines.
"""

from __future__ import annotations

import logging
import os
import posixpath
import shlex
import subprocess
import sys
from pathlib import Path
from typing import TextIO

from .location import Location

logger = logging.getLogger(__name__)


def local_path_for(location: Location, remote_root: Location | None, local_root: Path | None) -> Path:
    """Map a remote location onto the local filesystem.

    Without a ``local_root`` the remote path is used as-is. Locations outside
    ``remote_root`` are also returned unmapped.
    """
    if local_root is None or remote_root is None:
        return Path(location.path)
    relative = posixpath.relpath(location.path, remote_root.path)
    if relative == ".." or relative.startswith("../"):
        return Path(location.path)
    return local_root / relative


def launch_editor(target: Path) -> str | None:
    """Run ``$EDITOR`` on ``target``; return an error message instead of raising."""
    editor_env = os.environ.get("EDITOR", "").strip()
    if not editor_env:
        return "Cannot edit: $EDITOR is not set."
    cmd = shlex.split(editor_env)
    if not cmd:
        return "Cannot edit: $EDITOR is empty."

    try:
        subprocess.run([*cmd, str(target)], check=False)
    except OSError as exc:
        return f"Failed to launch editor: {exc}"
    return None


class EditorOpener:
    def __init__(self, remote_root: Location | None = None, local_root: Path | None = None) -> None:
        self.remote_root = remote_root
        self.local_root = local_root

    def __call__(self, location: Location) -> str | None:
        target = local_path_for(location, self.remote_root, self.local_root)
        logger.info("opening %s in $EDITOR as %s", location, target)
        error = launch_editor(target)
        if error is not None:
            logger.warning("%s", error)
        return error


class PrintOpener:
    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def __call__(self, location: Location) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(f"{location}\n")
        stream.flush()


__all__ = ["local_path_for", "launch_editor", "EditorOpener", "PrintOpener"]
