"""Workspace-root discovery from command-line arguments and config."""

from __future__ import annotations

import logging

from .location import Location

logger = logging.getLogger(__name__)


def normalized_workspace_roots(raw_roots: list[str]) -> list[Location]:
    """Parse roots preserving first-seen order and dropping blanks and duplicates."""
    roots: list[Location] = []
    for raw_root in raw_roots:
        if not raw_root or not raw_root.strip():
            continue
        root = Location.parse(raw_root)
        if root in roots:
            continue
        roots.append(root)
    return roots


def discover_workspace_roots(cli_roots: list[str] | None, config_roots: list[str]) -> list[Location]:
    """Return the workspace roots for this run.

    Roots given on the command line replace configured ones entirely. An
    empty result means the quick-open entry point is not offered.
    """
    source = cli_roots if cli_roots else config_roots
    roots = normalized_workspace_roots(list(source))
    logger.debug("workspace roots: %s", [str(root) for root in roots])
    return roots


__all__ = ["normalized_workspace_roots", "discover_workspace_roots"]
