"""Exception hierarchy shared by the listing client, controller and CLI."""

from __future__ import annotations


class QuickFileError(Exception):
    """Base class for all user-facing quickfile failures."""


class NetworkError(QuickFileError):
    """The listing endpoint could not be reached or answered with an error status."""


class MalformedResponseError(QuickFileError):
    """The listing endpoint answered with something other than a JSON string array."""


class NoWorkspaceRootError(QuickFileError):
    """No workspace root is available to start a navigation session from."""


class ConfigError(QuickFileError):
    """Invalid configuration or command-line value."""


class CommandUnavailableError(QuickFileError):
    """A command was executed while unknown or disabled."""


__all__ = [
    "QuickFileError",
    "NetworkError",
    "MalformedResponseError",
    "NoWorkspaceRootError",
    "ConfigError",
    "CommandUnavailableError",
]
