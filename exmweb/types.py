"""Enumerations shared by the extension manager components."""

from __future__ import annotations

from enum import IntEnum


class ExtensionType(IntEnum):
    """Where an installed extension lives."""

    SYSTEM = 1
    PER_USER = 2


class ExtensionState(IntEnum):
    """Lifecycle state of an extension as reported by the shell."""

    ENABLED = 1
    DISABLED = 2
    ERROR = 3
    OUT_OF_DATE = 4
    DOWNLOADING = 5
    INITIALIZED = 6
    UNINSTALLED = 99


class InstallButtonState(IntEnum):
    """State of the install button shown for a remote extension."""

    DEFAULT = 0
    INSTALLED = 1
    UNSUPPORTED = 2