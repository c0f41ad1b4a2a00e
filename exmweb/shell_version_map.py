"""Mapping of supported shell versions to extension releases."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class MapEntry:
    """One shell version supported by a release of an extension."""

    shell_major_version: str
    shell_minor_version: str | None
    extension_package: int
    extension_version: float


def _split_version(shell_version: str) -> tuple[str, str | None]:
    major, _, minor = shell_version.partition(".")
    if "." not in shell_version:
        return major, None
    return major, minor


class ShellVersionMap:
    """Ordered collection of shell versions an extension supports."""

    def __init__(self) -> None:
        self._entries: list[MapEntry] = []

    def add(self, shell_version: str, ext_package: int, ext_version: float) -> None:
        """Record that ``shell_version`` is served by the given release."""
        major, minor = _split_version(shell_version)
        self._entries.append(
            MapEntry(
                shell_major_version=major,
                shell_minor_version=minor,
                extension_package=ext_package,
                extension_version=ext_version,
            )
        )

    def supports(self, shell_version: str) -> bool:
        """Return whether any entry covers ``shell_version``.

        The major versions must match, and the minor version of
        ``shell_version`` must be equal to or more specific than the stored one.
        A map without entries supports nothing.
        """
        if not self._entries:
            return False

        major, minor = _split_version(shell_version)
        for entry in self._entries:
            if entry.shell_major_version != major:
                continue
            if entry.shell_minor_version is None:
                return True
            if minor is not None and minor.startswith(entry.shell_minor_version):
                return True
        return False

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[MapEntry]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShellVersionMap):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ShellVersionMap({self._entries!r})"