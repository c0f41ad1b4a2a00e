"""Data models for comments and search results from the extensions site."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .shell_version_map import ShellVersionMap

_MAX_INT = 2**31 - 1


def _optional_string(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"member {key!r} must be a string")
    return value


def _integer(data: Mapping[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"member {key!r} must be an integer")
    return value


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a JSON object")
    return data


@dataclass(frozen=True)
class Comment:
    """A user comment on an extension; a rating of -1 means no rating."""

    comment: str | None = None
    author: str | None = None
    rating: int = -1

    def __post_init__(self) -> None:
        if not -1 <= self.rating <= 5:
            raise ValueError(f"rating {self.rating} is outside -1..5")


@dataclass(frozen=True)
class SearchResult:
    """An extension as listed by the extensions site."""

    uuid: str | None = None
    name: str | None = None
    creator: str | None = None
    icon: str | None = None
    screenshot: str | None = None
    link: str | None = None
    description: str | None = None
    pk: int = 0
    shell_version_map: ShellVersionMap = field(default_factory=ShellVersionMap)

    def __post_init__(self) -> None:
        if not 0 <= self.pk <= _MAX_INT:
            raise ValueError(f"package id {self.pk} is out of range")

    def supports_shell_version(self, shell_version: str) -> bool:
        """Return whether this extension has a release for ``shell_version``."""
        if shell_version is None:
            raise ValueError("shell_version is required")
        return self.shell_version_map.supports(shell_version)


def parse_shell_version_map(data: Any) -> ShellVersionMap:
    """Build a map from the ``shell_version_map`` JSON object."""
    data = _require_mapping(data, "shell_version_map")
    version_map = ShellVersionMap()
    for shell_version, release in data.items():
        release = _require_mapping(release, f"release for {shell_version!r}")
        try:
            package = release["pk"]
            version = release["version"]
        except KeyError as missing:
            raise ValueError(
                f"release for {shell_version!r} lacks member {missing.args[0]!r}"
            ) from None
        if isinstance(package, bool) or not isinstance(package, int):
            raise ValueError(f"package of {shell_version!r} must be an integer")
        if isinstance(version, bool) or not isinstance(version, (int, float)):
            raise ValueError(f"version of {shell_version!r} must be a number")
        version_map.add(shell_version, package, float(version))
    return version_map


def parse_comment(data: Any) -> Comment:
    """Build a comment from its JSON object; the author is its username."""
    data = _require_mapping(data, "comment")
    author_node = data.get("author")
    author = None
    if author_node is not None:
        author_node = _require_mapping(author_node, "author")
        author = _optional_string(author_node, "username")
    return Comment(
        comment=_optional_string(data, "comment"),
        author=author,
        rating=_integer(data, "rating", -1),
    )


def parse_search_result(data: Any) -> SearchResult:
    """Build a search result from an extension JSON object."""
    data = _require_mapping(data, "extension")
    map_node = data.get("shell_version_map")
    version_map = (
        ShellVersionMap() if map_node is None else parse_shell_version_map(map_node)
    )
    return SearchResult(
        uuid=_optional_string(data, "uuid"),
        name=_optional_string(data, "name"),
        creator=_optional_string(data, "creator"),
        icon=_optional_string(data, "icon"),
        screenshot=_optional_string(data, "screenshot"),
        link=_optional_string(data, "link"),
        description=_optional_string(data, "description"),
        pk=_integer(data, "pk", 0),
        shell_version_map=version_map,
    )