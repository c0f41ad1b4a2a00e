"""Providers for comments, extension details and search results."""

from __future__ import annotations

import json
from enum import IntEnum
from typing import Any
from urllib.parse import quote

from .models import Comment, SearchResult, parse_comment, parse_search_result
from .request_handler import BASE_URL, RequestHandler


class SearchSort(IntEnum):
    """Orderings offered by the extension search."""

    POPULARITY = 0
    DOWNLOADS = 1
    RECENT = 2
    NAME = 3


_SORT_STRINGS = {
    SearchSort.DOWNLOADS: "downloads",
    SearchSort.RECENT: "recent",
    SearchSort.NAME: "name",
    SearchSort.POPULARITY: "popularity",
}


def get_sort_string(sort_type: int) -> str:
    """Return the query value for ``sort_type``; unknown values mean popularity."""
    return _SORT_STRINGS.get(sort_type, "popularity")


def _load(body: bytes | str) -> Any:
    return json.loads(body)


def parse_comments(body: bytes | str) -> list[Comment]:
    """Decode a JSON array of comment objects."""
    root = _load(body)
    if not isinstance(root, list):
        raise ValueError("comments must be a JSON array")
    return [parse_comment(item) for item in root]


def parse_extension(body: bytes | str) -> SearchResult:
    """Decode a single extension object."""
    root = _load(body)
    if not isinstance(root, dict):
        raise ValueError("extension info must be a JSON object")
    return parse_search_result(root)


def parse_search_results(body: bytes | str) -> list[SearchResult]:
    """Decode a JSON object whose ``extensions`` member lists extensions."""
    root = _load(body)
    if not isinstance(root, dict):
        raise ValueError("search results must be a JSON object")
    if "extensions" not in root:
        raise ValueError("search results lack member 'extensions'")
    extensions = root["extensions"]
    if not isinstance(extensions, list):
        raise ValueError("member 'extensions' must be a JSON array")
    return [parse_search_result(item) for item in extensions]


class CommentProvider(RequestHandler):
    """Fetches the comments left on an extension."""

    def handle_response(self, body: bytes) -> list[Comment]:
        return parse_comments(body)

    async def get_comments(
        self, extension_id: int, retrieve_all: bool = False
    ) -> list[Comment]:
        """Return the comments on the extension with package id ``extension_id``."""
        all_str = "true" if retrieve_all else "false"
        url = f"{BASE_URL}comments/all/?pk={int(extension_id)}&all={all_str}"
        return await self.request(url)


class DataProvider(RequestHandler):
    """Fetches the details of one extension by its UUID."""

    def handle_response(self, body: bytes) -> SearchResult:
        return parse_extension(body)

    async def get(self, uuid: str) -> SearchResult:
        """Return the extension identified by ``uuid``."""
        url = f"{BASE_URL}extension-info/?uuid={quote(uuid, safe='')}"
        return await self.request(url)


class SearchProvider(RequestHandler):
    """Searches the extensions site."""

    def handle_response(self, body: bytes) -> list[SearchResult]:
        return parse_search_results(body)

    async def query(
        self, query: str, sort_type: int = SearchSort.POPULARITY
    ) -> list[SearchResult]:
        """Return extensions matching ``query`` in the order ``sort_type``."""
        sort = get_sort_string(sort_type)
        url = f"{BASE_URL}extension-query/?search={quote(query, safe='')}&sort={sort}"
        return await self.request(url)