# exmweb

An asynchronous client for the GNOME Shell extensions website. It searches
the catalogue, fetches the details of a single extension, reads user
comments and downloads extension images, turning what the site returns into
plain Python objects.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

All network operations are coroutines built on `httpx.AsyncClient`. Every
provider, and `ImageResolver`, takes an optional client. If none is given it
creates its own and closes it in `aclose()`; a client passed in is left open
for its owner. Each of them can also be used as an async context manager,
which calls `aclose()` on exit.

### Searching

```python
import asyncio

from exmweb.providers import SearchProvider, SearchSort


async def main():
    async with SearchProvider() as provider:
        results = await provider.query("dash", SearchSort.DOWNLOADS)
        for result in results:
            if result.supports_shell_version("45.2"):
                print(result.name, result.uuid)


asyncio.run(main())
```

`SearchSort` offers `POPULARITY` (the default), `DOWNLOADS`, `RECENT` and
`NAME`. `get_sort_string` gives the value sent to the site; any value it
does not know maps to `"popularity"`. The query text is URL-encoded.

### Extension details and comments

```python
from exmweb.providers import CommentProvider, DataProvider

async with DataProvider() as data:
    info = await data.get("some-extension@example.com")

async with CommentProvider() as provider:
    comments = await provider.get_comments(info.pk, retrieve_all=False)

for comment in comments:
    print(comment.author, comment.rating, comment.comment)
```

`get` returns a `SearchResult`; `get_comments` returns a list of `Comment`.
A comment's `author` is the username of its author, and its `rating` is
`-1` when no rating was left (ratings are limited to -1..5).

`SearchResult` holds `uuid`, `name`, `creator`, `icon`, `screenshot`,
`link`, `description`, `pk` and `shell_version_map`.

### Images

```python
from exmweb.image_resolver import ImageResolver, resolve_url

async with ImageResolver() as resolver:
    image = await resolver.resolve(info.icon)  # a PIL image, or None
print(resolve_url(info.icon))                  # the absolute URL fetched
```

`resolve` returns `None` when given `None`, and otherwise downloads the
image and decodes it with Pillow.

### Shell version support

Each `SearchResult` carries a `ShellVersionMap` (from
`exmweb.shell_version_map`) listing the shell versions the extension was
released for, as `MapEntry` items. It supports `len()` and iteration, and
`add(shell_version, ext_package, ext_version)` records another entry.

`supports("3.38.1")` is true when an entry has the same major version and
its minor version is a prefix of the one asked about; an entry such as
`"40"`, with no minor part, matches any release of that major version. An
empty map supports nothing. `SearchResult.supports_shell_version` asks the
same of the result's map.

### Parsing without the network

`parse_search_results`, `parse_extension` and `parse_comments` in
`exmweb.providers` take a response body (bytes or text). `parse_search_result`,
`parse_comment` and `parse_shell_version_map` in `exmweb.models` take JSON
that has already been decoded. They build the same objects the providers
return, and raise `ValueError` for input of the wrong shape.

### Errors

`exmweb.request_handler.RequestError` is raised when a URL cannot be
requested, the request fails, the body cannot be parsed, or an image cannot
be decoded. HTTP status codes are not checked separately: an error page
fails as a body that cannot be parsed.

### Writing another provider

Subclass `exmweb.request_handler.RequestHandler`, override
`handle_response(body)` to turn the body into a result, and call
`await self.request(url)`. A `ValueError` from `handle_response`, or a result
of `None`, becomes a `RequestError`.

### Enumerations

`exmweb.types` defines `ExtensionType`, `ExtensionState` and
`InstallButtonState` with the numeric values the shell uses.

## What it does not do

The package only reads from the extensions website. It does not install,
enable, disable or remove extensions, does not talk to a running shell, and
has no command-line tool or graphical interface; the enumerations in
`exmweb.types` are provided for callers that do.