"""Async client for the GNOME Shell extensions website: search, details, comments and images."""

__version__ = "0.1.0"

__all__ = [
    "image_resolver",
    "models",
    "providers",
    "request_handler",
    "shell_version_map",
    "types",
]