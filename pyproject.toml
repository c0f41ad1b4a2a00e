[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exmweb"
version = "0.1.0"
description = "Async client for the GNOME Shell extensions website: search, extension info, comments and images"
requires-python = ">=3.10"
keywords = ["gnome", "shell", "extensions", "http", "client", "asyncio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "httpx",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["exmweb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
