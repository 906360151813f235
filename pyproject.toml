[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cads"
version = "0.1.0"
description = "Building blocks for discovering packet checksum algorithms: primitive operations, an operation registry, packet datasets and search result containers"
requires-python = ">=3.10"
dependencies = []
keywords = ["checksum", "crc", "reverse-engineering", "radio", "protocol", "packets"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cads"]

[tool.pytest.ini_options]
addopts = "-ra"
