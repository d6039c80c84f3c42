[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vastestsea"
version = "0.1.0"
description = "JSON request handlers and SQLite storage for a register of languages and their words."
requires-python = ">=3.10"
keywords = ["languages", "words", "dictionary", "json", "api", "sqlite", "werkzeug"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "werkzeug",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vastestsea"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
