[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "formcodec"
version = "0.1.0"
description = "Encode Python values, lists, mappings and dataclasses as URL form data."
requires-python = ">=3.10"
dependencies = []
keywords = ["form", "urlencoded", "query string", "marshal", "serialization", "dataclasses"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["formcodec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
