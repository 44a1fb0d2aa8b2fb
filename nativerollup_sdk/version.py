"""
Package version.

An installed distribution reports its version through package metadata.
A source checkout has no metadata, so the version is taken from the
``[project]`` table of the neighbouring ``pyproject.toml``.
"""
import importlib.metadata
import pathlib

import tomli

DISTRIBUTION = "nativerollup-sdk"
UNKNOWN_VERSION = "0.1.0"

PYPROJECT = pathlib.Path(__file__).resolve().parent.parent / "pyproject.toml"


def _pyproject_version(pyproject: pathlib.Path = PYPROJECT) -> str:
    try:
        with pyproject.open("rb") as f:
            return tomli.load(f)["project"]["version"]
    except (FileNotFoundError, KeyError):
        return UNKNOWN_VERSION


def _read_version() -> str:
    try:
        return importlib.metadata.version(DISTRIBUTION)
    except importlib.metadata.PackageNotFoundError:
        return _pyproject_version()


__version__ = _read_version()
