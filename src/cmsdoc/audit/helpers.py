"""Run identifiers and version lookups stamped into audit logs."""

import importlib.metadata
import secrets

from cmsdoc.utils import get_iso_timestamp

__all__ = [
    "generate_run_id",
    "get_package_version",
    "get_dependency_versions",
]

UNKNOWN_VERSION = "unknown"


def generate_run_id() -> str:
    """Return a new run id: ``<UTC ISO8601 timestamp>__<8 hex chars>``."""
    return f"{get_iso_timestamp()}__{secrets.token_hex(4)}"


def _installed_version(distribution: str) -> str:
    try:
        return importlib.metadata.version(distribution)
    except importlib.metadata.PackageNotFoundError:
        return UNKNOWN_VERSION


def get_package_version() -> str:
    """Return the installed cmsdoc version, or ``"unknown"``."""
    return _installed_version("cmsdoc")


def get_dependency_versions(packages: list[str]) -> dict[str, str]:
    """Map each distribution name to its installed version.

    Parameters
    ----------
    packages : list[str]
        Distribution names as published on the package index.

    Returns
    -------
    dict[str, str]
        Name -> version; ``"unknown"`` for distributions not installed.
    """
    return {package: _installed_version(package) for package in packages}
