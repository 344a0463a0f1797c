"""Tests for audit helpers module."""

import importlib.metadata
from unittest.mock import patch

import pytest

from cmsdoc.audit.helpers import generate_run_id, get_dependency_versions, get_package_version


@pytest.mark.unit
def test_generate_run_id_format_and_uniqueness() -> None:
    """Test run ID has correct format and successive calls are unique."""
    rid1 = generate_run_id()
    rid2 = generate_run_id()

    # Format: ISO8601__hex8
    parts = rid1.split("__")
    assert len(parts) == 2
    assert parts[0].endswith("Z")
    assert len(parts[1]) == 8

    assert rid1 != rid2


@pytest.mark.unit
def test_get_package_version_unknown_when_not_installed() -> None:
    """Test a missing distribution yields 'unknown'."""
    with patch(
        "importlib.metadata.version",
        side_effect=importlib.metadata.PackageNotFoundError("cmsdoc"),
    ):
        assert get_package_version() == "unknown"


@pytest.mark.unit
def test_get_package_version_installed() -> None:
    """Test the installed distribution version is returned."""
    with patch("importlib.metadata.version", return_value="9.9.9"):
        assert get_package_version() == "9.9.9"


@pytest.mark.unit
def test_get_dependency_versions() -> None:
    """Test known packages get a version and unknown ones 'unknown'."""
    versions = get_dependency_versions(["click", "surely-not-installed-pkg-xyz"])

    assert versions["click"] != "unknown"
    assert versions["surely-not-installed-pkg-xyz"] == "unknown"
