"""Tests for conversion configuration."""

from pathlib import Path

import pytest

from cmsdoc.engine import ConversionConfig, ConversionResult
from cmsdoc.parse import DataMergeMode


@pytest.mark.unit
def test_defaults() -> None:
    """Test default configuration values."""
    config = ConversionConfig()

    assert config.merge_mode is DataMergeMode.LAST_FIELD
    assert config.strict is True
    assert config.validate_output is False
    assert config.log_path is None


@pytest.mark.unit
def test_merge_mode_coerced_from_string() -> None:
    """Test a string merge mode becomes the enum member."""
    assert ConversionConfig(merge_mode="merge").merge_mode is DataMergeMode.MERGE


@pytest.mark.unit
def test_invalid_merge_mode() -> None:
    """Test an unknown merge mode is rejected with the valid choices."""
    with pytest.raises(ValueError, match="last_field"):
        ConversionConfig(merge_mode="concat")  # type: ignore[arg-type]


@pytest.mark.unit
def test_log_path_coerced(tmp_path: Path) -> None:
    """Test a string log path becomes a Path."""
    config = ConversionConfig(log_path=str(tmp_path / "run.jsonl"))  # type: ignore[arg-type]

    assert config.log_path == tmp_path / "run.jsonl"


@pytest.mark.unit
def test_to_dict_is_json_friendly(tmp_path: Path) -> None:
    """Test the dictionary form holds only plain values."""
    config = ConversionConfig(merge_mode=DataMergeMode.MERGE, log_path=tmp_path / "a.jsonl")

    assert config.to_dict() == {
        "merge_mode": "merge",
        "strict": True,
        "validate_output": False,
        "log_path": str(tmp_path / "a.jsonl"),
    }


@pytest.mark.unit
def test_result_to_dict() -> None:
    """Test the result dictionary form."""
    result = ConversionResult(
        success=True,
        total_documents=2,
        documents_written=2,
        documents_failed=0,
        fields_dropped=1,
    )

    assert result.to_dict()["documents_written"] == 2
    assert result.to_dict()["error_message"] is None
