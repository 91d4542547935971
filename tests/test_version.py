"""Tests for version normalization."""

import pytest

from unity_package_creator.core.version import format_version, normalize_version


class TestNormalizeVersion:
    """Test splitting raw versions into three segments."""

    def test_empty_string_defaults_all_segments(self) -> None:
        """Test that an empty version becomes 1.0.0."""
        assert normalize_version("") == ["1", "0", "0"]

    def test_single_segment_is_padded(self) -> None:
        """Test that missing minor and patch segments are filled."""
        assert normalize_version("2") == ["2", "0", "0"]

    def test_empty_minor_segment_defaults(self) -> None:
        """Test that a trailing dot leaves an empty minor that defaults to 0."""
        assert normalize_version("2.") == ["2", "0", "0"]

    def test_empty_major_segment_defaults(self) -> None:
        """Test that a leading dot defaults the major segment to 1."""
        assert normalize_version(".5") == ["1", "5", "0"]

    def test_overflow_segments_join_into_patch(self) -> None:
        """Test that segments past the third are rejoined verbatim."""
        assert normalize_version("1.2.3.4") == ["1", "2", "3.4"]
        assert normalize_version("1.0.0-preview-3.1") == ["1", "0", "0-preview-3.1"]

    @pytest.mark.parametrize("raw", ["", "7", "7.", "7.1", ".", "a.b"])
    def test_short_inputs_always_yield_three_segments(self, raw: str) -> None:
        """Test that zero to two segments always produce exactly three."""
        assert len(normalize_version(raw)) == 3


class TestFormatVersion:
    """Test the joined, display form of a version."""

    def test_documented_edge_cases(self) -> None:
        """Test the documented edge cases."""
        assert format_version("") == "1.0.0"
        assert format_version("2") == "2.0.0"
        assert format_version("2.") == "2.0.0"
        assert format_version("1.2.3.4") == "1.2.3.4"
        assert format_version("1.0.0-preview-3.1") == "1.0.0-preview-3.1"

    def test_spaces_become_hyphens(self) -> None:
        """Test that spaces are replaced after joining."""
        assert format_version("1.0.0 preview") == "1.0.0-preview"
        assert format_version("1 .0") == "1-.0.0"

    @pytest.mark.parametrize(
        "raw", ["", "2", "2.", "1.2.3", "1.2.3.4", "1.0.0-preview-3.1", "1.2."]
    )
    def test_idempotent(self, raw: str) -> None:
        """Test that formatting its own output changes nothing."""
        once = format_version(raw)
        assert format_version(once) == once
