"""Unit tests for whole-text region scanning.

Each test has a single assertion and focuses on behavior.
"""

import pytest

from markerscan.core import MarkedRegion
from markerscan.scanning import find_marked_regions, has_unterminated_region, iter_marked_regions

# pylint: disable=missing-function-docstring

TEMPLATE = "a {{x}} b {{y{{z}}}} c"


class TestFindMarkedRegions:
    """Test discovery of top-level regions."""

    def test_finds_top_level_regions_in_order(self) -> None:
        regions = find_marked_regions(TEMPLATE, "{{", "}}")
        assert [(r.start, r.end) for r in regions] == [(2, 5), (10, 18)]

    def test_nested_region_stays_in_parent_content(self) -> None:
        regions = find_marked_regions(TEMPLATE, "{{", "}}")
        assert regions[1].content(TEMPLATE) == "y{{z}}"

    def test_text_without_markers_has_no_regions(self) -> None:
        assert find_marked_regions("plain text", "{{", "}}") == []

    def test_stops_at_unterminated_marker(self) -> None:
        regions = find_marked_regions("{{a}} {{b", "{{", "}}")
        assert len(regions) == 1

    def test_honors_start_index(self) -> None:
        regions = find_marked_regions(TEMPLATE, "{{", "}}", start=7)
        assert [r.start for r in regions] == [10]

    def test_negative_start_finds_nothing(self) -> None:
        """When start is negative, nothing is found instead of counting from the end."""
        assert find_marked_regions("{{a}} x {{b}}", "{{", "}}", start=-5) == []

    def test_long_markers(self) -> None:
        text = "<%a%> and <%b<%c%>%>"
        regions = find_marked_regions(text, "<%", "%>")
        assert [r.content(text) for r in regions] == ["a", "b<%c%>"]

    def test_empty_marker_raises(self) -> None:
        with pytest.raises(ValueError):
            find_marked_regions(TEMPLATE, "", "}}")

    def test_iterator_is_lazy(self) -> None:
        regions = iter_marked_regions(TEMPLATE, "{{", "}}")
        assert next(regions) == MarkedRegion(2, 5, "{{", "}}")


class TestHasUnterminatedRegion:
    """Test detection of an unmatched trailing opening marker."""

    def test_detects_unterminated_marker(self) -> None:
        assert has_unterminated_region("{{a}} {{b", "{{", "}}") is True

    def test_balanced_text_is_terminated(self) -> None:
        assert has_unterminated_region(TEMPLATE, "{{", "}}") is False

    def test_text_without_markers_is_terminated(self) -> None:
        assert has_unterminated_region("plain", "{{", "}}") is False

    def test_uses_given_regions(self) -> None:
        """When regions are passed in, the text is not scanned again."""
        assert has_unterminated_region("{{a}}", "{{", "}}", regions=[]) is True

    def test_given_regions_covering_text_are_terminated(self) -> None:
        regions = find_marked_regions("{{a}} {{b}}", "{{", "}}")
        assert has_unterminated_region("{{a}} {{b}}", "{{", "}}", regions) is False


class TestMarkedRegion:
    """Test MarkedRegion index helpers."""

    def test_span_includes_markers(self) -> None:
        region = MarkedRegion(2, 5, "{{", "}}")
        assert region.span(TEMPLATE) == "{{x}}"

    def test_stop_is_past_end_marker(self) -> None:
        region = MarkedRegion(2, 5, "{{", "}}")
        assert region.stop == 7

    def test_content_start_is_past_start_marker(self) -> None:
        region = MarkedRegion(10, 18, "{{", "}}")
        assert region.content_start == 12
