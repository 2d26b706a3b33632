"""Tests for UTF-8 aware truncation boundaries."""

import pytest

from nxdt_paths.core import utf8_byte_limit, utf8_truncation_boundary


@pytest.mark.unit
class TestUtf8TruncationBoundary:
    """Boundary search within a byte budget."""

    def test_budget_covering_whole_string(self):
        assert utf8_truncation_boundary("abcdef", 6) == 6
        assert utf8_truncation_boundary("abcdef", 100) == 6

    def test_codepoint_ending_on_budget_is_excluded(self):
        assert utf8_truncation_boundary("abcdef", 3) == 2

    def test_multibyte_boundaries(self):
        # "é" is 2 bytes: ends at 2, 4, 6
        assert utf8_truncation_boundary("ééé", 5) == 4
        assert utf8_truncation_boundary("ééé", 4) == 2
        assert utf8_truncation_boundary("ééé", 3) == 2

    def test_no_codepoint_fits(self):
        assert utf8_truncation_boundary("🎮🎮", 4) == 0
        assert utf8_truncation_boundary("abc", 1) == 0

    def test_zero_budget_and_empty_string(self):
        assert utf8_truncation_boundary("abc", 0) == 0
        assert utf8_truncation_boundary("", 10) == 0
        assert utf8_truncation_boundary(b"", 10) == 0

    def test_stops_at_nul_codepoint(self):
        assert utf8_truncation_boundary(b"ab\x00cdef", 5) == 2

    def test_stops_at_malformed_sequence(self):
        assert utf8_truncation_boundary(b"ab\xffcdef", 5) == 2

    def test_stops_at_sequence_past_size(self):
        data = "a€".encode("utf-8")
        # Only 3 of the 4 bytes are considered, so "€" runs past the end
        assert utf8_byte_limit(data, 3, 2) == 1

    def test_size_larger_than_buffer(self):
        # The dangling lead byte ends the scan instead of being decoded
        assert utf8_byte_limit(b"a\xc3", 10, 5) == 1
        assert utf8_byte_limit(b"abc", 10, 2) == 1

    def test_result_is_bounded_and_on_a_boundary(self, multibyte_names):
        for name in multibyte_names:
            data = name.encode("utf-8")
            for budget in range(len(data) + 2):
                boundary = utf8_truncation_boundary(data, budget)
                assert boundary <= budget
                assert boundary <= len(data)
                data[:boundary].decode("utf-8")
                if budget < len(data):
                    assert boundary < budget or boundary == 0
