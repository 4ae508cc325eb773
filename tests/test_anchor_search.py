import pytest

from _pdftrail.input_bytes import InputBytes
from _pdftrail.trailer import (
    END_OF_FILE_SEARCH_RANGE,
    StartXrefKeyword,
    find_anchor,
    scan_for_pattern,
)


class CountingInputBytes(InputBytes):
    def __init__(self, data):
        super().__init__(data)
        self.bytes_read = 0

    def move_next(self):
        did_move = super().move_next()
        if did_move:
            self.bytes_read += 1
        return did_move


def test_keyword_patterns():
    assert StartXrefKeyword.STARTXREF.pattern == b"startxref"
    assert StartXrefKeyword.STARTREF.pattern == b"startref"
    assert len(StartXrefKeyword.STARTXREF.pattern) == 9
    assert len(StartXrefKeyword.STARTREF.pattern) == 8


def test_candidates_order():
    assert StartXrefKeyword.candidates() == (StartXrefKeyword.STARTXREF,)
    assert StartXrefKeyword.candidates(lenient=True) == (
        StartXrefKeyword.STARTXREF,
        StartXrefKeyword.STARTREF,
    )


def test_scan_for_pattern_records_first_byte_of_each_match():
    source = InputBytes(b"xx startxref yy startxref")
    assert scan_for_pattern(source, 0, b"startxref") == [3, 16]


def test_scan_for_pattern_from_start_offset():
    source = InputBytes(b"xx startxref yy startxref")
    assert scan_for_pattern(source, 4, b"startxref") == [16]


def test_scan_for_pattern_does_not_restart_on_mismatching_byte():
    # The byte which breaks a partial match is not considered as the
    # start of a new match.
    source = InputBytes(b"sstartxref")
    assert scan_for_pattern(source, 0, b"startxref") == []


def test_find_anchor_returns_last_occurrence():
    contents = b"startxref\n1\n%%EOF\nstartxref\n2\n%%EOF\n"
    assert find_anchor(InputBytes(contents), StartXrefKeyword.STARTXREF) == 18


def test_find_anchor_in_file_shorter_than_window():
    source = CountingInputBytes(b"startxref\n0\n")
    assert find_anchor(source, StartXrefKeyword.STARTXREF) == 0
    assert source.bytes_read == source.length


def test_find_anchor_not_found():
    source = InputBytes(b"%PDF-1.4\n%%EOF\n")
    assert find_anchor(source, StartXrefKeyword.STARTXREF) is None


def test_find_anchor_empty_file():
    assert find_anchor(InputBytes(b""), StartXrefKeyword.STARTXREF) is None


def test_find_anchor_widens_window():
    contents = b"%PDF-1.4\nstartxref\n9\n%%EOF\n" + b"x" * 5000
    assert find_anchor(InputBytes(contents), StartXrefKeyword.STARTXREF) == 9


def test_find_anchor_searches_start_of_file():
    # After doubling, the last window is clamped to the start of the file.
    contents = b"startxref\n0\n" + b"x" * (3 * END_OF_FILE_SEARCH_RANGE)
    assert find_anchor(InputBytes(contents), StartXrefKeyword.STARTXREF) == 0


def test_find_anchor_stops_widening_when_found():
    contents = b"startxref\n0\n" + b"x" * 8000 + b"startxref\n1\n%%EOF"
    source = CountingInputBytes(contents)
    assert find_anchor(source, StartXrefKeyword.STARTXREF) == 8012
    assert source.bytes_read == END_OF_FILE_SEARCH_RANGE


@pytest.mark.parametrize("file_length", [1, 2047, 2048, 2049, 10_000, 100_000])
def test_find_anchor_cost_is_linear(file_length):
    source = CountingInputBytes(b"x" * file_length)
    assert find_anchor(source, StartXrefKeyword.STARTXREF) is None
    assert file_length <= source.bytes_read <= 3 * file_length


def test_find_anchor_with_custom_search_range():
    contents = b"startxref\n0\n" + b"x" * 100
    source = CountingInputBytes(contents)
    assert find_anchor(source, StartXrefKeyword.STARTXREF, search_range=16) == 0
    assert source.bytes_read == 16 + 32 + 64 + len(contents)


@pytest.mark.parametrize("search_range", [0, -1])
def test_find_anchor_invalid_search_range(search_range):
    with pytest.raises(ValueError, match="search_range"):
        find_anchor(InputBytes(b"x"), StartXrefKeyword.STARTXREF, search_range)
