from formatting import format_aadhaar, format_elements, format_matrix, format_tables
from group import DihedralGroup
from tables import build_tables


def test_format_matrix():
    assert format_matrix("X", [(1, 2), (3, 4)]) == "X = [\n  [1, 2],\n  [3, 4],\n]"


def test_format_tables_contains_all_three():
    text = format_tables(build_tables())
    assert text.startswith("D = [\n  [0, 1, 2, 3, 4, 5, 6, 7, 8, 9],")
    assert "P = [\n  [0, 1, 2, 3, 4, 5, 6, 7, 8, 9],\n  [1, 5, 7, 6, 2, 8, 3, 0, 9, 4]," in text
    assert text.endswith("inv = [\n  0, 4, 3, 2, 1, 5, 6, 7, 8, 9\n]")


def test_format_elements():
    lines = format_elements(DihedralGroup()).splitlines()
    assert len(lines) == 11
    assert lines[1] == "  0 -> [0, 1, 2, 3, 4] (rotation)"


def test_format_aadhaar():
    assert format_aadhaar("123456789012") == "1234 5678 9012"
    assert format_aadhaar("12345") == "12345"
