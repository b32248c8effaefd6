import pytest

from scivis.fontmap import CharPosition, find_element, load_positions


def _write(tmp_path, text):
    path = tmp_path / "font.pos"
    path.write_text(text, encoding="latin-1")
    return path


def test_load_regular_line(tmp_path):
    path = _write(tmp_path, "A 10 20 30 40\n")
    positions = load_positions(path)
    assert positions == [CharPosition("A", (10, 20), (30, 40))]


def test_load_space_line(tmp_path):
    path = _write(tmp_path, "  1 2 3 4\n")
    positions = load_positions(path)
    assert positions == [CharPosition(" ", (1, 2), (3, 4))]


def test_malformed_lines_are_skipped(tmp_path):
    path = _write(tmp_path, "B 1 2\n\nC 5 6 7 8\nD 1 2 3 4 5 6 7\n")
    positions = load_positions(path)
    assert [p.c for p in positions] == ["C"]


def test_trailing_space_is_ignored(tmp_path):
    path = _write(tmp_path, "E 1 2 3 4 \n")
    positions = load_positions(path)
    assert positions == [CharPosition("E", (1, 2), (3, 4))]


def test_missing_file_gives_empty_list(tmp_path):
    assert load_positions(tmp_path / "absent.pos") == []


def test_invalid_number_raises(tmp_path):
    path = _write(tmp_path, "A x 2 3 4\n")
    with pytest.raises(ValueError):
        load_positions(path)


def test_size_property():
    p = CharPosition("A", (10, 20), (30, 45))
    assert p.size == (20, 25)


def test_find_element_found_and_fallback():
    positions = [
        CharPosition("_", (0, 0), (1, 1)),
        CharPosition("x", (2, 2), (3, 3)),
    ]
    assert find_element(positions, "x") is positions[1]
    assert find_element(positions, "q") is positions[0]


def test_find_element_empty_raises():
    with pytest.raises(LookupError):
        find_element([], "a")