import io

import pytest

from bsqsolver.parser import Map, MapError, load_map, parse_header, parse_map


def test_parse_header_basic():
    assert parse_header("9.ox") == (9, ".", "o", "x")


def test_parse_header_stops_at_non_digit():
    count, empty, obstacle, full = parse_header("3z.ox")
    assert (count, empty, obstacle, full) == (3, ".", "o", "x")


@pytest.mark.parametrize("line", ["1.o", "", "0.ox", "a.ox", "5..x", "5.oo", "5xox"])
def test_parse_header_rejects(line):
    with pytest.raises(MapError):
        parse_header(line)


def test_parse_map_rows():
    grid_map = parse_map(io.StringIO("2.ox\n...\n.o.\n"))
    assert grid_map.rows == ("...", ".o.")
    assert (grid_map.lines, grid_map.cols) == (2, 3)
    assert (grid_map.empty, grid_map.obstacle, grid_map.full) == (".", "o", "x")


def test_parse_map_ignores_extra_rows():
    grid_map = parse_map(io.StringIO("1.ox\n..\n..\n"))
    assert grid_map.rows == ("..",)


def test_parse_map_last_row_without_newline():
    grid_map = parse_map(io.StringIO("2.ox\n..\no."))
    assert grid_map.rows == ("..", "o.")


def test_parse_map_accepts_any_characters():
    grid_map = parse_map(io.StringIO("1.ox\nab\n"))
    assert grid_map.rows == ("ab",)


def test_parse_map_inconsistent_rows():
    with pytest.raises(MapError):
        parse_map(io.StringIO("2.ox\n...\n..\n"))


def test_parse_map_missing_rows():
    with pytest.raises(MapError):
        parse_map(io.StringIO("3.ox\n..\n..\n"))


def test_parse_map_bad_header():
    with pytest.raises(MapError):
        parse_map(io.StringIO("2.oo\n..\n..\n"))


def test_parse_map_empty_input():
    with pytest.raises(MapError):
        parse_map(io.StringIO(""))


def test_parse_map_long_header_runs_into_grid():
    header = "0" * 27 + "1.ox"
    grid_map = parse_map(io.StringIO(header + "abc\n"))
    assert grid_map.rows == ("abc",)
    assert grid_map.lines == 1


def test_parse_map_empty_rows_when_input_ends():
    grid_map = parse_map(io.StringIO("2.ox\n"))
    assert grid_map.rows == ("", "")
    assert grid_map.cols == 0


def test_load_map_reads_file(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text("2.ox\n.o\n..\n", encoding="utf-8")
    assert load_map(str(path)) == Map(".", "o", "x", (".o", ".."))


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        load_map(str(tmp_path / "absent.txt"))


def test_map_error_is_value_error():
    with pytest.raises(ValueError):
        parse_header("x")