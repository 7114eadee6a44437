import numpy as np
import pytest

from maze_racer.engine.errors import ErrorKind, MazeError
from maze_racer.engine.grid_parser import (
    COMMA,
    SPACE,
    delimiter_for,
    parse_grid,
    trim_source_name,
)


def parse_error(text, delimiter=COMMA):
    with pytest.raises(MazeError) as info:
        parse_grid(text, delimiter, source="test.csv")
    return info.value


def test_three_by_three_csv():
    grid = parse_grid("3,3\n@,.,.\n.,#,.\n.,.,X\n", COMMA)
    assert grid.row_count == 3
    assert grid.column_count == 3
    assert grid.start_index == 0
    assert grid.destination_index == 8
    assert grid.cell_symbols == ("@", ".", ".", ".", "#", ".", ".", ".", "X")
    assert grid.free_mask.tolist() == [True, True, True, True, False, True, True, True, True]
    assert len(grid.cell_symbols) == len(grid.free_mask) == grid.row_count * grid.column_count


def test_space_delimited():
    grid = parse_grid("2 3\n@ # .\n. . x\n", SPACE)
    assert (grid.row_count, grid.column_count) == (2, 3)
    assert grid.start_index == 0
    assert grid.destination_index == 5
    # destination symbol kept verbatim
    assert grid.cell_symbols[5] == "x"
    assert grid.free_mask.tolist() == [True, False, True, True, True, True]


def test_barrier_symbols_stored_verbatim():
    grid = parse_grid("1,4\n@, ,%,X\n", COMMA)
    assert grid.cell_symbols == ("@", " ", "%", "X")
    assert grid.free_mask.tolist() == [True, False, False, True]


def test_header_padded_with_trailing_delimiters():
    grid = parse_grid("2,4,,\n@,.,.,.\n.,.,.,X\n", COMMA)
    assert (grid.row_count, grid.column_count) == (2, 4)


def test_crlf_and_missing_final_newline():
    grid = parse_grid("2,2\r\n@,.\r\n.,X", COMMA)
    assert grid.destination_index == 3
    assert grid.cell_symbols == ("@", ".", ".", "X")


def test_free_mask_is_read_only():
    grid = parse_grid("1,2\n@,X\n", COMMA)
    assert isinstance(grid.free_mask, np.ndarray)
    with pytest.raises(ValueError):
        grid.free_mask[0] = False


def test_unsupported_delimiter_rejected():
    with pytest.raises(ValueError):
        parse_grid("1,2\n@,X\n", ";")


# --- source names ---

def test_empty_source_name():
    with pytest.raises(MazeError) as info:
        trim_source_name("  \t\n")
    assert info.value.kind is ErrorKind.EMPTY_INPUT


def test_delimiter_from_extension():
    assert delimiter_for("maze.txt") == SPACE
    assert delimiter_for("  maze.csv \n") == COMMA
    assert delimiter_for("MAZE.CSV") == COMMA


@pytest.mark.parametrize("name", ["maze.json", "maze", "maze.txt.bak"])
def test_invalid_extension(name):
    with pytest.raises(MazeError) as info:
        delimiter_for(name)
    assert info.value.kind is ErrorKind.INVALID_EXTENSION


def test_empty_content():
    err = parse_error("   \n\n")
    assert err.kind is ErrorKind.EMPTY_INPUT


# --- header ---

def test_header_invalid_character():
    err = parse_error("3;3\n@,.,X\n")
    assert err.kind is ErrorKind.INVALID_DIGIT
    assert (err.row, err.column) == (0, 1)
    assert err.actual == "';'"


def test_header_letter_after_delimiter():
    err = parse_error("3,a\n")
    assert err.kind is ErrorKind.INVALID_DIGIT
    assert (err.row, err.column) == (0, 2)


def test_header_wrong_delimiter_for_variant():
    err = parse_error("2,2\n@ X\n. .\n", SPACE)
    assert err.kind is ErrorKind.INVALID_DIGIT
    assert err.column == 1


def test_header_single_size():
    err = parse_error("3\n@,X\n")
    assert err.kind is ErrorKind.INVALID_DIGIT


def test_header_third_size():
    err = parse_error("3,3,3\n")
    assert err.kind is ErrorKind.INVALID_DIGIT
    assert err.column == 4


@pytest.mark.parametrize(
    "header, column",
    [(",2,2", 0), ("2,,2", 2), (",2,,2", 0)],
)
def test_header_missing_size_before_delimiter(header, column):
    err = parse_error(header + "\n@,.\n.,X\n")
    assert err.kind is ErrorKind.INVALID_DIGIT
    assert (err.row, err.column) == (0, column)


def test_header_doubled_space_delimiter():
    err = parse_error("2  2\n@ .\n. X\n", SPACE)
    assert err.kind is ErrorKind.INVALID_DIGIT
    assert err.column == 2


# --- cells ---

def test_empty_cell():
    err = parse_error("2,3\n@,,.\n.,.,X\n")
    assert err.kind is ErrorKind.EMPTY_CELL
    assert (err.row, err.column) == (1, 2)


def test_leading_delimiter_is_empty_cell():
    err = parse_error("1,2\n,@,X\n")
    assert err.kind is ErrorKind.EMPTY_CELL
    assert (err.row, err.column) == (1, 0)


def test_trailing_delimiter_is_empty_cell():
    err = parse_error("2,2\n@,.,\n.,X\n")
    assert err.kind is ErrorKind.EMPTY_CELL
    assert (err.row, err.column) == (1, 4)


def test_two_characters_without_delimiter():
    err = parse_error("2,2\n@.,.\n.,X\n")
    assert err.kind is ErrorKind.DOUBLE_CHARACTER
    assert (err.row, err.column) == (1, 1)


def test_duplicate_start():
    err = parse_error("2,2\n@,@\n.,X\n")
    assert err.kind is ErrorKind.DOUBLE_CHARACTER
    assert (err.row, err.column) == (1, 2)


def test_duplicate_destination_any_case():
    err = parse_error("2,2\n@,X\n.,x\n")
    assert err.kind is ErrorKind.DOUBLE_CHARACTER
    assert (err.row, err.column) == (2, 2)


# --- sizes ---

def test_short_row_reports_row_number():
    err = parse_error("2,3\n@,.,.\n.,X\n")
    assert err.kind is ErrorKind.INCORRECT_MAZE_SIZE
    assert err.row == 2
    assert err.expected == "3 columns"
    assert err.actual == "2 columns"


def test_long_row():
    err = parse_error("1,2\n@,X,.\n")
    assert err.kind is ErrorKind.INCORRECT_MAZE_SIZE
    assert (err.row, err.column) == (1, 4)


def test_too_many_rows():
    err = parse_error("1,2\n@,X\n.,.\n")
    assert err.kind is ErrorKind.INCORRECT_MAZE_SIZE
    assert err.row == 2


def test_too_few_rows():
    err = parse_error("3,2\n@,X\n.,.\n")
    assert err.kind is ErrorKind.INCORRECT_MAZE_SIZE
    assert err.row == 3
    assert err.expected == "3 rows"
    assert err.actual == "2 rows"


def test_blank_line_in_body_is_a_short_row():
    err = parse_error("3,2\n@,.\n\n.,X\n")
    assert err.kind is ErrorKind.INCORRECT_MAZE_SIZE
    assert err.row == 2


def test_row_count_checked_before_markers():
    err = parse_error("2,2\n.,.\n")
    assert err.kind is ErrorKind.INCORRECT_MAZE_SIZE


# --- markers ---

def test_start_only_one_by_one_maze():
    err = parse_error("1,1\n@\n")
    assert err.kind is ErrorKind.INVALID_MAZE


def test_missing_start():
    err = parse_error("1,2\n.,X\n")
    assert err.kind is ErrorKind.INVALID_MAZE
    assert "@" in str(err)


def test_zero_sized_maze_has_no_markers():
    err = parse_error("0,0\n")
    assert err.kind is ErrorKind.INVALID_MAZE


def test_error_message_names_source_and_position():
    err = parse_error("2,2\n@.,.\n.,X\n")
    message = str(err)
    assert "DOUBLE_CHARACTER" in message
    assert "test.csv" in message
    assert "row 1, column 1" in message
