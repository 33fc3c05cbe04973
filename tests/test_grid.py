import pytest

from slicer.grid import (
    Cell,
    FormatError,
    Grid,
    Rectangle,
    Topping,
    area,
    format_solution,
    parse_solution,
    slice_char,
)

T, M = Topping.TOMATO, Topping.MUSHROOM


def _grid(text):
    return Grid.parse(text)


def test_parse_header_and_counts():
    grid = _grid("3 5 1 6\nTTTTT\nTMMMT\nTTTTT\n")
    assert (grid.rows, grid.cols) == (3, 5)
    assert grid.min_ingredient == 1
    assert grid.max_size == 6
    assert grid.remaining(T) == 12
    assert grid.remaining(M) == 3
    assert grid.surface == 15
    assert grid.toppings[1][1] is M


def test_parse_tolerates_trailing_blank_lines():
    grid = _grid("1 2 0 1\nTM\n\n\n")
    assert grid.rows == 1


@pytest.mark.parametrize(
    "text",
    [
        "",
        "3 3 1\nTTT\nTTT\nTTT\n",
        "a 3 1 6\nTTT\n",
        "0 3 1 6\n",
        "1 1 -1 6\nT\n",
        "1 1 1 0\nT\n",
        "2 3 1 6\nTTT\n",
        "2 3 1 6\nTTT\nTT\n",
        "1 3 1 6\nTXT\n",
        "1 3 1 6\nTTT\nMMM\n",
    ],
)
def test_parse_rejects_malformed_input(text):
    with pytest.raises(FormatError):
        _grid(text)


def test_format_error_is_a_value_error():
    assert issubclass(FormatError, ValueError)


def test_topping_count_and_remaining_after():
    grid = _grid("2 3 1 6\nTMT\nMMT\n")
    rect = Rectangle(0, 0, 1, 1)
    assert grid.topping_count(T, rect) == 1
    assert grid.topping_count(M, rect) == 3
    assert grid.remaining_after(T, rect) == 2
    assert grid.remaining_after(M, rect) == 0
    # reversed corners describe the same rectangle
    assert grid.topping_count(M, Rectangle(1, 1, 0, 0)) == 3


def test_area_uses_absolute_extent():
    assert area(Rectangle(0, 0, 0, 0)) == 1
    assert area(Rectangle(1, 2, 3, 4)) == 9
    assert area(Rectangle(3, 4, 1, 2)) == 9


def test_cut_assigns_one_slice_id_and_skips_consumed_cells():
    grid = _grid("2 2 0 4\nTM\nMT\n")
    first = grid.cut(Rectangle(0, 1, 0, 0))
    assert first == Rectangle(0, 0, 0, 1)
    assert grid.used == 2
    assert grid.remaining(T) == 1
    assert grid.remaining(M) == 1

    second = grid.cut(Rectangle(0, 0, 1, 1))
    assert second == Rectangle(0, 0, 1, 1)
    assert grid.used == 4
    assert grid.remaining(T) == 0
    assert grid.remaining(M) == 0
    assert grid.slice_ids == [[0, 0], [1, 1]]
    assert grid.is_empty()


def test_cut_cells_no_longer_count_as_toppings():
    grid = _grid("1 4 1 4\nTMTM\n")
    grid.cut(Rectangle(0, 0, 0, 1))
    assert grid.topping_count(T, Rectangle(0, 0, 0, 3)) == 1
    assert grid.remaining_after(M, Rectangle(0, 0, 0, 3)) == 0


def test_waste_marks_cell_and_counts():
    grid = _grid("1 2 1 2\nTM\n")
    grid.waste(Cell(0, 0))
    assert grid.waste_count == 1
    assert grid.used == 0
    assert grid.remaining(T) == 0
    assert not grid.is_uncut(Cell(0, 0))
    assert grid.first_uncut_cell() == Cell(0, 1)


def test_waste_rejects_consumed_cell():
    grid = _grid("1 2 1 2\nTM\n")
    grid.cut(Rectangle(0, 0, 0, 1))
    with pytest.raises(ValueError):
        grid.waste(Cell(0, 0))


def test_neighbours_stop_at_border_and_consumed_cells():
    grid = _grid("2 2 0 4\nTM\nMT\n")
    assert grid.right_of(Cell(0, 0)) == Cell(0, 1)
    assert grid.below_of(Cell(0, 0)) == Cell(1, 0)
    assert grid.right_of(Cell(0, 1)) is None
    assert grid.below_of(Cell(1, 0)) is None

    grid.waste(Cell(0, 1))
    assert grid.right_of(Cell(0, 0)) is None
    grid.cut(Rectangle(1, 0, 1, 0))
    assert grid.below_of(Cell(0, 0)) is None


def test_first_uncut_cell_is_row_major():
    grid = _grid("2 2 0 4\nTM\nMT\n")
    grid.cut(Rectangle(0, 0, 1, 0))
    assert grid.first_uncut_cell() == Cell(0, 1)
    grid.cut(Rectangle(0, 1, 0, 1))
    assert grid.first_uncut_cell() == Cell(1, 1)
    grid.waste(Cell(1, 1))
    assert grid.first_uncut_cell() is None
    assert grid.is_empty()


def test_slice_diagram_marks_slices_waste_and_unvisited():
    grid = _grid("2 3 0 6\nTMT\nMTM\n")
    grid.cut(Rectangle(0, 0, 1, 0))
    grid.cut(Rectangle(0, 1, 0, 2))
    grid.waste(Cell(1, 1))
    assert grid.slice_diagram() == "0 1 1\n0 #  \n"


def test_slice_char_skips_punctuation():
    assert slice_char(0) == "0"
    assert slice_char(9) == "9"
    assert slice_char(10) == "A"
    assert slice_char(35) == "Z"


def test_coverage_percentage():
    grid = _grid("1 3 0 3\nTMT\n")
    grid.cut(Rectangle(0, 0, 0, 1))
    assert grid.coverage() == 66.67


def test_solution_text_format():
    rects = [Rectangle(0, 0, 2, 1), Rectangle(0, 2, 2, 2)]
    text = format_solution(rects)
    assert text == "2\n0 0 2 1\n0 2 2 2\n"
    assert parse_solution(text) == rects
    assert format_solution([]) == "0\n"


@pytest.mark.parametrize("text", ["", "x\n", "2\n0 0 0 0\n", "1\n0 0 0\n", "1\n0 0 a 1\n"])
def test_parse_solution_rejects_malformed_text(text):
    with pytest.raises(FormatError):
        parse_solution(text)
